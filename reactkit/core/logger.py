"""Logging for reactkit: rich console output, optionally mirrored to a file."""
import logging
from pathlib import Path
from typing import Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console()

ROOT_LOGGER = "reactkit"
DEFAULT_LOG_FILE = Path("reactkit.log")
FILE_FORMAT = logging.Formatter(
    "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

_file_handlers: Dict[Path, logging.FileHandler] = {}


def _level(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.INFO


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> Path:
    """Mirror reactkit log records into ``log_file`` (default ``./reactkit.log``).

    Each file gets one handler however often it is requested.
    """
    path = (Path(log_file) if log_file else DEFAULT_LOG_FILE).resolve()
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(_level(verbose))

    if path not in _file_handlers:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(FILE_FORMAT)
        root.addHandler(handler)
        _file_handlers[path] = handler
        root.info(f"Logging to {path}")

    _file_handlers[path].setLevel(_level(verbose))
    return path


def set_verbose(verbose: bool) -> None:
    """Switch every reactkit logger between INFO and DEBUG."""
    level = _level(verbose)
    logging.getLogger(ROOT_LOGGER).setLevel(level)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith(f"{ROOT_LOGGER}.") and isinstance(logger, logging.Logger):
            logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return ``name``'s logger with a rich console handler attached once."""
    logger = logging.getLogger(name)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger
