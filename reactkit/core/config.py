"""reactkit runtime configuration and settings."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from reactkit.core.errors import ConfigError

PACKAGE_DIR = Path(__file__).parent.parent

DEFAULT_TEMPLATE_DIR = PACKAGE_DIR / "templates"
DEFAULT_FRAGMENTS_DIR = PACKAGE_DIR / "fragments"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class ReactkitConfig:
    """Runtime configuration for project composition.

    Attributes:
        template_dir: Directory holding ``default/`` and one directory per feature
        fragments_dir: Directory holding ``<target>/<name>.yml`` config fragments
        dev_server_port: Port written into the generated dev-server settings (default: 3000)
        test_runner_config: Generate ``jest.config.js`` alongside the bundler config
    """

    template_dir: Path = field(default_factory=lambda: DEFAULT_TEMPLATE_DIR)
    fragments_dir: Path = field(default_factory=lambda: DEFAULT_FRAGMENTS_DIR)
    dev_server_port: int = 3000
    test_runner_config: bool = True

    @classmethod
    def from_env(cls) -> "ReactkitConfig":
        """Create config from environment variables.

        Environment variables:
            REACTKIT_TEMPLATE_DIR: Alternative template directory
            REACTKIT_FRAGMENTS_DIR: Alternative fragments directory
            REACTKIT_DEV_SERVER_PORT: Dev-server port in the bundler config
            REACTKIT_TEST_RUNNER: Set to 0/false/no/off to skip the test-runner config

        Returns:
            ReactkitConfig instance with values from environment or defaults

        Raises:
            ConfigError: If REACTKIT_DEV_SERVER_PORT is not an integer
        """
        template_dir = os.getenv("REACTKIT_TEMPLATE_DIR")
        fragments_dir = os.getenv("REACTKIT_FRAGMENTS_DIR")
        test_runner = os.getenv("REACTKIT_TEST_RUNNER")
        port = os.getenv("REACTKIT_DEV_SERVER_PORT")
        try:
            dev_server_port = int(port) if port else cls.dev_server_port
        except ValueError:
            raise ConfigError(
                f"REACTKIT_DEV_SERVER_PORT must be an integer, got '{port}'"
            ) from None
        return cls(
            template_dir=Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR,
            fragments_dir=Path(fragments_dir) if fragments_dir else DEFAULT_FRAGMENTS_DIR,
            dev_server_port=dev_server_port,
            test_runner_config=(
                test_runner is None or test_runner.strip().lower() not in _FALSE_VALUES
            ),
        )


# Global config instance (can be overridden)
_config: Optional[ReactkitConfig] = None


def get_config() -> ReactkitConfig:
    """Get the global reactkit configuration.

    Returns:
        ReactkitConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = ReactkitConfig.from_env()
    return _config


def set_config(config: Optional[ReactkitConfig]) -> None:
    """Replace the global configuration; ``None`` re-reads the environment on next use."""
    global _config
    _config = config
