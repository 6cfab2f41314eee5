"""reactkit - scaffold React projects from composable templates."""

__version__ = "0.3.0"
