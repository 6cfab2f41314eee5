"""Exception types raised by reactkit."""


class ReactkitError(Exception):
    """Base class for all reactkit errors."""
    pass


class ManifestError(ReactkitError):
    """Raised when a manifest cannot take part in a merge.

    Manifest problems are recoverable: the composer logs them and carries on
    with the remaining features.
    """

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class MissingManifestError(ManifestError):
    """Raised when one side of a manifest merge does not exist."""

    def __init__(self, path):
        super().__init__(path, "manifest not found")


class MalformedManifestError(ManifestError):
    """Raised when a manifest is not a JSON object."""
    pass


class UnknownFeatureError(ReactkitError, ValueError):
    """Raised when a feature name is not in the registry."""

    def __init__(self, name: str, known):
        self.name = name
        self.known = list(known)
        super().__init__(
            f"Unknown feature '{name}'. Available: {', '.join(self.known)}"
        )


class FragmentError(ReactkitError):
    """Raised when a config fragment file cannot be loaded."""
    pass


class CompositionError(ReactkitError):
    """Raised when the project composer is driven out of order."""
    pass


class ConfigError(ReactkitError):
    """Raised when an environment setting cannot be parsed."""
    pass
