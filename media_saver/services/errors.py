"""Custom exceptions for service layer operations."""


class CopyError(Exception):
    """Raised when copying a single file fails at the filesystem layer."""

    def __init__(self, source, destination, cause: OSError):
        super().__init__(f"{source} -> {destination}: {cause}")
        self.source = source
        self.destination = destination
        self.cause = cause


class ProbeError(Exception):
    """Raised when reading media metadata from a file fails."""


class UnsupportedMediaError(ProbeError):
    """Raised when a file's extension is not in the allow-list."""


class ConfigError(Exception):
    """Raised when the YAML configuration file cannot be loaded."""
