"""Exception hierarchy for doctoc."""

from __future__ import annotations


class DocTocError(RuntimeError):
    """Base class for failures reported by doctoc."""


class ConfigError(DocTocError):
    """Raised when the configuration file cannot be parsed."""


class InvalidConfigurationError(DocTocError):
    """Raised when an option value is rejected before the pipeline runs."""


class UnsupportedPlatformError(DocTocError):
    """Raised when an anchor dialect is requested that doctoc does not know."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Unknown platform: {identifier}")
        self.identifier = identifier


__all__ = [
    "ConfigError",
    "DocTocError",
    "InvalidConfigurationError",
    "UnsupportedPlatformError",
]
