"""Custom exceptions for checklib."""


class CheckLibError(Exception):
    """Base exception for all checklib errors."""


class ConfigError(CheckLibError):
    """Raised when an environment setting cannot be parsed."""


class ReferenceParseError(CheckLibError):
    """Raised when a CDN URL does not fit its provider's path grammar."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"cannot parse {url!r}: {reason}")


class RegistryLookupError(CheckLibError):
    """Raised when a registry response carries no usable version."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"lookup failed for {name!r}: {reason}")
