"""Library-specific exceptions.

Transport and engine errors raised by a client are never wrapped in these;
they reach the caller unchanged.
"""


class SearchModelError(Exception):
    """Base exception for searchmodel errors."""


class ConfigurationError(SearchModelError):
    """Raised when client configuration is invalid or incomplete."""
