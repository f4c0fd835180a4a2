"""
passgen.errors
Exceptions raised by the password generator core.
"""


class PassgenError(Exception):
    """Base class for every error raised by passgen."""


class ConfigurationError(PassgenError, ValueError):
    """Invalid or unsatisfiable configuration (empty pool, length < 1)."""


class EmptyPoolError(PassgenError, ValueError):
    """Sampling was attempted against an empty character pool."""


class RandomSourceError(PassgenError, RuntimeError):
    """The operating system's secure random source failed."""
