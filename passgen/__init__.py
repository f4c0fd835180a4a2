"""
Secure random password generator.
"""

from .config import PasswordConfig
from .errors import ConfigurationError, EmptyPoolError, PassgenError, RandomSourceError
from .generator import generate, sample

__all__ = [
    "PasswordConfig",
    "generate",
    "sample",
    "PassgenError",
    "ConfigurationError",
    "EmptyPoolError",
    "RandomSourceError",
]
