"""
passgen.charsets
Character classes, exclusion sets and pool construction.
"""

import logging
from types import MappingProxyType
from typing import Dict

logger = logging.getLogger(__name__)

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"
SPECIAL = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# canonical order: upper, lower, digits, special
CHARACTER_CLASSES = MappingProxyType({
    "upper": UPPER,
    "lower": LOWER,
    "digits": DIGITS,
    "special": SPECIAL,
})

# visually confusable characters, removed per class when no_similar is set
SIMILAR_CHARS = MappingProxyType({
    "upper": "ILO",
    "lower": "ilo",
    "digits": "01",
})

# punctuation that reads badly in some contexts; applies to special only
AMBIGUOUS_CHARS = "{}[]()/\\'\"`~,;:.<>"


def remove_chars(source: str, chars: str) -> str:
    """Return `source` without any occurrence of any character in `chars`."""
    drop = set(chars)
    return "".join(c for c in source if c not in drop)


def _filtered(name: str, config) -> str:
    base = CHARACTER_CLASSES[name]
    if config.no_similar and name in SIMILAR_CHARS:
        base = remove_chars(base, SIMILAR_CHARS[name])
    if config.no_ambiguous and name == "special":
        base = remove_chars(base, AMBIGUOUS_CHARS)
    return base


def class_sets(config) -> Dict[str, str]:
    """
    Filtered character set for every class enabled in `config`,
    keyed by class name in canonical order.
    """
    enabled = {
        "upper": config.use_upper,
        "lower": config.use_lower,
        "digits": config.use_digits,
        "special": config.use_special,
    }
    return {name: _filtered(name, config) for name in CHARACTER_CLASSES if enabled[name]}


def build_pool(config) -> str:
    """
    Concatenate the enabled, filtered classes into the effective pool.
    An empty result is returned as-is; the caller decides what to do with it.
    """
    pool = "".join(class_sets(config).values())
    logger.debug("built character pool of %d characters", len(pool))
    return pool
