"""
passgen.generator
Secure password generator using Python's secrets module.

Draws every character uniformly from the effective pool, then makes sure each
enabled character class shows up at least once by overwriting random positions.
"""

import logging
import secrets
from collections import Counter
from typing import Dict, List, Optional

from .charsets import build_pool, class_sets
from .config import PasswordConfig
from .errors import ConfigurationError, EmptyPoolError, RandomSourceError

logger = logging.getLogger(__name__)


def secure_randbelow(n: int) -> int:
    """
    Uniform integer in [0, n) from the OS random source.

    secrets.randbelow rejects out-of-range getrandbits() draws instead of
    reducing them modulo n, so every index is equally likely.
    """
    try:
        return secrets.randbelow(n)
    except (OSError, NotImplementedError) as e:
        raise RandomSourceError(f"secure random source unavailable: {e}") from e


def sample(pool: str) -> str:
    """Pick one character from `pool`, uniformly and with replacement."""
    if not pool:
        raise EmptyPoolError("character pool is empty")
    return pool[secure_randbelow(len(pool))]


def enforce_coverage(password_chars: List[str], sets: Dict[str, str]) -> List[str]:
    """
    Overwrite one random position for every class in `sets` that has no
    representative in `password_chars`, in the order of `sets`.

    A repair only lands on a position whose class still has another
    character elsewhere, so it never removes the last representative of a
    class. When the password is shorter than the number of classes no such
    position may exist; then any position is used and later classes win.
    """
    owner = {c: name for name, chars in sets.items() for c in chars}
    counts = Counter(owner.get(c) for c in password_chars)
    for name, chars in sets.items():
        if counts[name]:
            continue
        spare = [
            i for i, c in enumerate(password_chars)
            if owner.get(c) is None or counts[owner[c]] > 1
        ]
        candidates = spare or list(range(len(password_chars)))
        pos = candidates[secure_randbelow(len(candidates))]
        counts[owner.get(password_chars[pos])] -= 1
        password_chars[pos] = sample(chars)
        counts[name] += 1
        logger.debug("class %r missing from draft, repaired one position", name)
    return password_chars


def generate(config: Optional[PasswordConfig] = None) -> str:
    """
    Generate a cryptographically secure password for `config`.

    Raises ConfigurationError when no character class is selected or the
    length is below 1.
    """
    cfg = config or PasswordConfig()

    pool = build_pool(cfg)
    if not pool:
        raise ConfigurationError("no character sets selected")
    if cfg.length < 1:
        raise ConfigurationError("invalid length")

    password_chars = [sample(pool) for _ in range(cfg.length)]
    enforce_coverage(password_chars, class_sets(cfg))
    return "".join(password_chars)
