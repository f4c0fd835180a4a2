# passgen/config.py
"""
Generation options and simple settings persistence for passgen.
Settings saved as JSON in $PASSGEN_HOME/config.json, %APPDATA%/passgen/config.json (Windows)
or ~/.passgen/config.json (fallback). Generated passwords are never written anywhere.
"""

import os
import json
import logging
from dataclasses import dataclass, fields
from typing import Dict, Any, Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PasswordConfig:
    length: int = 16
    use_upper: bool = True
    use_lower: bool = True
    use_digits: bool = True
    use_special: bool = True
    # drop I L O i l o 0 1
    no_similar: bool = False
    # drop brackets, quotes, slashes and separators from the special class
    no_ambiguous: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PasswordConfig":
        """Build a config from a settings mapping, ignoring unrelated keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})


DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "count": 1,
    "use_upper": True,
    "use_lower": True,
    "use_digits": True,
    "use_special": True,
    "no_similar": False,
    "no_ambiguous": False,
    "log_level": "WARNING",
}


def _settings_dir() -> str:
    home = os.getenv("PASSGEN_HOME")
    if home:
        return home
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "passgen")
    return os.path.join(os.path.expanduser("~"), ".passgen")


def config_path() -> str:
    return os.path.join(_settings_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    out = DEFAULTS.copy()
    if not os.path.exists(p):
        return out
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable settings file %s: %s", p, e)
        return out
    if not isinstance(data, dict):
        logger.warning("ignoring settings file %s: expected a JSON object", p)
        return out
    # merge defaults
    for key, value in data.items():
        if key not in DEFAULTS:
            logger.warning("unknown setting %r in %s", key, p)
            continue
        # exact type match: true is not a length
        if type(value) is not type(DEFAULTS[key]):
            logger.warning(
                "ignoring setting %r in %s: expected %s, got %r",
                key, p, type(DEFAULTS[key]).__name__, value,
            )
            continue
        out[key] = value
    return out


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    logger.info("saved settings to %s", p)
    return p
