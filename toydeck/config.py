"""Configuration for the toydeck command line tools.

Settings come from environment variables and are read when a ToyDeckConfig is
created. Invalid values warn and fall back to the defaults.
"""

import os
import warnings
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class SymbolStyle(Enum):
    """How the 52-card grid renders each card."""

    UNICODE = "unicode"
    ABBR = "abbr"


DEFAULT_FILL_PATH = "fill52.txt"
_TRUE = ("true", "1", "yes")
_FALSE = ("false", "0", "no")


def _read_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    warnings.warn(f"Invalid {key}={raw!r}, using {str(default).lower()}", stacklevel=3)
    return default


def _read_style(env: Mapping[str, str], key: str, default: SymbolStyle) -> SymbolStyle:
    raw = env.get(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    valid_styles = [s.value for s in SymbolStyle]
    if value in valid_styles:
        return SymbolStyle(value)
    warnings.warn(
        f"Invalid {key}={raw!r}, expected one of {valid_styles}. Using {default.value!r}.",
        stacklevel=3,
    )
    return default


class ToyDeckConfig:
    """Central configuration class for toydeck."""

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        env = os.environ if env is None else env
        self.fill_path = env.get("TOYDECK_FILL_PATH") or DEFAULT_FILL_PATH
        self.verbose = _read_bool(env, "TOYDECK_VERBOSE", False)
        self.symbol_style = _read_style(env, "TOYDECK_SYMBOL_STYLE", SymbolStyle.UNICODE)

    def get_status(self) -> Dict[str, Any]:
        """Get current configuration status."""
        return {
            "fill_path": self.fill_path,
            "verbose": self.verbose,
            "symbol_style": self.symbol_style.value,
        }


# Global configuration instance
config = ToyDeckConfig()
