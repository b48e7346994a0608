"""
Type mappings and configuration constants
"""

import logging
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Dict, Optional

from dotenv import load_dotenv

# Documented types that can be checked without knowing the host's classes
BASE_TYPES = frozenset({
    "int", "float", "bool", "string", "mixed", "array", "long",
    "str", "list", "dict", "tuple",
})


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


BASIC_TYPE_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "int": _is_int,
    "long": _is_int,
    "float": lambda value: isinstance(value, float),
    "bool": lambda value: isinstance(value, bool),
    "string": lambda value: isinstance(value, str),
    "str": lambda value: isinstance(value, str),
    "array": lambda value: isinstance(value, (list, tuple, dict)),
    "list": lambda value: isinstance(value, list),
    "dict": lambda value: isinstance(value, dict),
    "tuple": lambda value: isinstance(value, tuple),
    "mixed": lambda value: True,
}

# Annotation patterns
PARAM_PATTERN = re.compile(r"(?<!\w)[@:]param\s+([a-zA-Z]+)\s+(\$?[a-zA-Z_][a-zA-Z0-9_]*)")
PRE_PATTERN = re.compile(r"(?<!\w)@pre\s+([a-zA-Z_]+)\s+([0-9]+)")

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Runtime settings with environment variable support"""
    enforce: bool = True
    strict: bool = False
    log_level: str = "WARNING"
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            enforce=_env_flag("PACTS_ENFORCE", True),
            strict=_env_flag("PACTS_STRICT", False),
            log_level=os.getenv("PACTS_LOG_LEVEL", "WARNING").upper(),
            host=os.getenv("PACTS_HOST", "127.0.0.1"),
            port=int(os.getenv("PACTS_PORT", "8000")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings, read once from the environment"""
    return Settings.from_env()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the CLI and the server"""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
