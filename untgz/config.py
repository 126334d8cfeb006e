"""Environment-backed settings for untgz.

Recognised variables:
* `UNTGZ_LOG_LEVEL` - root log level (default `INFO`)
* `UNTGZ_ALLOW_UNSAFE_PATHS` - write entries that resolve outside the output root
* `UNTGZ_KEEP_GOING` - continue a batch after a failed archive
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}


def env_bool(environ: Mapping[str, str], key: str, default: bool = False) -> bool:
    value = environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class ExtractSettings:
    """Typed extraction settings sourced from the environment."""

    log_level: str = "INFO"
    allow_unsafe_paths: bool = False
    keep_going: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ExtractSettings":
        environ = os.environ if environ is None else environ
        return cls(
            log_level=(environ.get("UNTGZ_LOG_LEVEL") or "INFO").upper(),
            allow_unsafe_paths=env_bool(environ, "UNTGZ_ALLOW_UNSAFE_PATHS", False),
            keep_going=env_bool(environ, "UNTGZ_KEEP_GOING", False),
        )
