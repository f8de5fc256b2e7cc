"""Environment-driven defaults for report parsing and lshw scans."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .parser import ParserError

ENV_SKIP_HUBS = "LSHW_PARSER_SKIP_HUBS"
ENV_LSHW_BIN = "LSHW_PARSER_LSHW_BIN"
ENV_TIMEOUT = "LSHW_PARSER_TIMEOUT"
ENV_SANITIZE = "LSHW_PARSER_SANITIZE"

DEFAULT_LSHW_BIN = "lshw"
DEFAULT_TIMEOUT = 60.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ConfigError(ParserError):
    """Raised when an environment setting is malformed."""


@dataclass
class ParserSettings:
    """Runtime options shared by :func:`scan_lshw` and report loading."""

    skip_hubs: bool = False
    lshw_bin: str = DEFAULT_LSHW_BIN
    timeout: float = DEFAULT_TIMEOUT
    sanitize: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ParserSettings":
        env = os.environ if environ is None else environ
        return cls(
            skip_hubs=_parse_bool(ENV_SKIP_HUBS, env.get(ENV_SKIP_HUBS)),
            lshw_bin=env.get(ENV_LSHW_BIN) or DEFAULT_LSHW_BIN,
            timeout=_parse_timeout(env.get(ENV_TIMEOUT)),
            sanitize=_parse_bool(ENV_SANITIZE, env.get(ENV_SANITIZE)),
        )


def _parse_bool(name: str, raw: Optional[str]) -> bool:
    if raw is None:
        return False
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_timeout(raw: Optional[str]) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{ENV_TIMEOUT} must be a number of seconds, got {raw!r}") from exc
    if timeout <= 0:
        raise ConfigError(f"{ENV_TIMEOUT} must be positive")
    return timeout
