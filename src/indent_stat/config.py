"""
Run configuration for indent-stat.

The maximum examined depth can be given directly or via the
INDENT_STAT_MAX_DEPTH environment variable; otherwise the default of 24
(six levels of 4-column indentation) is used.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .core import DEFAULT_MAX_DEPTH

MAX_DEPTH_ENV = "INDENT_STAT_MAX_DEPTH"


class ConfigError(ValueError):
    """Raised when a configuration value cannot be used."""


@dataclass
class RunConfig:
    max_depth: int = DEFAULT_MAX_DEPTH
    inline: bool = False
    totals_only: bool = False


def _parse_depth(raw: str, source: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{source} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ConfigError(f"{source} must not be negative, got {value}")
    return value


def load_config(
    max_depth: Optional[int] = None,
    inline: bool = False,
    totals_only: bool = False,
) -> RunConfig:
    if max_depth is not None:
        depth = _parse_depth(str(max_depth), "max depth")
    else:
        raw = os.getenv(MAX_DEPTH_ENV)
        depth = _parse_depth(raw, MAX_DEPTH_ENV) if raw else DEFAULT_MAX_DEPTH
    return RunConfig(max_depth=depth, inline=inline, totals_only=totals_only)
