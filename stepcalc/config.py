"""Runtime settings for stepcalc.

Values come from STEPCALC_* environment variables with defaults below;
CLI options override them. There are no config files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from stepcalc.formatting import DEFAULT_PRECISION

DEFAULT_PROMPT = "Enter an expression (or 'q' to quit): "
QUIT_COMMANDS = ("q", "Q")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    """Evaluator and shell settings."""

    precision: int = DEFAULT_PRECISION
    show_steps: bool = True
    log_level: str = "WARNING"
    prompt: str = DEFAULT_PROMPT

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"unknown log level: {self.log_level}")

    def override(self, **changes) -> Settings:
        """Return a copy with every non-None value in `changes` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from STEPCALC_* variables.

    Args:
        env: Mapping to read instead of os.environ (used by tests).

    Raises:
        ValueError: if a variable is set to an unusable value.
    """
    env = os.environ if env is None else env
    kwargs: dict = {}

    if "STEPCALC_PRECISION" in env:
        try:
            kwargs["precision"] = int(env["STEPCALC_PRECISION"])
        except ValueError:
            raise ValueError(
                f"STEPCALC_PRECISION must be an integer, got {env['STEPCALC_PRECISION']!r}"
            ) from None
    if "STEPCALC_SHOW_STEPS" in env:
        kwargs["show_steps"] = _parse_bool("STEPCALC_SHOW_STEPS", env["STEPCALC_SHOW_STEPS"])
    if "STEPCALC_LOG_LEVEL" in env:
        kwargs["log_level"] = env["STEPCALC_LOG_LEVEL"].strip().upper()
    if "STEPCALC_PROMPT" in env:
        kwargs["prompt"] = env["STEPCALC_PROMPT"]

    return Settings(**kwargs)
