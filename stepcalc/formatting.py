"""Number and trace rendering.

Every value that enters the step trace or is substituted back into the
working expression goes through format_number, so rounding to `precision`
decimals accumulates across nested brackets.
"""

from __future__ import annotations

import math

DEFAULT_PRECISION = 2


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Render a value with `precision` decimals, then trim trailing zeros.

    4.0 → '4', 4.5 → '4.5', 1/3 → '0.33'. Non-finite values render as
    'nan', 'inf' or '-inf'.
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def parse_number(text: str) -> float:
    """Inverse of format_number. Accepts the 'nan'/'inf' renderings too."""
    return float(text.strip())


def render_trace(steps: list[str]) -> list[str]:
    """Number the steps as '1. <step>', '2. <step>', ..."""
    return [f"{i}. {step}" for i, step in enumerate(steps, 1)]
