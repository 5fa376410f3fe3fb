"""Data models for the stepcalc evaluator.

TokenType, BracketKind, Token, EvalResult — the typed structures that flow
through tokenizer → validator → evaluator → CLI.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from stepcalc.formatting import format_number


class TokenType(str, Enum):
    """Lexical classes of the input grammar."""

    NUMBER = "number"
    OPERATOR = "operator"
    OPEN_BRACKET = "open"
    CLOSE_BRACKET = "close"


class BracketKind(str, Enum):
    """Bracket pair families. Only the validator cares which one is used."""

    PAREN = "paren"
    BRACE = "brace"


OPENERS: dict[str, BracketKind] = {"(": BracketKind.PAREN, "{": BracketKind.BRACE}
CLOSERS: dict[str, BracketKind] = {")": BracketKind.PAREN, "}": BracketKind.BRACE}
OPERATORS = "+-*/^"


@dataclass(frozen=True)
class Token:
    """A classified lexical unit of an expression."""

    type: TokenType
    text: str
    position: int

    @property
    def bracket_kind(self) -> Optional[BracketKind]:
        """Bracket family for bracket tokens, None otherwise."""
        return OPENERS.get(self.text) or CLOSERS.get(self.text)


@dataclass
class EvalResult:
    """Outcome of one successful evaluation."""

    expression: str
    value: float
    steps: list[str] = field(default_factory=list)
    precision: int = 2

    @property
    def display(self) -> str:
        """The value rendered the same way it appears in the trace."""
        return format_number(self.value, self.precision)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "expression": self.expression,
            "result": self.display,
            "value": self.value,
            "steps": list(self.steps),
        }

    def to_json(self) -> str:
        # nan/inf are not valid JSON numbers; the display string carries them
        d = self.to_dict()
        if not math.isfinite(self.value):
            d["value"] = None
        return json.dumps(d, indent=2)
