"""Bracket-resolution driver.

The working text is rewritten one bracket pair at a time. The rightmost
opener always has its matching closer as the nearest closer to its right,
so resolving it first gives innermost-first order without tracking depth.
Each resolved span is replaced by its formatted value and the new text is
recorded as a step.
"""

from __future__ import annotations

import logging
from typing import Optional

from stepcalc.config import Settings
from stepcalc.errors import MismatchedBrackets
from stepcalc.formatting import format_number, parse_number
from stepcalc.models import CLOSERS, OPENERS, EvalResult
from stepcalc.reducer import is_literal, reduce_flat
from stepcalc.validator import validate

logger = logging.getLogger(__name__)


class Evaluator:
    """Evaluates validated expressions and records the simplification steps.

    One instance may be reused; the trace is reset at the start of every
    evaluate() call.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self._steps: list[str] = []

    @property
    def precision(self) -> int:
        return self.settings.precision

    @property
    def steps(self) -> list[str]:
        """Steps recorded by the most recent evaluate() call."""
        return list(self._steps)

    def _record(self, step: str) -> None:
        if self._steps and self._steps[-1] == step:
            return
        self._steps.append(step)

    def _resolve_span(self, span: str) -> str:
        """Reduce a flat span to its formatted literal."""
        if is_literal(span):
            return span.strip()
        value = reduce_flat(span, self._record, self.precision)
        return format_number(value, self.precision)

    def evaluate(self, expression: str) -> EvalResult:
        """Validate and evaluate an expression.

        Returns:
            EvalResult with the final value and the ordered step trace.

        Raises:
            CalcError: the first error encountered; no partial result.
        """
        self._steps = []
        validate(expression)

        current = expression
        while True:
            opener = max(current.rfind(ch) for ch in OPENERS)
            if opener == -1:
                break

            closer = next(
                (i for i in range(opener + 1, len(current)) if current[i] in CLOSERS),
                None,
            )
            if closer is None:
                raise MismatchedBrackets(position=opener)

            literal = self._resolve_span(current[opener + 1:closer])
            current = current[:opener] + literal + current[closer + 1:]
            logger.debug("Substituted %s -> %r", literal, current)
            self._record(current.strip())

        final = format_number(parse_number(self._resolve_span(current)), self.precision)
        self._record(final)

        value = parse_number(self._steps[-1])
        logger.debug("Evaluated %r = %s in %d steps", expression, final, len(self._steps))
        return EvalResult(
            expression=expression,
            value=value,
            steps=list(self._steps),
            precision=self.precision,
        )


def evaluate(expression: str, settings: Optional[Settings] = None) -> EvalResult:
    """Evaluate an expression with a fresh Evaluator."""
    return Evaluator(settings).evaluate(expression)
