"""Interactive read-evaluate-print loop.

Reads one expression per line until a quit command or end of input. Errors
are printed and the loop continues with the next line.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from stepcalc.config import QUIT_COMMANDS, Settings
from stepcalc.errors import CalcError
from stepcalc.evaluator import Evaluator
from stepcalc.render import render_failure, render_result

logger = logging.getLogger(__name__)


def run_shell(
    console: Console,
    settings: Optional[Settings] = None,
    read_line: Optional[Callable[[str], str]] = None,
) -> int:
    """Run the loop and return the number of successful evaluations.

    Args:
        console: Where prompts, results and errors are printed.
        settings: Evaluator and display settings.
        read_line: Prompt-and-read function; defaults to console.input. It
            receives the prompt with rich markup escaped.
    """
    settings = settings or Settings()
    read_line = read_line or console.input
    prompt = escape(settings.prompt)
    evaluator = Evaluator(settings)
    evaluated = 0

    while True:
        console.print()
        try:
            line = read_line(prompt)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        expression = line.strip()
        if expression in QUIT_COMMANDS:
            break
        if not expression:
            continue

        try:
            result = evaluator.evaluate(line)
        except CalcError as e:
            logger.info("Rejected %r: %s", line, e.kind.value)
            render_failure(e, console)
            continue

        render_result(result, console, show_steps=settings.show_steps)
        evaluated += 1

    logger.info("Shell exited after %d evaluations", evaluated)
    return evaluated
