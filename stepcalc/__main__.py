"""CLI for the stepcalc expression evaluator.

Usage:
    python -m stepcalc eval "(2 + 3) * 4"          # Result plus numbered steps
    python -m stepcalc eval "2^3^2" --no-steps     # Result only
    python -m stepcalc eval "1/3" --json           # JSON result
    python -m stepcalc check "{1 + 2)}"            # Validate only
    python -m stepcalc tokens "3.5 * {2 - 1}"      # Token table
    python -m stepcalc repl                        # Interactive loop
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console

from stepcalc.config import LOG_LEVELS, Settings, load_settings
from stepcalc.errors import CalcError, render_error
from stepcalc.evaluator import Evaluator
from stepcalc.logs import setup_logging
from stepcalc.render import render_failure, render_result, render_tokens
from stepcalc.shell import run_shell
from stepcalc.validator import validate

app = typer.Typer(
    name="stepcalc",
    help="Arithmetic expression evaluator with step-by-step traces",
    no_args_is_help=True,
)
console = Console()


def _settings(
    precision: Optional[int] = None,
    show_steps: Optional[bool] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """Environment settings with CLI overrides applied, logging configured."""
    try:
        settings = load_settings().override(
            precision=precision,
            show_steps=show_steps,
            log_level=log_level.upper() if log_level else None,
        )
    except ValueError as e:
        console.print(f"[red]Invalid settings: {e}[/red]")
        raise typer.Exit(2)
    setup_logging(settings.log_level)
    return settings


_LOG_LEVEL_HELP = f"Log level: {', '.join(LOG_LEVELS)}"


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression to evaluate, e.g. '(2 + 3) * 4'"),
    steps: Optional[bool] = typer.Option(None, "--steps/--no-steps", help="Show the simplification steps"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", help="Decimal places kept per step"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help=_LOG_LEVEL_HELP),
) -> None:
    """Evaluate one expression."""
    settings = _settings(precision=precision, show_steps=steps, log_level=log_level)
    try:
        result = Evaluator(settings).evaluate(expression)
    except CalcError as e:
        if as_json:
            typer.echo(json.dumps({"error": render_error(e), **e.to_dict()}, indent=2))
        else:
            render_failure(e, console)
        raise typer.Exit(1)

    if as_json:
        typer.echo(result.to_json())
    else:
        render_result(result, console, show_steps=settings.show_steps)


@app.command("check")
def cmd_check(
    expression: str = typer.Argument(help="Expression to validate"),
) -> None:
    """Validate an expression without evaluating it."""
    _settings()
    try:
        validate(expression)
    except CalcError as e:
        render_failure(e, console)
        raise typer.Exit(1)
    console.print("[green]OK[/green]")


@app.command("tokens")
def cmd_tokens(
    expression: str = typer.Argument(help="Expression to scan"),
) -> None:
    """Show the tokens of a valid expression."""
    _settings()
    try:
        tokens = validate(expression)
    except CalcError as e:
        render_failure(e, console)
        raise typer.Exit(1)
    render_tokens(tokens, console)


@app.command("repl")
def cmd_repl(
    steps: Optional[bool] = typer.Option(None, "--steps/--no-steps", help="Show the simplification steps"),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", help="Decimal places kept per step"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help=_LOG_LEVEL_HELP),
) -> None:
    """Evaluate expressions interactively until 'q'."""
    settings = _settings(precision=precision, show_steps=steps, log_level=log_level)
    run_shell(console, settings)


if __name__ == "__main__":
    app()
