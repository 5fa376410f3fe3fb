"""Rich rendering of results, errors and token listings."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stepcalc.errors import CalcError, render_error
from stepcalc.formatting import render_trace
from stepcalc.models import EvalResult, Token, TokenType

_TOKEN_STYLES = {
    TokenType.NUMBER: "cyan",
    TokenType.OPERATOR: "yellow",
    TokenType.OPEN_BRACKET: "magenta",
    TokenType.CLOSE_BRACKET: "magenta",
}


def render_result(result: EvalResult, console: Console, show_steps: bool = True) -> None:
    """Print 'Result: <value>' and, optionally, the numbered trace."""
    console.print(f"Result: [bold green]{escape(result.display)}[/bold green]")
    if show_steps and result.steps:
        console.print("[dim]Steps:[/dim]")
        for line in render_trace(result.steps):
            console.print(f"  {escape(line)}", highlight=False)


def render_failure(error: CalcError, console: Console) -> None:
    """Print 'Error: <message>'."""
    console.print(f"[red]{escape(render_error(error))}[/red]")


def render_tokens(tokens: list[Token], console: Console) -> None:
    """Print a table of tokens with their positions."""
    table = Table(title="Tokens", show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Type", min_width=8)
    table.add_column("Text", justify="right")
    table.add_column("Position", justify="right")

    for i, tok in enumerate(tokens, 1):
        style = _TOKEN_STYLES.get(tok.type, "white")
        kind = tok.type.value
        if tok.bracket_kind:
            kind = f"{kind} ({tok.bracket_kind.value})"
        table.add_row(str(i), f"[{style}]{kind}[/{style}]", escape(tok.text), str(tok.position))

    console.print(table)
