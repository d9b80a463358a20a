"""CLI for hexcalc.

Usage:
    python -m hexcalc                        # Interactive session
    python -m hexcalc repl --verbose         # Session with token traces
    python -m hexcalc eval "d(d2+d3)*d4 d"   # Evaluate one expression
    python -m hexcalc convert d255 h         # Re-tag one literal
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from hexcalc.engine import convert, trace
from hexcalc.environment import load_settings
from hexcalc.errors import CalcError
from hexcalc.models import Base, describe
from hexcalc.shell import Session

app = typer.Typer(
    name="hexcalc",
    help="Integer calculator for decimal (d) and hexadecimal (h) literals",
)
console = Console(stderr=True)
out = Console()


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Start an interactive session when no command is given."""
    if ctx.invoked_subcommand is None:
        Session(load_settings(), out, console).run()


@app.command("repl")
def cmd_repl(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show tokens and postfix order"),
) -> None:
    """Start an interactive session."""
    Session(load_settings(verbose=verbose), out, console).run()


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression ending in its output base, e.g. 'd2+hA d'"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show tokens and postfix order"),
) -> None:
    """Evaluate a single expression."""
    try:
        evaluation = trace(expression)
    except CalcError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    if verbose:
        console.print(f"[dim]tokens:  {escape(describe(evaluation.tokens))}[/dim]", soft_wrap=True)
        console.print(f"[dim]postfix: {escape(describe(evaluation.postfix))}[/dim]", soft_wrap=True)
    out.print(evaluation.result, markup=False, highlight=False, soft_wrap=True)


@app.command("convert")
def cmd_convert(
    literal: str = typer.Argument(help="Base-prefixed literal, e.g. 'hFF'"),
    base: str = typer.Argument(help="Output base marker: d or h"),
) -> None:
    """Re-tag one literal in another base."""
    try:
        result = convert(literal, Base.parse(base))
    except CalcError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)
    out.print(result, markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    app()
