"""Interactive read-eval-print loop around engine.trace().

The session owns everything stateful: the consoles, the in-memory history and
the readline history file. Two commands are handled before the engine sees a
line: 'q' quits and 'c' clears the screen.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape

from hexcalc.engine import Evaluation, trace
from hexcalc.environment import ShellSettings
from hexcalc.errors import CalcError
from hexcalc.models import describe

try:
    import readline
except ImportError:  # not available on Windows
    readline = None

QUIT_COMMAND = "q"
CLEAR_COMMAND = "c"


class Session:
    """One interactive session: read a line, evaluate it, print the outcome."""

    def __init__(
        self,
        settings: Optional[ShellSettings] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        self.settings = settings or ShellSettings()
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.history: list[str] = []

    def handle(self, line: str) -> bool:
        """Process one input line. Returns False when the session should end."""
        if not line:
            return True

        command = line.strip()
        if command == QUIT_COMMAND:
            return False
        if command == CLEAR_COMMAND:
            self.console.clear()
            return True

        self._remember(line)

        try:
            evaluation = trace(line)
        except CalcError as e:
            self.err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
            return True

        if self.settings.verbose:
            self._print_trace(evaluation)
        self.console.print(evaluation.result, markup=False, highlight=False, soft_wrap=True)
        return True

    def run(self) -> None:
        """Loop until 'q', end of input or Ctrl-C."""
        self._load_history()
        try:
            while True:
                try:
                    line = self.console.input(escape(self.settings.prompt))
                except (EOFError, KeyboardInterrupt):
                    self.console.print()
                    break
                if not self.handle(line):
                    break
        finally:
            self._save_history()

    def _print_trace(self, evaluation: Evaluation) -> None:
        self.err_console.print(f"[dim]tokens:  {escape(describe(evaluation.tokens))}[/dim]", soft_wrap=True)
        self.err_console.print(f"[dim]postfix: {escape(describe(evaluation.postfix))}[/dim]", soft_wrap=True)
        self.err_console.print(f"[dim]value:   {evaluation.value}[/dim]", soft_wrap=True)

    def _remember(self, line: str) -> None:
        self.history.append(line)
        if readline is not None:
            readline.add_history(line)

    def _load_history(self) -> None:
        """Prepare readline: explicit history only, restored from the history file."""
        if readline is None:
            return
        readline.set_auto_history(False)
        readline.set_history_length(self.settings.history_length)
        path = self.settings.history_file
        if path is None or not path.exists():
            return
        try:
            readline.read_history_file(str(path))
        except OSError as e:
            self.err_console.print(f"[yellow]Could not read history {escape(str(path))}: {escape(str(e))}[/yellow]", soft_wrap=True)

    def _save_history(self) -> None:
        path = self.settings.history_file
        if readline is None or path is None:
            return
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            readline.write_history_file(str(path))
        except OSError as e:
            self.err_console.print(f"[yellow]Could not save history {escape(str(path))}: {escape(str(e))}[/yellow]", soft_wrap=True)
