"""Interactive shell around the calculator core.

The shell owns one ``Session`` for its lifetime, handles the slash commands
(``/help``, ``/vars``, ``/exit``) itself and hands every other non-blank line
to ``Session.evaluate_line``. Interactive terminals get a prompt_toolkit
prompt with history and completion; piped input is read line by line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Iterable, List, Optional, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory, History, InMemoryHistory

from .classifier import Session
from .config import Settings, load_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

HELP_TEXT = """\
This calculator adds, subtracts, multiplies and divides integers of any size
in the usual order of operations.
Identifiers (letters only) may be assigned integer values.
  Example: n = -3
Enter two or more operands (numbers or assigned identifiers) separated by
operators (+, -, *, /). Brackets change the order of operations and spaces do
not affect the result.
  Example: 9 * n+12 *(4 - 2)
An even number of minus signs in a row means addition, an odd number means
subtraction.
  Example: 2 -- 2 is the same as 2 + 2 and gives 4
Division discards the remainder, rounding toward zero.
Commands:
  /help   show these instructions
  /vars   list assigned identifiers
  /exit   quit the program"""


class CalculatorShell:
    """Read-eval-print loop for the calculator."""

    COMMANDS = ('/help', '/vars', '/exit')

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[Session] = None,
        stdin: Optional[TextIO] = None,
        output: Callable[[str], None] = print,
    ):
        self.settings = settings or Settings()
        self.session = session or Session()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.output = output
        self.running = True

    def handle(self, line: str) -> Optional[str]:
        """Process one line. Returns the text to display, or None."""
        s = line.strip()
        if not s:
            return None
        if s.startswith('/'):
            return self._run_command(s)
        outcome = self.session.evaluate_line(line)
        text = outcome.render()
        return text or None

    def _run_command(self, cmd: str) -> str:
        if cmd == '/exit':
            self.running = False
            return "Bye!"
        if cmd == '/help':
            return HELP_TEXT
        if cmd == '/vars':
            items = sorted(self.session.store.items())
            if not items:
                return "(no variables)"
            return "\n".join(f"{name} = {value}" for name, value in items)
        logger.info("Unknown command %r", cmd)
        return "Unknown command"

    def _emit(self, line: str) -> None:
        out = self.handle(line)
        if out is not None:
            self.output(out)

    def run_lines(self, lines: Iterable[str]) -> None:
        """Feed lines through the shell until they run out or /exit is seen."""
        for line in lines:
            self._emit(line.rstrip("\n"))
            if not self.running:
                return
        # End of input behaves like /exit.
        self._emit('/exit')

    def _history(self) -> History:
        if self.settings.use_history:
            return FileHistory(self.settings.history_file)
        return InMemoryHistory()

    def completer(self) -> WordCompleter:
        """Complete commands and the names bound so far."""
        words = list(self.COMMANDS) + sorted(name for name, _ in self.session.store.items())
        return WordCompleter(words)

    def run(self) -> None:
        """Run until /exit or end of input."""
        if not self.stdin.isatty():
            self.run_lines(self.stdin)
            return
        prompt_session = PromptSession(history=self._history())
        while self.running:
            try:
                line = prompt_session.prompt(self.settings.prompt, completer=self.completer())
            except KeyboardInterrupt:
                continue
            except EOFError:
                line = '/exit'
            self._emit(line)


# --------------------------
# Entry point
# --------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bigcalc",
        description="Interactive arbitrary-precision integer calculator.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL); overrides BIGCALC_LOG_LEVEL.",
    )
    parser.add_argument(
        "--no-history",
        action="store_true",
        help="Do not read or write the prompt history file.",
    )
    parser.add_argument(
        "--prompt",
        type=str,
        help="Prompt string shown before each line (default: '> ').",
    )
    return parser


def settings_from_args(args: argparse.Namespace, base: Settings) -> Settings:
    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.no_history:
        overrides["use_history"] = False
    if args.prompt is not None:
        overrides["prompt"] = args.prompt
    return Settings(**{**base.model_dump(), **overrides})


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    settings = settings_from_args(args, load_settings())
    logging.basicConfig(level=settings.numeric_log_level, format=LOG_FORMAT)
    logger.debug("Starting shell with %s", settings)
    CalculatorShell(settings=settings).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
