"""Terminal I/O wrapper and menu rendering for the interactive session."""

import sys
from typing import TextIO

from logclient.models import LogLevel

MAIN_MENU = (
    "",
    "Menu:",
    "1. Auto (Print all log messages and Configure Log Format)",
    "2. Manual (Enter log message and Configure Log Format)",
    "3. Noisy (Test noisy logs)",
    "4. Exit",
)


class Console:
    """Reads prompted lines and writes text. Pass StringIO streams in tests."""

    def __init__(self, input_stream: TextIO | None = None,
                 output: TextIO | None = None):
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output if output is not None else sys.stdout

    def write(self, text: str = ""):
        print(text, file=self._output)

    def prompt(self, text: str) -> str:
        """Show text without a newline and return the next input line.

        Raises EOFError when input is exhausted.
        """
        self._output.write(text)
        self._output.flush()
        line = self._input.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")


def render_main_menu(console: Console):
    for line in MAIN_MENU:
        console.write(line)


def render_template_menu(console: Console, current: str, presets: tuple[str, ...]):
    console.write(f"Current log message format: {current}")
    console.write("Choose log message format:")
    for number, template in enumerate(presets, start=1):
        console.write(f"{number}. {template}")


def render_level_menu(console: Console):
    for level in LogLevel:
        console.write(f"{level.value}. {level.label}")
