"""Console input/output used by the catalog menu.

Output goes through a ``rich`` console, input is read line by line from a
text stream. Both are injected so a session can be driven from a fixed
script and its transcript captured.
"""

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.prompt import IntPrompt, InvalidResponse
from rich.text import Text, TextType

from .exceptions import InputError

logger = logging.getLogger(__name__)

NOT_A_NUMBER = "Please enter a whole number."


def create_console(color: bool = True, file: Optional[TextIO] = None) -> Console:
    """Create a console that prints catalog text verbatim."""
    return Console(
        file=file,
        color_system="auto" if color else None,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


class WholeNumberPrompt(IntPrompt):
    """Integer prompt that stops at end of input.

    The prompt text carries its own trailing ": ". With ``reprompt`` off
    the first malformed answer raises InputError instead of asking again.
    """

    prompt_suffix = ""
    validate_error_message = NOT_A_NUMBER

    def __init__(self, prompt: TextType, *, console: Console, reprompt: bool = True):
        super().__init__(prompt, console=console)
        self.reprompt = reprompt

    @classmethod
    def get_input(cls, console: Console, prompt: TextType, password: bool,
                  stream: Optional[TextIO] = None) -> str:
        value = console.input(prompt, password=password, stream=stream)
        if stream is not None and not value:
            raise EOFError("end of input")
        return value

    def on_validate_error(self, value: str, error: InvalidResponse) -> None:
        logger.warning("Rejected numeric input %r", value.rstrip("\r\n"))
        if not self.reprompt:
            raise InputError(NOT_A_NUMBER)
        self.console.print(error, style="red")


class ConsoleIO:
    """Line-oriented prompts and messages over an injected console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
        reprompt_on_invalid: bool = True,
    ):
        self.console = console or create_console()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.reprompt_on_invalid = reprompt_on_invalid

    def write(self, text: str, style: Optional[str] = None, end: str = "\n") -> None:
        """Print text as-is; brackets and colons are never interpreted."""
        self.console.print(text, style=style, end=end, markup=False, emoji=False, highlight=False)

    def write_record(self, text: str) -> None:
        """Write catalog data untouched, tabs included."""
        # Console rendering expands tabs, so records bypass it
        self.console.file.write(text + "\n")
        self.console.file.flush()

    def success(self, text: str) -> None:
        self.write(text, style="green")

    def warning(self, text: str) -> None:
        self.write(text, style="yellow")

    def error(self, text: str) -> None:
        self.write(text, style="red")

    def read_line(self, prompt: str) -> str:
        """Prompt and read one line without its line terminator.

        Raises:
            EOFError: When the input stream is exhausted.
        """
        line = self.console.input(Text(prompt, style="bold"), stream=self.stdin)
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def read_int(self, prompt: str) -> int:
        """Prompt until the line holds a whole number.

        Raises:
            InputError: On a malformed number when re-prompting is off.
            EOFError: When the input stream is exhausted.
        """
        number_prompt = WholeNumberPrompt(
            Text(prompt, style="bold"),
            console=self.console,
            reprompt=self.reprompt_on_invalid,
        )
        return number_prompt(stream=self.stdin)
