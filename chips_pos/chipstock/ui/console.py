from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from chipstock.errors import InputClosed, ValidationError
from chipstock.utils import parse_int
from chipstock.validators import flat_text

INVALID_NUMBER = "Invalid number. Please try again."
INVALID_TEXT   = "Commas and line breaks are not allowed here. Please try again."
INVALID_YES_NO = "Please respond with Y or N."


def _to_int(text: str, check: Optional[Callable[[int], bool]], error: str) -> int:
    value = parse_int(text)
    if value is None:
        raise ValidationError(INVALID_NUMBER)
    if check is not None and not check(value):
        raise ValidationError(error)
    return value


class Console:
    """
    Line-based operator I/O.
    Every ask_* method loops until it gets an acceptable answer and raises
    InputClosed when the input stream ends.
    """

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None,
                 out: Optional[TextIO] = None):
        self._input = input_fn or input
        self.out = out or sys.stdout

    def say(self, text: str = "") -> None:
        print(text, file=self.out)

    def read(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError:
            raise InputClosed("Input stream closed unexpectedly.") from None

    def ask_int(self, prompt: str, check: Optional[Callable[[int], bool]] = None,
                error: str = INVALID_NUMBER) -> int:
        while True:
            try:
                return _to_int(self.read(prompt), check, error)
            except ValidationError as e:
                self.say(str(e))

    def ask_optional_int(self, prompt: str, current: int,
                         check: Optional[Callable[[int], bool]] = None,
                         error: str = INVALID_NUMBER) -> int:
        """Empty answer keeps `current`."""
        while True:
            line = self.read(prompt)
            if not line:
                return current
            try:
                return _to_int(line, check, error)
            except ValidationError as e:
                self.say(str(e))

    def ask_text(self, prompt: str) -> str:
        while True:
            line = self.read(prompt)
            if flat_text(line):
                return line
            self.say(INVALID_TEXT)

    def ask_optional_text(self, prompt: str, current: str) -> str:
        line = self.ask_text(prompt)
        return line if line else current

    def ask_yes_no(self, prompt: str) -> bool:
        while True:
            line = self.read(prompt)
            answer = line[:1].lower()
            if answer == "y":
                return True
            if answer == "n":
                return False
            self.say(INVALID_YES_NO)
