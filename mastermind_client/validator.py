"""
Turns one line of player input into a Guess.

Rules, checked in this order:
  - "exit" (any case, surrounding spaces ignored) always means quit
  - exactly CODE_LENGTH characters
  - every character is a decimal digit
  - every digit is between MIN_DIGIT and MAX_DIGIT inclusive

The first rule that fails is reported; the prompt keeps asking until it gets
a valid guess or "exit".
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

from .config import Settings, get_settings
from .errors import InvalidGuess
from .types import Code

EXIT_COMMAND = "exit"


class ExitSignal:
    """Marker returned when the player asks to leave the round."""

    def __repr__(self) -> str:
        return "EXIT"


EXIT = ExitSignal()


@dataclass(frozen=True)
class Guess:
    digits: Code

    def __str__(self) -> str:
        return "".join(str(d) for d in self.digits)


def parse_guess(raw: str, settings: Optional[Settings] = None) -> Union[Guess, ExitSignal]:
    settings = settings or get_settings()
    text = raw.strip().lower()

    if text == EXIT_COMMAND:
        return EXIT

    if len(text) != settings.code_length:
        raise InvalidGuess(
            "length", f"Guess must be {settings.code_length} digits long."
        )

    digits = []
    for char in text:
        # isdecimal() alone lets through things like '٣'
        if not (char.isascii() and char.isdecimal()):
            raise InvalidGuess("character", f"'{char}' is not a digit.")
        digit = int(char)
        if digit < settings.min_digit or digit > settings.max_digit:
            raise InvalidGuess(
                "range",
                f"Digit '{digit}' must be between {settings.min_digit} and {settings.max_digit}.",
            )
        digits.append(digit)

    return Guess(tuple(digits))


def prompt_for_guess(
    attempt: int,
    read_line: Callable[[], str] = input,
    echo: Callable[[str], None] = print,
    settings: Optional[Settings] = None,
) -> Union[Guess, ExitSignal]:
    """
    Keep asking until the player types a valid guess or "exit".
    No more input (EOF) counts as "exit".
    """
    settings = settings or get_settings()
    while True:
        echo(
            f"\nAttempt {attempt}/{settings.max_attempts}. "
            f"Enter your {settings.code_length}-digit guess (e.g., 1234):"
        )
        try:
            raw = read_line()
        except EOFError:
            return EXIT

        try:
            return parse_guess(raw, settings)
        except InvalidGuess as err:
            echo(f"Invalid input: {err.message}")
