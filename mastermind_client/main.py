'''
Mastermind terminal client

Menu:
1 -> play one round against the remote server
2 -> exit (also "exit")

Server location comes from MASTERMIND_API_URL (see config.py).
'''

import logging
import sys
from typing import Callable, Optional

from .config import LOG_LEVEL, Settings, get_settings
from .game import play_round
from .transport import ApiClient

SEPARATOR = "------------------------------------"


def print_welcome(echo: Callable[[str], None], settings: Settings) -> None:
    echo(SEPARATOR)
    echo("    Welcome to Mastermind!")
    echo(SEPARATOR)
    echo(f"Try to guess the secret {settings.code_length}-digit code.")
    echo(f"Each digit is between {settings.min_digit} and {settings.max_digit}.")
    echo("Feedback: B (Black) = correct digit, correct position.")
    echo("          W (White) = correct digit, wrong position.")
    echo("Type 'exit' at any time to quit.")
    echo(SEPARATOR)


def run(
    read_line: Callable[[], str] = input,
    echo: Callable[[str], None] = print,
    api: Optional[ApiClient] = None,
    settings: Optional[Settings] = None,
) -> int:
    settings = settings or get_settings()
    api = api or ApiClient(settings.base_url)

    print_welcome(echo, settings)

    with api:
        while True:
            echo("\nChoose an action:")
            echo("1. Play Mastermind")
            echo("2. Exit")
            echo("Enter your choice (1 or 2):")

            try:
                choice = read_line().strip().lower()
            except EOFError:
                echo("\nNo input received, exiting.")
                break

            if choice == "1":
                play_round(api, read_line, echo, settings)
            elif choice in ("2", "exit"):
                echo("\nThanks for playing Mastermind! Goodbye.")
                break
            else:
                echo("Invalid choice. Please enter 1 or 2.")
            echo("\n" + SEPARATOR)

    return 0


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run())


if __name__ == "__main__":
    main()
