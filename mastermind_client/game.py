"""
Plays one round: create a session, ask for guesses until the player wins,
runs out of attempts, types "exit", or the server forgets the game.
The session is always deleted at the end if it was ever created.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .config import Settings, get_settings
from .errors import ApiError, RemoteError
from .session import GameSession, GuessEntry
from .transport import ApiClient
from .types import SessionStatus
from .validator import ExitSignal, prompt_for_guess

logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    status: SessionStatus
    attempts: int = 0
    game_id: Optional[str] = None
    history: List[GuessEntry] = field(default_factory=list)
    deleted: bool = False
    exited: bool = False


def play_round(
    api: ApiClient,
    read_line: Callable[[], str] = input,
    echo: Callable[[str], None] = print,
    settings: Optional[Settings] = None,
) -> RoundResult:
    settings = settings or get_settings()
    session = GameSession(api, settings)

    echo("\nStarting a new game...")

    # 1. Create the session; nothing to clean up if this fails
    try:
        game_id = session.create()
    except RemoteError as e:
        echo(f"Failed to start game. API Error ({e.status_code}): {e.message}")
        return RoundResult(status=session.status)
    except ApiError as e:
        echo(f"Failed to start game: {e}")
        return RoundResult(status=session.status)

    echo(f"New game started! Game ID: {game_id}")
    echo("Let the guessing begin!")

    exited = False
    try:
        # 2./3. One prompt + submit per attempt
        while session.is_active and session.attempts < settings.max_attempts:
            attempt = session.attempts + 1
            guess = prompt_for_guess(attempt, read_line, echo, settings)
            if isinstance(guess, ExitSignal):
                echo("Exiting game as requested.")
                exited = True
                break

            try:
                feedback = session.submit_guess(guess)
            except RemoteError as e:
                echo(f"API Error ({e.status_code}): {e.message}. Please check your guess or try again.")
                if e.is_not_found:
                    echo("The game session might have expired or is invalid. Please start a new game.")
                    break
                continue
            except ApiError as e:
                echo(f"An error occurred while submitting your guess: {e}")
                continue

            echo(f"Your guess: {guess} -> Feedback: {feedback.render()}")
            if session.status == "won":
                echo(f"\nCongratulations! You guessed the code {guess} in {session.attempts} attempts!")

        # 4. Out of attempts without a win
        if session.is_active and session.attempts >= settings.max_attempts:
            session.mark_exhausted()
            echo(f"\nGame Over! You've used all {settings.max_attempts} attempts.")
            echo("Better luck next time!")
    finally:
        # 5. Always try to clean up
        echo(f"\nCleaning up game session (ID: {game_id})...")
        deleted = session.delete()
        if deleted:
            echo("Game session deleted successfully.")
        else:
            echo(f"Warning: could not delete game session (ID: {game_id}). It might auto-expire on the server.")

    logger.info("Round %s ended: %s after %d attempt(s)", game_id, session.status, session.attempts)
    return RoundResult(
        status=session.status,
        attempts=session.attempts,
        game_id=game_id,
        history=list(session.history),
        deleted=deleted,
        exited=exited,
    )
