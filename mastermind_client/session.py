"""
One game session on the server, from POST /game to DELETE /game/{id}.

States:
  uncreated -> in_progress            create()
  in_progress -> in_progress | won    submit_guess()
  in_progress -> abandoned            submit_guess() got a 404 (server forgot the game)
  in_progress -> exhausted            mark_exhausted(), called by the game loop
  any -> deleted                      delete(), best effort, never raises
"""

import logging
from dataclasses import dataclass, field
from time import time
from typing import List, Optional

from .config import Settings, get_settings
from .errors import ApiError, RemoteError, SessionStateError
from .schemas import GuessResponse
from .transport import ApiClient
from .types import SessionStatus
from .validator import Guess

logger = logging.getLogger(__name__)


@dataclass
class GuessEntry:
    guess: str
    black: int
    white: int
    timestamp: float = field(default_factory=time)


class GameSession:
    def __init__(self, api: ApiClient, settings: Optional[Settings] = None) -> None:
        self.api = api
        self.settings = settings or get_settings()
        self.game_id: Optional[str] = None
        self.attempts = 0
        self.status: SessionStatus = "uncreated"
        self.history: List[GuessEntry] = []
        self.deleted = False

    @property
    def is_active(self) -> bool:
        return self.status == "in_progress"

    @property
    def attempts_left(self) -> int:
        return self.settings.max_attempts - self.attempts

    def create(self) -> str:
        if self.status != "uncreated":
            raise SessionStateError(f"Session already created (status: {self.status}).")

        # ApiError propagates; the session stays uncreated
        self.game_id = self.api.create_game()
        self.status = "in_progress"
        logger.info("Created game session %s", self.game_id)
        return self.game_id

    def submit_guess(self, guess: Guess) -> GuessResponse:
        if not self.is_active:
            raise SessionStateError(f"Cannot guess in a session that is {self.status}.")
        if self.attempts >= self.settings.max_attempts:
            raise SessionStateError("No attempts left in this session.")

        # Counted before the call, so failed submissions use up an attempt too
        self.attempts += 1

        try:
            feedback = self.api.make_guess(self.game_id, str(guess), self.settings.code_length)
        except RemoteError as e:
            if e.is_not_found:
                self.status = "abandoned"
                logger.warning("Game %s no longer exists on the server", self.game_id)
            raise

        self.history.append(GuessEntry(guess=str(guess), black=feedback.black, white=feedback.white))

        if feedback.black == self.settings.code_length:
            self.status = "won"
            logger.info("Game %s won in %d attempts", self.game_id, self.attempts)
        return feedback

    def mark_exhausted(self) -> None:
        if not self.is_active:
            raise SessionStateError(f"Cannot exhaust a session that is {self.status}.")
        if self.attempts < self.settings.max_attempts:
            raise SessionStateError(f"Only {self.attempts} of {self.settings.max_attempts} attempts used.")
        self.status = "exhausted"

    def delete(self) -> bool:
        """
        Remove the game on the server.
        Returns True when it is gone, False when it could not be removed
        (the server expires old games on its own, so this never raises).
        """
        if self.game_id is None:
            return False
        if self.deleted:
            return True

        try:
            self.api.delete_game(self.game_id)
        except ApiError as e:
            logger.warning("Could not delete game session %s: %s", self.game_id, e)
            return False

        self.deleted = True
        logger.info("Deleted game session %s", self.game_id)
        return True
