"""
- HTTP calls to the game server with clear error mapping
Every call either returns a parsed pydantic model or raises one of the
ApiError subclasses from errors.py, so callers never look at raw responses.

Status handling:
  expected status -> parse body as the response model (DecodeError if it doesn't fit)
  anything else   -> parse body as {"error": "..."} (RemoteError),
                     or UnexpectedStatusError if that fails too
"""

import logging
from typing import Optional, Type, TypeVar
from urllib.parse import quote

import requests
from pydantic import BaseModel, ValidationError

from .config import CODE_LENGTH
from .errors import DecodeError, RemoteError, TransportError, UnexpectedStatusError
from .schemas import ApiErrorResponse, CreateGameResponse, GuessRequest, GuessResponse

logger = logging.getLogger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class ApiClient:
    """Client for the Mastermind REST API. One instance per process."""

    def __init__(self, base_url: str, http: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        # one pooled session reused for every call
        self.http = http or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.http.close()

    # --- Low-level calls ---

    def _send(self, endpoint: str, method: str, body: Optional[BaseModel] = None) -> requests.Response:
        url = self.base_url + endpoint
        kwargs = {}
        if body is not None:
            kwargs["data"] = body.model_dump_json()
            kwargs["headers"] = JSON_HEADERS

        logger.debug("%s %s", method, url)
        try:
            # No timeout: the library default applies
            return self.http.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.info("Request %s %s failed: %s", method, url, e)
            raise TransportError(e) from e

    def _check_status(self, response: requests.Response, expected_status: int) -> None:
        if response.status_code == expected_status:
            return

        if response.content:
            try:
                payload = ApiErrorResponse.model_validate_json(response.content)
            except ValidationError:
                pass
            else:
                raise RemoteError(payload.error, response.status_code)

        raise UnexpectedStatusError(response.status_code)

    def _decode(self, response: requests.Response, response_model: Type[ResponseModel], endpoint: str) -> ResponseModel:
        try:
            return response_model.model_validate_json(response.content)
        except ValidationError as e:
            logger.error("Decoding error for %s: %s", endpoint, e)
            logger.error("Received body: %r", response.text)
            raise DecodeError(response.text, e) from e

    def call(
        self,
        endpoint: str,
        method: str,
        response_model: Type[ResponseModel],
        body: Optional[BaseModel] = None,
        expected_status: int = 200,
    ) -> ResponseModel:
        response = self._send(endpoint, method, body)
        self._check_status(response, expected_status)
        return self._decode(response, response_model, endpoint)

    def call_no_content(self, endpoint: str, method: str, expected_status: int = 204) -> None:
        response = self._send(endpoint, method)
        self._check_status(response, expected_status)

    # --- Game API ---

    def create_game(self) -> str:
        created = self.call("/game", "POST", CreateGameResponse, expected_status=200)
        return created.game_id

    def make_guess(self, game_id: str, guess: str, code_length: int = CODE_LENGTH) -> GuessResponse:
        body = GuessRequest(game_id=game_id, guess=guess)
        response = self._send("/guess", "POST", body)
        self._check_status(response, 200)
        feedback = self._decode(response, GuessResponse, "/guess")

        # The server owns the scoring, we only check the pair is possible
        if feedback.black + feedback.white > code_length:
            logger.error(
                "Impossible feedback for a %d-digit code: black=%d white=%d",
                code_length, feedback.black, feedback.white,
            )
            logger.error("Received body: %r", response.text)
            raise DecodeError(response.text)
        return feedback

    def delete_game(self, game_id: str) -> None:
        # game_id is an opaque token, keep it one path segment
        self.call_no_content(f"/game/{quote(game_id, safe='')}", "DELETE", expected_status=204)
