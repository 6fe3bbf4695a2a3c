"""
Every failure the client knows how to report.

InvalidGuess        -> bad text typed at the prompt (re-prompt)
ApiError            -> any failed remote call, one subclass per cause:
  TransportError        network / URL problem, no response at all
  RemoteError           server answered with {"error": "..."}
  UnexpectedStatusError wrong status and no structured error body
  DecodeError           right status, body did not match the schema
SessionStateError   -> a session method called in the wrong state (a bug)
"""

from typing import Optional

from .types import ValidationRule


class InvalidGuess(ValueError):
    def __init__(self, rule: ValidationRule, message: str):
        super().__init__(message)
        self.rule = rule
        self.message = message


class ApiError(Exception):
    """Base class for failed remote calls."""


class TransportError(ApiError):
    def __init__(self, cause: Exception):
        super().__init__(f"Could not reach the game server: {cause}")
        self.cause = cause


class RemoteError(ApiError):
    def __init__(self, message: str, status_code: int):
        super().__init__(f"API Error ({status_code}): {message}")
        self.message = message
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class UnexpectedStatusError(ApiError):
    def __init__(self, status_code: int):
        super().__init__(f"Unexpected status code from server: {status_code}")
        self.status_code = status_code


class DecodeError(ApiError):
    def __init__(self, raw_body: str, cause: Optional[Exception] = None):
        super().__init__("Could not decode the server response.")
        self.raw_body = raw_body
        self.cause = cause


class SessionStateError(RuntimeError):
    pass
