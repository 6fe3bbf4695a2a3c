"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between this client and the game server.
- Defines the structure of API requests and responses.
"""

from pydantic import BaseModel, Field


# 1. Response when a new game is started (POST /game)
class CreateGameResponse(BaseModel):
    game_id: str = Field(..., description="Opaque session token issued by the server")


# 2. Body of POST /guess
class GuessRequest(BaseModel):
    game_id: str = Field(..., description="Session the guess belongs to")
    guess: str = Field(..., description="The digits as text, ex. '1234'")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"game_id": "abc123", "guess": "1234"},
            ]
        }
    }


# 3. Feedback for a single guess
class GuessResponse(BaseModel):
    black: int = Field(..., ge=0, description="Right digit, right position")
    white: int = Field(..., ge=0, description="Right digit, wrong position")

    def render(self) -> str:
        # ex. black=1, white=2 -> "BWW"
        return "B" * self.black + "W" * self.white


# 4. Error payload the server sends with non-success statuses
class ApiErrorResponse(BaseModel):
    error: str = Field(..., description="Human-readable error message")
