"""
Single place to:
- Read MASTERMIND_API_URL / MASTERMIND_LOG_LEVEL from env
- Hold the fixed game rules (attempt budget, code length, digit range)
- Bundle them in a Settings object that gets passed around explicitly

Why: the client and tests both build their own Settings instead of
reaching for module globals.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# 1) Load env vars from .env if present
load_dotenv()

# 2) Remote service location.
DEFAULT_API_URL = "https://mastermind.darkube.app"
API_BASE_URL = os.getenv("MASTERMIND_API_URL", DEFAULT_API_URL)

# 3) Log level for diagnostics (user-facing text is always printed).
LOG_LEVEL = os.getenv("MASTERMIND_LOG_LEVEL", "WARNING").upper()

# 4) Game rules. Fixed by the server, not runtime-configurable.
MAX_ATTEMPTS = 10
CODE_LENGTH = 4
MIN_DIGIT = 1
MAX_DIGIT = 6


@dataclass(frozen=True)
class Settings:
    base_url: str = API_BASE_URL
    max_attempts: int = MAX_ATTEMPTS
    code_length: int = CODE_LENGTH
    min_digit: int = MIN_DIGIT
    max_digit: int = MAX_DIGIT


def get_settings() -> Settings:
    return Settings()
