"""
Labels for clarity.
"""

from typing import Literal, Tuple

Digit = int  # 1 -> 6
Code = Tuple[Digit, ...]  # 4 digit guess
SessionStatus = Literal["uncreated", "in_progress", "won", "exhausted", "abandoned"]
ValidationRule = Literal["length", "character", "range"]
