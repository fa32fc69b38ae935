"""
Labels for clarity.
"""

from enum import IntEnum
from typing import List, Literal, NamedTuple, Optional

Word = str  # 5 lowercase letters
RoundStatus = Literal["playing", "won", "lost"]
Mode = Literal["daily", "practice"]


class Clue(IntEnum):
    # Ordered: a higher value is better news for the player
    ABSENT = 0
    ELSEWHERE = 1
    CORRECT = 2


class CluedLetter(NamedTuple):
    letter: str
    clue: Optional[Clue]  # None = past the end of the guess, ignore


Clues = List[CluedLetter]
