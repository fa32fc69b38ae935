"""
Explicit validation & Pydantic models
- Defines the structure of API requests and responses.
- Targets are never part of a response while the round is still being played.
"""

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

ClueName = Literal["absent", "elsewhere", "correct"]


# 1. One cell of a composite clue
class CluedLetterOut(BaseModel):
    letter: str = Field(..., description="The guessed letter")
    clue: Optional[ClueName] = Field(None, description="Best clue from either target; null past the end of the guess")


# 2. One locked-in guess with its composite clue
class GuessEntryOut(BaseModel):
    guess: str = Field(..., description="The guessed word")
    clues: List[CluedLetterOut] = Field(..., description="Composite (xor) clue, one entry per letter")
    description: str = Field(..., description="Spoken form, ex. 'N correct, O elsewhere, T no'")


# 3. Overall state of a round
class RoundState(BaseModel):
    round_id: str = Field(..., description="'day-N' for daily rounds, 'practice-N' for practice rounds")
    mode: Literal["daily", "practice"] = Field(..., description="Daily puzzle or practice puzzle")
    status: Literal["playing", "won", "lost"] = Field(..., description="Current state of the round")
    max_guesses: int = Field(..., description="Normal guess budget (opening guess included)")
    real_max_guesses: int = Field(..., description="Budget including an earned bonus guess")
    bonus_guess: bool = Field(..., description="True once a bonus guess has been earned")
    guesses: List[GuessEntryOut] = Field(..., description="All locked-in guesses, opening guess first")
    letters: Dict[str, ClueName] = Field(..., description="Best clue seen so far for each letter")
    hint: str = Field(..., description="Status line for the player")
    targets: Optional[List[str]] = Field(None, description="The two answers (only revealed once the round is over)")


# 4. Validates the player's guess
class GuessRequest(BaseModel):
    guess: str = Field(..., max_length=32, description="A five-letter word")

    @field_validator("guess")
    @classmethod
    def strip_guess(cls, guess: str) -> str:
        """
        Only trim whitespace here. Length, letters, duplicates and the word list
        depend on the round, so the round itself checks them.
        """
        return guess.strip()

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": "north"},
                {"guess": "bleak"},
            ]
        }
    }


# 5. Result of a guess
class GuessResponse(BaseModel):
    status: Literal["playing", "won", "lost"] = Field(..., description="Current state of the round")
    feedback: GuessEntryOut = Field(..., description="Composite clue for the guess just made")
    guesses_left: int = Field(..., description="How many guesses remain (bonus guess included)")
    bonus_guess: bool = Field(..., description="True once a bonus guess has been earned")
    hint: str = Field(..., description="Status line for the player")
    targets: Optional[List[str]] = Field(None, description="The two answers (only revealed once the round is over)")


# 6. Rejected guess (HTTP 400 detail)
class RejectionOut(BaseModel):
    reason: Literal["round_over", "not_alphabetic", "wrong_length", "duplicate", "not_in_word_list"]
    message: str = Field(..., description="User-facing reason, ex. 'that's not in the word list'")


# 7. Copy/paste summary
class ShareOut(BaseModel):
    text: str = Field(..., description="Header line plus one row of glyphs per guess")


# 8. Scoreboard for daily rounds
class StatsOut(BaseModel):
    played: int = Field(..., description="Daily rounds finished")
    won: int = Field(..., description="Daily rounds won")
    lost: int = Field(..., description="Daily rounds lost")
    win_percentage: Optional[float] = Field(None, description="Share of finished rounds that were won")
    current_streak: int = Field(..., description="Consecutive daily wins up to today")
    best_streak: int = Field(..., description="Longest run of consecutive daily wins")
    guess_distribution: Dict[int, int] = Field(..., description="Guesses used -> number of wins")


# 9. Import/export of stored history
class ExportOut(BaseModel):
    code: str = Field(..., description="Base64 snapshot of every stored round")


class ImportRequest(BaseModel):
    code: str = Field(..., min_length=1, description="A code produced by GET /export")


class ImportOut(BaseModel):
    imported: int = Field(..., description="How many stored values were restored")
