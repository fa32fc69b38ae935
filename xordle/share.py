"""
Copy/paste summary of a finished round.

One line per guess, one glyph per cell, lines joined with "\n":

    xordle #12 5/6
    ⬛🟨⬛⬛🟩
    ...
"""

from typing import Optional, Sequence

from .config import config
from .engine import clue, clue_symbols, xorclue
from .puzzle import Puzzle
from .round import Round
from .types import Word


def emoji_block(guesses: Sequence[Word], puzzle: Puzzle, color_blind: bool = False) -> str:
    first, second = puzzle.targets
    return "\n".join(
        clue_symbols(xorclue(clue(guess, first), clue(guess, second)), color_blind)
        for guess in guesses
    )


def share_text(round_: Round, label: str, color_blind: bool = False, game_name: Optional[str] = None) -> str:
    game_name = game_name or config.GAME_NAME
    score = "X" if round_.status == "lost" else str(len(round_.guesses))
    header = f"{game_name} #{label} {score}/{round_.max_guesses}"
    return header + "\n" + emoji_block(round_.guesses, round_.puzzle, color_blind)
