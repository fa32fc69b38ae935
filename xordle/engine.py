"""
Pure clue logic (no HTTP, no storage).
For each guess we compute per-letter clues against ONE target:
- CORRECT: right letter, right place
- ELSEWHERE: letter is in the target but somewhere else
- ABSENT: letter is not in the target (or all its copies are already used up)

Then we merge the clues for the two targets into one "xor-clue":
a cell shows the best news it got from EITHER target.
"""

from collections import Counter
from typing import Dict, List, Sequence

from .types import Clue, CluedLetter, Clues, Word

# Share-block glyphs, indexed by Clue value
EMOJI = ["⬛", "🟨", "🟩"]
EMOJI_COLOR_BLIND = ["⬛", "🟦", "🟧"]

CLUE_WORDS: Dict[Clue, str] = {
    Clue.ABSENT: "no",
    Clue.ELSEWHERE: "elsewhere",
    Clue.CORRECT: "correct",
}


def clue(guess: Word, target: Word) -> Clues:
    """
    Example:
      guess  = "llama"
      target = "hello"
      -> l ELSEWHERE, l ELSEWHERE, a ABSENT, m ABSENT, a ABSENT
    Only two l's exist in "hello", so at most two l's light up.

    If the guess is shorter than the target the extra cells have clue None.
    """
    n = len(target)
    result: List[CluedLetter] = []

    # 1. Exact positions first. Whatever is left in the target goes in a tally.
    remaining: Dict[str, int] = {}
    i = 0
    while i < n:
        if i < len(guess) and guess[i] == target[i]:
            result.append(CluedLetter(guess[i], Clue.CORRECT))
        else:
            remaining[target[i]] = remaining.get(target[i], 0) + 1
            if i < len(guess):
                result.append(CluedLetter(guess[i], Clue.ABSENT))
            else:
                result.append(CluedLetter("", None))
        i += 1

    # 2. Displaced letters, spending the tally left to right
    i = 0
    while i < n:
        cell = result[i]
        if cell.clue == Clue.ABSENT and remaining.get(cell.letter, 0) > 0:
            result[i] = CluedLetter(cell.letter, Clue.ELSEWHERE)
            remaining[cell.letter] -= 1
        i += 1

    return result


def xorclue(clues1: Sequence[CluedLetter], clues2: Sequence[CluedLetter]) -> Clues:
    """
    Merge the clues of the same guess against both targets.
    Each cell keeps the better of the two clues (ABSENT < ELSEWHERE < CORRECT),
    so the player cannot tell which target produced it.
    """
    if len(clues1) != len(clues2):
        raise ValueError("Both clue sequences must describe the same guess.")

    merged: List[CluedLetter] = []
    for first, second in zip(clues1, clues2):
        letter = first.letter or second.letter
        if first.clue is None:
            merged.append(CluedLetter(letter, second.clue))
        elif second.clue is None:
            merged.append(CluedLetter(letter, first.clue))
        else:
            merged.append(CluedLetter(letter, max(first.clue, second.clue)))
    return merged


def count_matching(clued: Sequence[CluedLetter]) -> Counter:
    """How many cells got each clue. Unset cells are skipped."""
    return Counter(cell.clue for cell in clued if cell.clue is not None)


def describe_clue(clued: Sequence[CluedLetter]) -> str:
    # e.g. "N correct, O elsewhere, T no"
    return ", ".join(
        f"{cell.letter.upper()} {CLUE_WORDS[cell.clue]}"
        for cell in clued
        if cell.clue is not None
    )


def clue_symbols(clued: Sequence[CluedLetter], color_blind: bool = False) -> str:
    emoji = EMOJI_COLOR_BLIND if color_blind else EMOJI
    return "".join(emoji[cell.clue if cell.clue is not None else 0] for cell in clued)
