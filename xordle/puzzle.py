"""
Puzzle generation (no HTTP, no storage).

A puzzle is two secret words that share no letters, plus one opening guess
that gives a hint without giving away either word. Everything is drawn from
a SeededSequence, so the same seed always yields the same puzzle.

Draw order matters: both targets first (drawn as a pair until the pair is
valid), then the opening guess. Rejected draws still advance the sequence.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .catalog import WILDCARD, WordCatalog, get_catalog
from .config import config
from .engine import clue, count_matching
from .sequence import SeededSequence, pick
from .types import Clue, Word


class GenerationExhausted(RuntimeError):
    """The eligible words could not satisfy the puzzle rules within the draw cap."""


@dataclass(frozen=True)
class Puzzle:
    targets: Tuple[Word, Word]
    initial_guesses: Tuple[Word, ...]


def is_valid_clue_pair(word1: Word, word2: Word) -> bool:
    """Two targets must be the same length and share no letter at all."""
    if WILDCARD in word1 or WILDCARD in word2:
        return False
    if len(word1) != len(word2):
        return False
    if word1 == word2:
        return False
    i = 0
    while i < len(word1):
        if word1[i] == word2[i]:
            return False
        if word1[i] in word2:
            return False
        i += 1
    return True


def is_good_initial_guess(targets: Tuple[Word, Word], candidate: Word) -> bool:
    """
    The opening guess must leave real ambiguity: against either target it
    may light up at most 4 cells (CORRECT + ELSEWHERE).
    """
    if WILDCARD in candidate:
        return False
    for target in targets:
        counts = count_matching(clue(candidate, target))
        if counts[Clue.CORRECT] + counts[Clue.ELSEWHERE] >= 5:
            return False
    return True


def random_targets(
    eligible: Sequence[Word], sequence: SeededSequence, max_draws: int
) -> Tuple[Tuple[Word, Word], SeededSequence]:
    draws = 0
    while draws < max_draws:
        candidate1, sequence = pick(eligible, sequence)
        candidate2, sequence = pick(eligible, sequence)
        if is_valid_clue_pair(candidate1, candidate2):
            return (candidate1, candidate2), sequence
        draws += 1
    raise GenerationExhausted(f"No valid target pair after {max_draws} draws.")


def initial_guess(
    targets: Tuple[Word, Word],
    eligible: Sequence[Word],
    sequence: SeededSequence,
    max_draws: int,
) -> Tuple[Word, SeededSequence]:
    draws = 0
    while draws < max_draws:
        candidate, sequence = pick(eligible, sequence)
        if is_good_initial_guess(targets, candidate):
            return candidate, sequence
        draws += 1
    raise GenerationExhausted(f"No balanced opening guess after {max_draws} draws.")


def make_puzzle(
    seed: int,
    catalog: Optional[WordCatalog] = None,
    max_draws: Optional[int] = None,
) -> Puzzle:
    """Same seed + same catalog -> same Puzzle, every time."""
    catalog = catalog or get_catalog()
    max_draws = max_draws if max_draws is not None else config.MAX_DRAWS

    sequence = SeededSequence.from_seed(seed)
    targets, sequence = random_targets(catalog.eligible, sequence, max_draws)
    opening, sequence = initial_guess(targets, catalog.eligible, sequence, max_draws)
    return Puzzle(targets=targets, initial_guesses=(opening,))
