"""
Reproducible pseudo-random numbers from an integer seed.

Puzzles for a given day must match on every client, so the formula below is
fixed and must never change. It is Mulberry32 on a 32-bit unsigned state:

    state = (state + 0x6D2B79F5) mod 2^32
    t = imul(state ^ (state >> 15), state | 1)
    t ^= t + imul(t ^ (t >> 7), t | 61)
    value = (t ^ (t >> 14)) >> 1        # drop the low bit -> [0, 2^31)

imul() keeps the low 32 bits of the product.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, TypeVar

MASK_32 = 0xFFFFFFFF
INCREMENT = 0x6D2B79F5

T = TypeVar("T")


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK_32


@dataclass(frozen=True)
class SeededSequence:
    """
    Immutable generator state. next() hands back the value AND a new state,
    so two sequences built from the same seed never interfere.
    """
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "SeededSequence":
        # Negative or huge seeds wrap into 32 bits
        return cls(seed & MASK_32)

    def next(self) -> Tuple[int, "SeededSequence"]:
        state = (self.state + INCREMENT) & MASK_32
        t = _imul(state ^ (state >> 15), state | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK_32
        t = (t ^ (t >> 14)) & MASK_32
        return t >> 1, SeededSequence(state)


def pick(items: Sequence[T], sequence: SeededSequence) -> Tuple[T, SeededSequence]:
    """
    Draw the next value and use it (mod len) as an index into items.
    Returns the chosen item and the advanced sequence.
    """
    if not items:
        raise ValueError("Cannot pick from an empty list.")
    value, advanced = sequence.next()
    return items[value % len(items)], advanced
