"""
Word Catalog

Two static word lists, loaded once per process:
- targets.json: candidate secret words, most common first
- dictionary.json: words the player is allowed to guess

Only a prefix of the targets is "eligible": every word up to and including
the cutoff word (words no rarer than it).
"""

import json
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple

from .config import config
from .types import Word

WORD_LENGTH = 5
WILDCARD = "*"


class CatalogError(ValueError):
    """A word list file is missing or malformed."""


def _load_word_list(path: Path) -> List[str]:
    """
    Load a JSON array of words.

    Raises:
        CatalogError: missing file, bad JSON, empty list, or bad entries
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            words = json.load(f)
    except FileNotFoundError:
        raise CatalogError(f"Word list file not found: {path}")
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in {path.name}: {e}")

    if not isinstance(words, list):
        raise CatalogError(f"{path.name} must contain an array of words")
    if not words:
        raise CatalogError(f"{path.name} cannot be empty")

    for index, word in enumerate(words):
        if not isinstance(word, str):
            raise CatalogError(f"Entry {index} in {path.name} is not a string")
        if word != word.lower() or not word.replace(WILDCARD, "").isalpha():
            raise CatalogError(f"Word at index {index} '{word}' must be lowercase letters")

    return words


@dataclass(frozen=True)
class WordCatalog:
    targets: Tuple[Word, ...]
    dictionary: FrozenSet[Word]
    cutoff: Optional[Word] = None
    eligible: Tuple[Word, ...] = field(init=False)

    def __post_init__(self):
        if self.cutoff is None:
            prefix = self.targets
        else:
            if self.cutoff not in self.targets:
                raise CatalogError(f"Cutoff word '{self.cutoff}' is not in the target list")
            prefix = self.targets[: self.targets.index(self.cutoff) + 1]
        eligible = tuple(word for word in prefix if len(word) == WORD_LENGTH)
        if not eligible:
            raise CatalogError("No eligible target words")
        object.__setattr__(self, "eligible", eligible)

    @classmethod
    def from_words(cls, targets, dictionary=(), cutoff=None) -> "WordCatalog":
        # Every target must be guessable, so they are always accepted
        return cls(
            targets=tuple(targets),
            dictionary=frozenset(dictionary) | frozenset(targets),
            cutoff=cutoff,
        )

    def is_acceptable(self, word: Word) -> bool:
        return word in self.dictionary


@lru_cache(maxsize=1)
def get_catalog() -> WordCatalog:
    """Process-wide, read-only catalog built from the configured files."""
    return WordCatalog.from_words(
        _load_word_list(config.TARGETS_FILE),
        _load_word_list(config.DICTIONARY_FILE),
        cutoff=config.ELIGIBLE_CUTOFF,
    )
