"""
Round state machine (no HTTP; storage is injected).

A round starts "playing" with the puzzle's opening guess already on the board.
Each submitted guess is either rejected (nothing changes) or appended, and
then the status is re-evaluated:
- both targets guessed (any order)           -> "won"
- budget used up and last guess not a target -> "lost"
- budget used up and last guess IS a target  -> one bonus guess, still "playing"
"won" and "lost" are final.

Persistence is a tiny key/value capability (RoundStorage), so the same Round
works with the in-memory store in tests and the DB store in the API.
"""

from datetime import date
from typing import Any, Dict, List, Optional, Protocol, Tuple

from .catalog import WordCatalog, get_catalog
from .config import config
from .engine import clue, xorclue
from .puzzle import Puzzle
from .types import Clue, Clues, Mode, RoundStatus, Word


class GuessRejected(ValueError):
    """A guess that was not accepted. Nothing about the round changed."""

    def __init__(self, reason: str, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


class RoundStorage(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


# --- Round ids & storage keys ---

def day_number(today: date, epoch: Optional[date] = None) -> int:
    """Day 1 is the epoch itself."""
    epoch = epoch or config.EPOCH
    return (today - epoch).days + 1


def round_id_for(mode: Mode, seed: int) -> str:
    return f"day-{seed}" if mode == "daily" else f"practice-{seed}"


def parse_round_id(round_id: str) -> Tuple[Mode, int]:
    """'day-12' -> ('daily', 12); 'practice-77' -> ('practice', 77)"""
    prefix, _, number = round_id.partition("-")
    try:
        seed = int(number)
    except ValueError:
        raise ValueError(f"Unknown round id: {round_id!r}")
    if prefix == "day" and seed >= 1:
        return "daily", seed
    if prefix == "practice":
        return "practice", seed
    raise ValueError(f"Unknown round id: {round_id!r}")


def status_key(round_id: str) -> str:
    return f"game-{round_id}"


def guesses_key(round_id: str) -> str:
    return f"guesses-{round_id}"


ROUND_STATUSES = ("playing", "won", "lost")


def check_stored_status(value: Any) -> RoundStatus:
    if value not in ROUND_STATUSES:
        raise ValueError(f"Stored status must be one of {', '.join(ROUND_STATUSES)}, got {value!r}")
    return value


def check_stored_guesses(value: Any) -> List[Word]:
    # A bare string would otherwise be split into letters by list()
    if not isinstance(value, list) or not all(isinstance(g, str) for g in value):
        raise ValueError(f"Stored guesses must be a list of words, got {value!r}")
    return value


# --- The state machine ---

class Round:
    def __init__(
        self,
        puzzle: Puzzle,
        guesses: Optional[List[Word]] = None,
        status: RoundStatus = "playing",
        max_guesses: Optional[int] = None,
        catalog: Optional[WordCatalog] = None,
        round_id: Optional[str] = None,
        storage: Optional[RoundStorage] = None,
    ) -> None:
        self.puzzle = puzzle
        self.guesses: List[Word] = list(puzzle.initial_guesses) if guesses is None else list(guesses)
        self.status: RoundStatus = status
        self.max_guesses = max_guesses if max_guesses is not None else config.MAX_GUESSES
        self.catalog = catalog or get_catalog()
        self.round_id = round_id
        self.storage = storage

    @classmethod
    def load(
        cls,
        round_id: str,
        puzzle: Puzzle,
        storage: RoundStorage,
        max_guesses: Optional[int] = None,
        catalog: Optional[WordCatalog] = None,
    ) -> "Round":
        """Resume a stored round, or start a fresh one seeded with the opening guess."""
        status = check_stored_status(storage.get(status_key(round_id), "playing"))
        guesses = storage.get(guesses_key(round_id))
        if guesses is not None:
            guesses = check_stored_guesses(guesses)
        round_ = cls(
            puzzle,
            guesses=guesses,
            status=status,
            max_guesses=max_guesses,
            catalog=catalog,
            round_id=round_id,
            storage=storage,
        )
        if guesses is None:
            round_.save()
        return round_

    def save(self) -> None:
        if self.storage is None or self.round_id is None:
            return
        self.storage.set(status_key(self.round_id), self.status)
        self.storage.set(guesses_key(self.round_id), list(self.guesses))

    # --- derived values ---

    @property
    def targets(self) -> Tuple[Word, Word]:
        return self.puzzle.targets

    @property
    def word_length(self) -> int:
        return len(self.targets[0])

    @property
    def is_over(self) -> bool:
        return self.status != "playing"

    @property
    def bonus_guess(self) -> bool:
        """The normal budget is spent, but the last guess was a target."""
        return (
            len(self.guesses) >= self.max_guesses
            and self.guesses[self.max_guesses - 1] in self.targets
            and self.status != "won"
        )

    @property
    def real_max_guesses(self) -> int:
        return self.max_guesses + (1 if self.bonus_guess else 0)

    def composite(self, guess: Word) -> Clues:
        return xorclue(clue(guess, self.targets[0]), clue(guess, self.targets[1]))

    def letter_aggregate(self) -> Dict[str, Clue]:
        """Best clue seen for each letter over every locked-in guess."""
        info: Dict[str, Clue] = {}
        for guess in self.guesses:
            for cell in self.composite(guess):
                if cell.clue is None:
                    break
                old = info.get(cell.letter)
                if old is None or cell.clue > old:
                    info[cell.letter] = cell.clue
        return info

    def found_target(self) -> Optional[Word]:
        """The target already guessed, while the round is not yet won."""
        if self.status == "won":
            return None
        for target in self.targets:
            if target in self.guesses:
                return target
        return None

    def hint(self) -> str:
        if self.is_over:
            verbed = "won" if self.status == "won" else "lost"
            first, second = (t.upper() for t in self.targets)
            return f"you {verbed}! the answers were {first}, {second}"
        if len(self.guesses) == self.max_guesses and self.bonus_guess:
            return "last chance! do a bonus guess"
        found = self.found_target()
        if found is not None:
            return f"you got {found.upper()}, one more to go"
        return ""

    # --- transitions ---

    def check_guess(self, guess: Word) -> Word:
        """Normalize a guess or raise GuessRejected. Never mutates the round."""
        if self.is_over:
            raise GuessRejected("round_over", "the round is over")
        if len(self.guesses) >= self.real_max_guesses:
            raise GuessRejected("round_over", "no guesses left")

        word = guess.strip().lower()
        if word and (not word.isalpha() or not word.isascii()):
            raise GuessRejected("not_alphabetic", "letters only, please")
        if len(word) < self.word_length:
            raise GuessRejected("wrong_length", "type more letters")
        if len(word) > self.word_length:
            raise GuessRejected("wrong_length", "too many letters")
        if word in self.guesses:
            raise GuessRejected("duplicate", "you've already guessed that")
        if not self.catalog.is_acceptable(word):
            raise GuessRejected("not_in_word_list", "that's not in the word list")
        return word

    def submit(self, guess: Word) -> Clues:
        """
        Accept a guess (or raise GuessRejected) and return its composite clue.
        All checks run before anything is appended.
        """
        word = self.check_guess(guess)
        self.guesses.append(word)
        self._win_or_lose()
        self.save()
        return self.composite(word)

    def _win_or_lose(self) -> None:
        if self.targets[0] in self.guesses and self.targets[1] in self.guesses:
            self.status = "won"
        elif len(self.guesses) >= self.max_guesses:
            if len(self.guesses) == self.max_guesses and self.guesses[-1] in self.targets:
                # Bonus guess earned; decide after it is used
                return
            self.status = "lost"
