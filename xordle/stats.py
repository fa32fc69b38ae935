"""
Scoreboard for daily rounds, derived from stored round state.
Nothing here is stored separately: replaying the storage always gives the same numbers.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from .round import guesses_key, round_id_for, status_key


@dataclass
class Stats:
    played: int = 0
    won: int = 0
    lost: int = 0
    current_streak: int = 0
    best_streak: int = 0
    # guesses used -> number of wins with that many guesses
    guess_distribution: Dict[int, int] = field(default_factory=dict)

    @property
    def win_percentage(self) -> Optional[float]:
        if self.played == 0:
            return None
        return round(100 * self.won / self.played, 1)


def compute_stats(storage, last_day: int) -> Stats:
    """
    Walk days 1..last_day in order. Only finished rounds count as played.
    A lost or skipped day (never finished) breaks the streak, except today,
    which may still be in progress.

    Storage is read once per prefix; the walk itself happens in memory.
    """
    statuses = dict(storage.items(status_key("day-")))
    guesses = dict(storage.items(guesses_key("day-")))

    stats = Stats()
    streak = 0

    day = 1
    while day <= last_day:
        round_id = round_id_for("daily", day)
        status = statuses.get(status_key(round_id))

        if status == "won":
            stats.played += 1
            stats.won += 1
            streak += 1
            used = len(guesses.get(guesses_key(round_id), []))
            stats.guess_distribution[used] = stats.guess_distribution.get(used, 0) + 1
        elif status == "lost":
            stats.played += 1
            stats.lost += 1
            streak = 0
        elif day < last_day:
            streak = 0

        if streak > stats.best_streak:
            stats.best_streak = streak
        day += 1

    stats.current_streak = streak
    return stats
