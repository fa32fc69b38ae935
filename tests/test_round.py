"""
Testing the round state machine with a hand-made puzzle:
targets "north" and "bleak" (no shared letters), opening guess "ghost".
"""

from datetime import date

import pytest

from xordle.catalog import WordCatalog
from xordle.puzzle import Puzzle
from xordle.round import (
    GuessRejected,
    Round,
    day_number,
    guesses_key,
    parse_round_id,
    round_id_for,
    status_key,
)
from xordle.store import MemoryStorage
from xordle.types import Clue

PUZZLE = Puzzle(targets=("north", "bleak"), initial_guesses=("ghost",))
FILLERS = ["crazy", "plumb", "dizzy", "fjord", "vixen", "quirk", "nymph"]
CATALOG = WordCatalog.from_words(["north", "bleak", "ghost"] + FILLERS)


def new_round(max_guesses=6, **kwargs) -> Round:
    return Round(PUZZLE, max_guesses=max_guesses, catalog=CATALOG, **kwargs)


def test_round_starts_with_opening_guess():
    round_ = new_round()
    assert round_.guesses == ["ghost"]
    assert round_.status == "playing"
    assert round_.bonus_guess is False
    assert round_.real_max_guesses == 6


@pytest.mark.parametrize("order", [("north", "bleak"), ("bleak", "north")])
def test_win_in_either_order(order):
    round_ = new_round()
    round_.submit("crazy")

    round_.submit(order[0])
    assert round_.status == "playing"
    assert round_.hint() == f"you got {order[0].upper()}, one more to go"

    round_.submit(order[1])
    assert round_.status == "won"
    assert round_.hint() == "you won! the answers were NORTH, BLEAK"


def test_submit_returns_composite_clue():
    result = new_round().submit("north")
    assert [cell.clue for cell in result] == [Clue.CORRECT] * 5


def test_duplicate_guess_is_rejected():
    round_ = new_round()
    round_.submit("crazy")
    with pytest.raises(GuessRejected) as excinfo:
        round_.submit("crazy")
    assert excinfo.value.reason == "duplicate"
    assert excinfo.value.message == "you've already guessed that"
    assert round_.guesses == ["ghost", "crazy"]


def test_opening_guess_counts_as_guessed():
    with pytest.raises(GuessRejected) as excinfo:
        new_round().submit("ghost")
    assert excinfo.value.reason == "duplicate"


@pytest.mark.parametrize(
    "guess, reason",
    [
        ("nor", "wrong_length"),
        ("", "wrong_length"),
        ("northern", "wrong_length"),
        ("n0rth", "not_alphabetic"),
        ("zzzzz", "not_in_word_list"),
    ],
)
def test_bad_guesses_change_nothing(guess, reason):
    round_ = new_round()
    with pytest.raises(GuessRejected) as excinfo:
        round_.submit(guess)
    assert excinfo.value.reason == reason
    assert round_.guesses == ["ghost"]
    assert round_.status == "playing"


def test_rejection_messages_are_distinct():
    round_ = new_round()
    messages = set()
    for guess in ["nor", "n0rth", "zzzzz", "ghost"]:
        with pytest.raises(GuessRejected) as excinfo:
            round_.submit(guess)
        messages.add(excinfo.value.message)
    assert len(messages) == 4


def test_guesses_are_normalized():
    round_ = new_round()
    round_.submit("  NORTH ")
    assert round_.guesses[-1] == "north"


def test_lost_after_budget_without_targets():
    round_ = new_round()
    for word in FILLERS[:4]:
        round_.submit(word)
        assert round_.status == "playing"

    # 6th guess (opening + 5), not a target
    round_.submit(FILLERS[4])
    assert round_.status == "lost"
    assert round_.bonus_guess is False
    assert round_.hint() == "you lost! the answers were NORTH, BLEAK"

    with pytest.raises(GuessRejected) as excinfo:
        round_.submit(FILLERS[5])
    assert excinfo.value.reason == "round_over"
    assert len(round_.guesses) == 6


def test_target_as_last_guess_earns_one_bonus_guess():
    round_ = new_round()
    for word in FILLERS[:4]:
        round_.submit(word)

    round_.submit("north")
    assert len(round_.guesses) == 6
    assert round_.status == "playing"
    assert round_.bonus_guess is True
    assert round_.real_max_guesses == 7
    assert round_.hint() == "last chance! do a bonus guess"

    round_.submit("bleak")
    assert round_.status == "won"


def test_missed_bonus_guess_is_a_loss():
    round_ = new_round()
    for word in FILLERS[:4]:
        round_.submit(word)
    round_.submit("bleak")
    assert round_.status == "playing"

    round_.submit(FILLERS[4])
    assert round_.status == "lost"
    assert len(round_.guesses) == 7

    with pytest.raises(GuessRejected):
        round_.submit(FILLERS[5])


def test_winning_on_the_last_normal_guess():
    round_ = new_round()
    round_.submit("north")
    for word in FILLERS[:3]:
        round_.submit(word)
    round_.submit("bleak")
    assert round_.status == "won"
    assert round_.bonus_guess is False


def test_letter_aggregate_keeps_the_best_clue():
    round_ = new_round()
    letters = round_.letter_aggregate()
    assert letters == {
        "g": Clue.ABSENT,
        "h": Clue.ELSEWHERE,
        "o": Clue.ELSEWHERE,
        "s": Clue.ABSENT,
        "t": Clue.ELSEWHERE,
    }

    round_.submit("north")
    letters = round_.letter_aggregate()
    assert letters["o"] == Clue.CORRECT
    assert letters["h"] == Clue.CORRECT
    assert letters["n"] == Clue.CORRECT
    assert letters["g"] == Clue.ABSENT


def test_save_and_load_round_trip_through_storage():
    storage = MemoryStorage()
    round_ = Round.load("practice-7", PUZZLE, storage, max_guesses=6, catalog=CATALOG)
    assert storage.get(status_key("practice-7")) == "playing"
    assert storage.get(guesses_key("practice-7")) == ["ghost"]

    round_.submit("north")
    round_.submit("bleak")

    resumed = Round.load("practice-7", PUZZLE, storage, max_guesses=6, catalog=CATALOG)
    assert resumed.status == "won"
    assert resumed.guesses == ["ghost", "north", "bleak"]


def test_rejected_guess_is_not_saved():
    storage = MemoryStorage()
    round_ = Round.load("day-3", PUZZLE, storage, max_guesses=6, catalog=CATALOG)
    with pytest.raises(GuessRejected):
        round_.submit("zzzzz")
    assert storage.get(guesses_key("day-3")) == ["ghost"]


def test_round_ids():
    assert round_id_for("daily", 12) == "day-12"
    assert round_id_for("practice", 77) == "practice-77"
    assert parse_round_id("day-12") == ("daily", 12)
    assert parse_round_id("practice-77") == ("practice", 77)
    assert parse_round_id("practice--5") == ("practice", -5)
    for bad in ["day-0", "day-x", "week-3", "day"]:
        with pytest.raises(ValueError):
            parse_round_id(bad)


def test_day_number():
    assert day_number(date(2022, 1, 1), epoch=date(2022, 1, 1)) == 1
    assert day_number(date(2022, 2, 1), epoch=date(2022, 1, 1)) == 32


@pytest.mark.parametrize(
    "key, value",
    [
        ("game-day-4", "banana"),
        ("guesses-day-4", "north"),
        ("guesses-day-4", ["ghost", 7]),
    ],
)
def test_load_refuses_corrupt_stored_state(key, value):
    storage = MemoryStorage()
    storage.set(status_key("day-4"), "playing")
    storage.set(guesses_key("day-4"), ["ghost"])
    storage.set(key, value)

    with pytest.raises(ValueError):
        Round.load("day-4", PUZZLE, storage, max_guesses=6, catalog=CATALOG)


def test_hint_is_empty_mid_round():
    round_ = new_round()
    assert round_.hint() == ""
    round_.submit("crazy")
    assert round_.hint() == ""
