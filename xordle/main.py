'''
Xordle API

Endpoints:
POST /rounds                   -> start (or resume) a daily or practice round
GET  /rounds/{id}              -> read state & history
POST /rounds/{id}/guess        -> submit a guess
GET  /rounds/{id}/share        -> copy/paste summary of a finished round

Extras:
GET  /stats                    -> daily scoreboard
GET  /export, POST /import     -> move stored history to another device

Puzzles are never stored: the round id carries the seed, and the puzzle is
regenerated from it on every request.
'''

from datetime import date
from functools import lru_cache
from typing import Optional

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware

from .config import config
from .db import get_db                  # SQLAlchemy Session dependency
from .repository import DBStorage       # DB-backed key/value store
from .bootstrap_db import create_all    # dev-only: create tables
from .engine import describe_clue
from .game_logger import game_logger
from .puzzle import GenerationExhausted, Puzzle, make_puzzle
from .random_client import fetch_seed
from .round import GuessRejected, Round, day_number, parse_round_id, round_id_for, status_key
from .share import share_text
from .stats import compute_stats
from .store import export_code, import_code
from .types import Mode, Word

from .schemas import (
    CluedLetterOut,
    ExportOut,
    GuessEntryOut,
    GuessRequest,
    GuessResponse,
    ImportOut,
    ImportRequest,
    RejectionOut,
    RoundState,
    ShareOut,
    StatsOut,
)

app = FastAPI(title="Xordle API", version="1.0.0")

# Allow everything in dev so the docs and front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

# --- Dev convenience: auto-create tables locally ---
if config.APP_ENV == "local":
    @app.on_event("startup")
    def _dev_create_tables():
        create_all()


def get_storage(session = Depends(get_db)) -> DBStorage:
    return DBStorage(session)


def today() -> date:
    return date.today()


@lru_cache(maxsize=128)
def puzzle_for(seed: int) -> Puzzle:
    try:
        return make_puzzle(seed)
    except GenerationExhausted as exc:
        game_logger.log_error(exc, "make_puzzle", seed=seed)
        raise HTTPException(status_code=500, detail="Puzzle generation failed; check the word lists.")


def load_round(round_id: str, storage: DBStorage, create: bool = False) -> Round:
    try:
        _, seed = parse_round_id(round_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Round not found")
    if not create and storage.get(status_key(round_id)) is None:
        raise HTTPException(status_code=404, detail="Round not found")
    try:
        return Round.load(round_id, puzzle_for(seed), storage)
    except ValueError as exc:
        game_logger.log_error(exc, "load_round", round_id=round_id)
        raise HTTPException(status_code=500, detail="Stored round state is corrupt.")


# --- Response builders ---

def _to_entry(round_: Round, guess: Word) -> GuessEntryOut:
    clues = round_.composite(guess)
    return GuessEntryOut(
        guess=guess,
        clues=[
            CluedLetterOut(letter=c.letter, clue=c.clue.name.lower() if c.clue is not None else None)
            for c in clues
        ],
        description=describe_clue(clues),
    )


def _revealed_targets(round_: Round) -> Optional[list]:
    return list(round_.targets) if round_.is_over else None


def _to_round_state(round_: Round) -> RoundState:
    mode, _ = parse_round_id(round_.round_id)
    return RoundState(
        round_id=round_.round_id,
        mode=mode,
        status=round_.status,
        max_guesses=round_.max_guesses,
        real_max_guesses=round_.real_max_guesses,
        bonus_guess=round_.bonus_guess,
        guesses=[_to_entry(round_, g) for g in round_.guesses],
        letters={letter: c.name.lower() for letter, c in round_.letter_aggregate().items()},
        hint=round_.hint(),
        targets=_revealed_targets(round_),
    )

# ---------------- Routes ----------------

@app.post("/rounds", response_model=RoundState, summary="Start or resume a round")
def start_round(
    mode: Mode = "daily",
    day: Optional[int] = None,
    seed: Optional[int] = None,
    storage: DBStorage = Depends(get_storage),
) -> RoundState:
    """
    daily    -> today's puzzle, or an earlier one with ?day=N
    practice -> ?seed=N replays a practice puzzle; without it a fresh seed is drawn
    """
    if mode == "daily":
        latest = day_number(today())
        seed = latest if day is None else day
        if seed < 1 or seed > latest:
            raise HTTPException(status_code=400, detail=f"Daily puzzles run from day 1 to day {latest}.")
    elif seed is None:
        seed = fetch_seed()

    round_id = round_id_for(mode, seed)
    is_new = storage.get(status_key(round_id)) is None
    round_ = load_round(round_id, storage, create=True)
    if is_new:
        game_logger.log_round_event(round_id, "round_started", opening=round_.guesses[0])
    return _to_round_state(round_)


@app.get("/rounds/{round_id}", response_model=RoundState, summary="Get current round state")
def get_round(
    round_id: str,
    storage: DBStorage = Depends(get_storage),
) -> RoundState:
    return _to_round_state(load_round(round_id, storage))


@app.post(
    "/rounds/{round_id}/guess",
    response_model=GuessResponse,
    responses={400: {"model": RejectionOut}},
    summary="Submit a guess",
)
def submit_guess(
    round_id: str,
    payload: GuessRequest,
    storage: DBStorage = Depends(get_storage),
) -> GuessResponse:
    round_ = load_round(round_id, storage)

    # Round.submit() does every check before appending anything
    try:
        round_.submit(payload.guess)
    except GuessRejected as rejected:
        game_logger.log_guess(round_id, payload.guess, accepted=False, reason=rejected.reason)
        raise HTTPException(
            status_code=400,
            detail=RejectionOut(reason=rejected.reason, message=rejected.message).model_dump(),
        )

    guess = round_.guesses[-1]
    game_logger.log_guess(round_id, guess, accepted=True)
    if round_.is_over:
        game_logger.log_round_event(round_id, f"round_{round_.status}", guesses=len(round_.guesses))
    elif round_.bonus_guess:
        game_logger.log_round_event(round_id, "bonus_guess", guesses=len(round_.guesses))

    guesses_left = 0 if round_.is_over else round_.real_max_guesses - len(round_.guesses)
    return GuessResponse(
        status=round_.status,
        feedback=_to_entry(round_, guess),
        guesses_left=guesses_left,
        bonus_guess=round_.bonus_guess,
        hint=round_.hint(),
        targets=_revealed_targets(round_),
    )


@app.get("/rounds/{round_id}/share", response_model=ShareOut, summary="Copy/paste summary of a finished round")
def share_round(
    round_id: str,
    color_blind: bool = False,
    storage: DBStorage = Depends(get_storage),
) -> ShareOut:
    round_ = load_round(round_id, storage)
    if not round_.is_over:
        raise HTTPException(status_code=409, detail="Finish the round before sharing it.")

    mode, seed = parse_round_id(round_id)
    label = str(seed) if mode == "daily" else f"practice-{seed}"
    return ShareOut(text=share_text(round_, label, color_blind=color_blind))


@app.get("/stats", response_model=StatsOut, summary="Get daily scoreboard")
def get_stats(storage: DBStorage = Depends(get_storage)) -> StatsOut:
    stats = compute_stats(storage, day_number(today()))
    return StatsOut(
        played=stats.played,
        won=stats.won,
        lost=stats.lost,
        win_percentage=stats.win_percentage,
        current_streak=stats.current_streak,
        best_streak=stats.best_streak,
        guess_distribution=stats.guess_distribution,
    )


@app.get("/export", response_model=ExportOut, summary="Export stored history as a code")
def export_history(storage: DBStorage = Depends(get_storage)) -> ExportOut:
    return ExportOut(code=export_code(storage))


@app.post("/import", response_model=ImportOut, summary="Import history from an export code")
def import_history(payload: ImportRequest, storage: DBStorage = Depends(get_storage)) -> ImportOut:
    try:
        imported = import_code(storage, payload.code)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    return ImportOut(imported=imported)
