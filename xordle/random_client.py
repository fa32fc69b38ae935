"""
- HTTP call with clear fallback
Get a practice-mode seed from random.org. If anything goes wrong (no internet,
timeout, bad response), we fall back to a local secure random generator so the game still works.
"""

import requests
from secrets import randbelow

from .config import config

SEED_MAX = 1_000_000_000


def fetch_seed() -> int:
    params = {
        "num": 1,
        "min": 1,
        "max": SEED_MAX,
        "col": 1,
        "base": 10,
        "format": "plain",
        "rnd": "new",
    }

    try:
        response = requests.get(config.RANDOM_URL, params=params, timeout=config.RANDOM_TIMEOUT_SECONDS)
        response.raise_for_status()

        # The body looks like: "48213\n"
        seed = int(response.text.strip())
        if seed < 1 or seed > SEED_MAX:
            raise ValueError("random.org number out of range.")
        return seed

    except (requests.RequestException, ValueError):
        # randbelow(SEED_MAX) + 1 gives 1..SEED_MAX
        return randbelow(SEED_MAX) + 1
