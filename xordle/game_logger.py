"""
Game Logger Module

One-line JSON entries for round and guess events, so the log is easy to grep
and parse. Console output always; a dated file in LOG_DIR when it is set.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from .config import config


class GameLogger:
    """
    Thin wrapper around the 'xordle' logger.

    Event types:
    - ROUND_EVENT: round started, won, lost
    - GUESS_ACCEPTED / GUESS_REJECTED
    - ERROR: generation exhaustion and other faults
    """

    def __init__(self, log_dir: Optional[str] = None, level: str = "INFO"):
        self.log_dir = Path(log_dir) if log_dir else None
        self.logger = self._setup_logger(level)

    def _setup_logger(self, level: str) -> logging.Logger:
        logger = logging.getLogger("xordle")
        logger.setLevel(level)

        # Prevent duplicate handlers on re-import
        if logger.handlers:
            logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(console_handler)

        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s | %(levelname)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            logger.addHandler(file_handler)

        return logger

    def _create_log_entry(self, event_type: str, action: str, details: Dict[str, Any]) -> str:
        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            "action": action,
            "details": details,
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_round_event(self, round_id: str, event: str, **kwargs):
        """event: 'round_started', 'round_won', 'round_lost', 'bonus_guess'"""
        details = {"round_id": round_id, **kwargs}
        self.logger.info(self._create_log_entry("ROUND_EVENT", event, details))

    def log_guess(self, round_id: str, guess: str, accepted: bool, reason: Optional[str] = None):
        details = {"round_id": round_id, "guess": guess}
        if accepted:
            self.logger.info(self._create_log_entry("GUESS_ACCEPTED", "submit_guess", details))
        else:
            details["reason"] = reason
            self.logger.info(self._create_log_entry("GUESS_REJECTED", "submit_guess", details))

    def log_error(self, error: Exception, action: str, **kwargs):
        details = {
            "error_type": type(error).__name__,
            "error_message": str(error),
            **kwargs,
        }
        self.logger.error(self._create_log_entry("ERROR", action, details))


# Global logger instance
game_logger = GameLogger(log_dir=config.LOG_DIR, level=config.LOG_LEVEL)
