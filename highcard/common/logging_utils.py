# highcard/common/logging_utils.py

import logging
import os
from typing import Iterable

# Environment switches:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
# Logs go to stderr, the game transcript goes to stdout.
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start (game/main.py)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def short_cards(cards: Iterable, max_len: int = 8) -> str:
    """Compact card list for log lines: 'AH 10S KD ...' limited to max_len cards."""
    labels = [c.label for c in cards]
    shown = " ".join(labels[:max_len])
    if len(labels) > max_len:
        shown += f" ... (+{len(labels) - max_len} cards)"
    return shown
