# highcard/game/display.py
from __future__ import annotations
import os
import sys
from dataclasses import dataclass
from typing import Iterable, List

from highcard.common.cards import Card, format_card
from highcard.common.constants import POINTS_PER_WIN, RED_SUITS
from highcard.common.ranking import PlayerScore

# CARD_COLOR=1 forces colour, CARD_COLOR=0 disables it, unset = only on a tty
CARD_COLOR = os.getenv("CARD_COLOR", "")

CSI = "\033["


@dataclass
class Style:
    prefix: str = ""
    suffix: str = CSI + "0m"

    def apply(self, text: str) -> str:
        return f"{self.prefix}{text}{self.suffix}"


RED_BOLD = Style(prefix=CSI + "31m" + CSI + "1m")  # hearts/diamonds


def color_enabled(stream=None, setting: str | None = None) -> bool:
    setting = CARD_COLOR if setting is None else setting
    if setting == "1":
        return True
    if setting == "0":
        return False
    stream = sys.stdout if stream is None else stream
    return hasattr(stream, "isatty") and stream.isatty()


def card_text(card: Card, color: bool = False) -> str:
    text = format_card(card)
    if color and card.suit in RED_SUITS:
        return RED_BOLD.apply(text)
    return text


def draw_line(name: str, card: Card, color: bool = False) -> str:
    return f"{name} draws: {card_text(card, color)}"


def winner_line(round_number: int, name: str) -> str:
    return f"Round {round_number} winner: {name} (+{POINTS_PER_WIN} points)"


def tie_line(round_number: int) -> str:
    return f"Round {round_number} result: Tie. No points awarded."


def ranking_lines(entries: Iterable[PlayerScore]) -> List[str]:
    lines = ["=== Final ranking (by score, BST in-order) ==="]
    for e in entries:
        lines.append(f"Player: {e.name} | Score: {e.score}")
    return lines
