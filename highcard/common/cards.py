# highcard/common/cards.py

import random
from dataclasses import dataclass
from typing import List

from .constants import RANKS, RANK_NAMES, SUITS, SUIT_NAMES


@dataclass(frozen=True)
class Card:
    rank: int  # 1..13
    suit: str  # "H","D","C","S"

    @property
    def label(self) -> str:
        """Short form used in logs, e.g. 'QH'."""
        return f"{rank_to_string(self.rank)}{self.suit}"

    def __str__(self) -> str:
        return format_card(self)


def rank_to_string(rank: int) -> str:
    return RANK_NAMES.get(rank, str(rank))


def suit_to_string(suit: str) -> str:
    return SUIT_NAMES.get(suit, "Unknown")


def format_card(card: Card) -> str:
    """'A of Hearts', '10 of Spades', ..."""
    return f"{rank_to_string(card.rank)} of {suit_to_string(card.suit)}"


def build_deck() -> List[Card]:
    """All 52 cards, suit-major then rank-minor (AH, 2H, ..., KH, AD, ...)."""
    return [Card(r, s) for s in SUITS for r in RANKS]


def shuffle_deck(deck: List[Card], rng=random) -> None:
    """
    In-place Fisher-Yates: for i from the last index down to 1, swap deck[i]
    with a uniformly chosen deck[j], 0 <= j <= i.
    rng: anything with randrange(), defaults to the process-wide generator.
    """
    for i in range(len(deck) - 1, 0, -1):
        j = rng.randrange(i + 1)
        deck[i], deck[j] = deck[j], deck[i]
