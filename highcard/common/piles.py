# highcard/common/piles.py

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List

from .cards import Card
from .logging_utils import get_logger

_log = get_logger("piles")


# -------------------------
# Errors
# -------------------------
class EmptyPile(LookupError):
    """Raised when popping a draw pile that has no cards left."""
    pass


class EmptyLedger(LookupError):
    """Raised when dequeuing from a round ledger that holds no draws."""
    pass


def _require(condition: bool, exc: type, msg: str) -> None:
    if not condition:
        _log.warning(f"{exc.__name__}: {msg}")
        raise exc(msg)


# -------------------------
# Draw pile: LIFO of undealt cards
# -------------------------
class DrawPile:
    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: List[Card] = []
        for card in cards:
            self.push(card)

    def push(self, card: Card) -> None:
        self._cards.append(card)

    def pop(self) -> Card:
        _require(bool(self._cards), EmptyPile, "Draw pile is empty")
        return self._cards.pop()

    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def drain(self) -> List[Card]:
        """Pop everything left, top first."""
        left = self._cards[::-1]
        self._cards.clear()
        return left


# -------------------------
# Round ledger: FIFO of (card, player) for one round
# -------------------------
@dataclass(frozen=True)
class Draw:
    card: Card
    player: int


class RoundLedger:
    def __init__(self) -> None:
        self._draws: Deque[Draw] = deque()

    def enqueue(self, card: Card, player: int) -> None:
        self._draws.append(Draw(card, player))

    def dequeue(self) -> Draw:
        _require(bool(self._draws), EmptyLedger, "Round ledger is empty")
        return self._draws.popleft()

    def is_empty(self) -> bool:
        return not self._draws

    def __len__(self) -> int:
        return len(self._draws)


# -------------------------
# Turn rotator: fixed player order, cursor wraps with modulo
# -------------------------
class TurnRotator:
    def __init__(self, players: Iterable[int]) -> None:
        self._order: List[int] = list(players)
        self._cursor = 0

    @classmethod
    def for_players(cls, n_players: int) -> "TurnRotator":
        return cls(range(n_players))

    def append(self, player: int) -> None:
        """Add a player who takes a turn right before the current player comes round again."""
        if not self._order:
            self._order.append(player)
            return
        self._order.insert(self._cursor, player)
        self._cursor += 1

    def next(self) -> int:
        """Return the current player and advance to the following one."""
        _require(bool(self._order), LookupError, "Turn rotator has no players")
        player = self._order[self._cursor]
        self._cursor = (self._cursor + 1) % len(self._order)
        return player

    def __len__(self) -> int:
        return len(self._order)
