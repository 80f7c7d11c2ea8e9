# highcard/common/rules.py

from dataclasses import dataclass
from typing import Optional

from .constants import DECK_SIZE, MAX_ROUNDS
from .piles import RoundLedger


@dataclass(frozen=True)
class RoundOutcome:
    best_player: Optional[int]  # None when no card was drawn
    best_value: int             # -1 when no card was drawn
    tie: bool
    cards_played: int

    @property
    def no_cards(self) -> bool:
        return self.best_player is None

    @property
    def winner(self) -> Optional[int]:
        """The player to award, or None for a tie / empty round."""
        if self.tie:
            return None
        return self.best_player


def max_rounds(n_players: int, deck_size: int = DECK_SIZE, cap: int = MAX_ROUNDS) -> int:
    if cap * n_players > deck_size:
        return deck_size // n_players
    return cap


def resolve_round(ledger: RoundLedger) -> RoundOutcome:
    """
    Drain the ledger in draw order.
    A strictly higher rank takes the lead and clears the tie flag; an equal
    rank only sets the tie flag, the first player to reach that rank stays
    best_player. A tie at the top rank voids the round.
    """
    best_player: Optional[int] = None
    best_value = -1
    tie = False
    played = 0

    while not ledger.is_empty():
        draw = ledger.dequeue()
        played += 1
        value = draw.card.rank
        if value > best_value:
            best_value = value
            best_player = draw.player
            tie = False
        elif value == best_value:
            tie = True

    return RoundOutcome(best_player=best_player, best_value=best_value, tie=tie, cards_played=played)
