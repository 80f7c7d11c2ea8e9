import logging

import pytest

from highcard.common.cards import Card
from highcard.common.piles import DrawPile, EmptyLedger, EmptyPile, RoundLedger, TurnRotator


def test_push_then_pop_returns_same_card():
    pile = DrawPile()
    pile.push(Card(5, "C"))
    assert pile.pop() == Card(5, "C")
    assert pile.is_empty()


def test_pops_come_back_in_reverse_push_order():
    cards = [Card(r, "H") for r in range(1, 8)]
    pile = DrawPile()
    for c in cards:
        pile.push(c)
    assert [pile.pop() for _ in cards] == cards[::-1]


def test_pile_built_from_deck_has_last_card_on_top():
    pile = DrawPile([Card(1, "H"), Card(2, "H"), Card(3, "H")])
    assert len(pile) == 3
    assert pile.pop() == Card(3, "H")
    assert pile.drain() == [Card(2, "H"), Card(1, "H")]
    assert len(pile) == 0


def test_pop_empty_pile_raises():
    pile = DrawPile()
    assert pile.is_empty()
    assert pile.is_empty()  # observing does not change anything
    with pytest.raises(EmptyPile):
        pile.pop()


def test_ledger_is_fifo():
    ledger = RoundLedger()
    draws = [(Card(r, "D"), r % 4) for r in range(1, 11)]
    for card, player in draws:
        ledger.enqueue(card, player)
    assert len(ledger) == 10
    out = []
    while not ledger.is_empty():
        d = ledger.dequeue()
        out.append((d.card, d.player))
    assert out == draws


def test_dequeue_empty_ledger_raises():
    with pytest.raises(EmptyLedger):
        RoundLedger().dequeue()


@pytest.mark.parametrize("n", [2, 3, 4])
def test_rotator_is_round_robin(n):
    turns = TurnRotator.for_players(n)
    first = [turns.next() for _ in range(n)]
    assert sorted(first) == list(range(n))
    rest = [turns.next() for _ in range(2 * n)]
    assert rest == first * 2


def test_rotator_append_goes_before_current():
    turns = TurnRotator([0, 1])
    assert turns.next() == 0
    turns.append(2)
    assert [turns.next() for _ in range(6)] == [1, 0, 2, 1, 0, 2]
    assert len(turns) == 3


def test_rotator_append_to_empty():
    turns = TurnRotator([])
    turns.append(7)
    assert [turns.next(), turns.next()] == [7, 7]


def test_empty_rotator_raises():
    with pytest.raises(LookupError):
        TurnRotator([]).next()


def test_underflow_is_logged_before_raising(caplog):
    with caplog.at_level(logging.WARNING, logger="piles"):
        with pytest.raises(EmptyPile):
            DrawPile().pop()
        with pytest.raises(EmptyLedger):
            RoundLedger().dequeue()
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert [r.name for r in warnings] == ["piles", "piles"]
    assert "EmptyPile" in warnings[0].getMessage()
    assert "EmptyLedger" in warnings[1].getMessage()
