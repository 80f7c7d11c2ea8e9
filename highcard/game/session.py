# highcard/game/session.py

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from highcard.common.cards import Card, build_deck, shuffle_deck
from highcard.common.constants import POINTS_PER_WIN
from highcard.common.logging_utils import get_logger, short_cards
from highcard.common.piles import DrawPile, RoundLedger, TurnRotator
from highcard.common.ranking import PlayerScore, RankingTree
from highcard.common.results import ResultsLog
from highcard.common.rules import RoundOutcome, max_rounds, resolve_round
from highcard.game.display import draw_line, ranking_lines, tie_line, winner_line

log = get_logger("game.session")


@dataclass
class GameSummary:
    scores: List[PlayerScore]  # seating order
    results: ResultsLog
    ranking: RankingTree
    rounds_played: int
    cards_discarded: int


def play_round(
    round_number: int,
    names: Sequence[str],
    pile: DrawPile,
    turns: TurnRotator,
    color: bool = False,
) -> RoundOutcome:
    """
    Draw phase then resolution phase for one round.
    Stops drawing early if the pile runs out; cards already drawn still count.
    """
    ledger = RoundLedger()

    for _ in range(len(names)):
        if pile.is_empty():
            print("Deck is empty. Stopping game.")
            log.info(f"Pile exhausted in round {round_number} after {len(ledger)} draw(s)")
            break
        player = turns.next()
        card = pile.pop()
        ledger.enqueue(card, player)
        print(draw_line(names[player], card, color))
        log.debug(f"Round {round_number}: player {player} drew {card.label}")

    outcome = resolve_round(ledger)
    log.debug(f"Round {round_number} outcome: {outcome}")
    return outcome


def play_game(
    names: Sequence[str],
    rng=random,
    deck: Optional[List[Card]] = None,
    color: bool = False,
    rounds: Optional[int] = None,
) -> GameSummary:
    """
    Run a whole game and print its transcript.
    deck: cards to stack onto the pile as given (last card drawn first);
          when None a fresh 52-card deck is built and shuffled with rng.
    rounds: overrides the round count derived from the deck size.
    """
    n_players = len(names)
    if deck is None:
        deck = build_deck()
        shuffle_deck(deck, rng)

    pile = DrawPile(deck)  # top of pile = last card of the deck list
    turns = TurnRotator.for_players(n_players)
    results = ResultsLog()
    scores = [0] * n_players

    if rounds is None:
        rounds = max_rounds(n_players, len(deck))
    print(f"\nStarting game with {n_players} players and {rounds} rounds.")
    log.info(f"Game start: players={list(names)} rounds={rounds} pile={len(pile)}")

    rounds_played = 0
    for round_number in range(1, rounds + 1):
        print(f"\n--- Round {round_number} ---")
        short_round = len(pile) < n_players
        outcome = play_round(round_number, names, pile, turns, color)

        if outcome.no_cards:
            print("No cards played this round.")
            break
        rounds_played += 1

        if outcome.tie:
            print(tie_line(round_number))
        else:
            winner = outcome.winner
            scores[winner] += POINTS_PER_WIN
            print(winner_line(round_number, names[winner]))
            results.append(round_number, names[winner], scores[winner])

        if short_round:
            break

    ranking = RankingTree()
    for name, score in zip(names, scores):
        ranking.insert(name, score)

    if len(results):
        print()
    for line in results.render_all():
        print(line)

    print()
    for line in ranking_lines(ranking.in_order()):
        print(line)

    leftover = pile.drain()
    if leftover:
        log.debug(f"Discarding {len(leftover)} undealt card(s): {short_cards(leftover)}")
    log.info(f"Game over: scores={scores} rounds_played={rounds_played}")

    return GameSummary(
        scores=[PlayerScore(n, s) for n, s in zip(names, scores)],
        results=results,
        ranking=ranking,
        rounds_played=rounds_played,
        cards_discarded=len(leftover),
    )
