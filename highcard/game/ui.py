# highcard/game/ui.py

import re
from collections import deque
from typing import Callable, Deque, List

from highcard.common.constants import MAX_PLAYERS, MIN_PLAYERS, NAME_LEN

_LEADING_INT = re.compile(r"[+-]?\d+")


class InputError(ValueError):
    """Raised when console input is invalid or runs out."""
    pass


def welcome_script() -> str:
    return "=== Card Game with Data Structures ==="


class Prompter:
    """
    Whitespace token reader on top of input().
    Several answers may be typed on one line; blank lines are skipped.
    """

    def __init__(self, read: Callable[[str], str] = input) -> None:
        self._read = read
        self._pending: Deque[str] = deque()

    def next_token(self, prompt: str) -> str:
        while not self._pending:
            try:
                line = self._read(prompt)
            except EOFError:
                raise InputError("Unexpected end of input.") from None
            self._pending.extend(line.split())
        return self._pending.popleft()


def get_player_count(prompter: Prompter) -> int:
    prompt = f"Enter number of players ({MIN_PLAYERS}-{MAX_PLAYERS}): "
    try:
        token = prompter.next_token(prompt)
    except InputError:
        raise InputError("Invalid number of players.") from None

    m = _LEADING_INT.match(token)
    if m is None:
        raise InputError("Invalid number of players.")
    n = int(m.group())
    if not MIN_PLAYERS <= n <= MAX_PLAYERS:
        raise InputError("Invalid number of players.")
    return n


def get_player_names(prompter: Prompter, n_players: int) -> List[str]:
    names = []
    for i in range(n_players):
        token = prompter.next_token(f"Enter name for player {i + 1}: ")
        names.append(token[:NAME_LEN])
    return names
