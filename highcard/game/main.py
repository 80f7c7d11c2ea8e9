# highcard/game/main.py
import os
import random
import sys
import time
from typing import Callable, Optional

from highcard.common.constants import (
    EXIT_INTERRUPTED,
    EXIT_INVALID_INPUT,
    EXIT_OK,
    EXIT_OUT_OF_MEMORY,
)
from highcard.common.logging_utils import get_logger, setup_logging
from highcard.game.display import color_enabled
from highcard.game.session import play_game
from highcard.game.ui import InputError, Prompter, get_player_count, get_player_names, welcome_script

log = get_logger("game.main")


def _seed_from_env(value: Optional[str]) -> int:
    """GAME_SEED if it parses as an int, else the current time."""
    if value:
        try:
            return int(value)
        except ValueError:
            log.warning(f"Ignoring non-integer GAME_SEED={value!r}")
    return time.time_ns()


def main(read: Callable[[str], str] = input) -> int:
    setup_logging()
    print(welcome_script())
    print()

    prompter = Prompter(read)
    try:
        n_players = get_player_count(prompter)
        names = get_player_names(prompter, n_players)
    except InputError as e:
        print(f"\n{e}")
        log.error(f"Input rejected: {e}")
        return EXIT_INVALID_INPUT
    except KeyboardInterrupt:
        log.info("Interrupted at prompt, shutting down...")
        return EXIT_INTERRUPTED

    # process-wide generator, seeded once
    seed = _seed_from_env(os.getenv("GAME_SEED"))
    random.seed(seed)
    log.info(f"Random seed: {seed}")

    try:
        play_game(names, rng=random, color=color_enabled())
    except MemoryError:
        print("Memory allocation error.")
        log.critical("Out of memory, aborting")
        return EXIT_OUT_OF_MEMORY
    except KeyboardInterrupt:
        log.info("Interrupted, shutting down...")
        return EXIT_INTERRUPTED

    print("\nGame over.")
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
