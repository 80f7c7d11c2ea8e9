# highcard/common/constants.py

# Deck shape
SUITS = ["H", "D", "C", "S"]  # generation order: suit-major
RANKS = list(range(1, 14))    # 1..13 (Ace..King)
DECK_SIZE = len(SUITS) * len(RANKS)  # 52

# Game rules
MAX_ROUNDS = 5
POINTS_PER_WIN = 100

# Input limits
MIN_PLAYERS = 2
MAX_PLAYERS = 4
NAME_LEN = 49

# Process exit codes
EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_OUT_OF_MEMORY = 1
EXIT_INTERRUPTED = 130

# Display names
RANK_NAMES = {1: "A", 11: "J", 12: "Q", 13: "K"}
SUIT_NAMES = {"H": "Hearts", "D": "Diamonds", "C": "Clubs", "S": "Spades"}
RED_SUITS = {"H", "D"}
