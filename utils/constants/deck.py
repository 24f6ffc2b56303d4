"""Deck and hand size defaults."""

# Constructed formats
DEFAULT_DECK_SIZE = 60
# Opening hand on the play or draw, before mulligans
DEFAULT_HAND_SIZE = 7

MIN_DECK_SIZE = 1
# Large enough for singleton formats and oversized casual decks
MAX_DECK_SIZE = 250

ALL_TARGETS_TOKEN = "all"
