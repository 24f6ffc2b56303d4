from utils.constants.deck import (
    ALL_TARGETS_TOKEN,
    DEFAULT_DECK_SIZE,
    DEFAULT_HAND_SIZE,
    MAX_DECK_SIZE,
    MIN_DECK_SIZE,
)
from utils.constants.paths import CONFIG_DIR, SETTINGS_FILE

__all__ = [
    "ALL_TARGETS_TOKEN",
    "CONFIG_DIR",
    "DEFAULT_DECK_SIZE",
    "DEFAULT_HAND_SIZE",
    "MAX_DECK_SIZE",
    "MIN_DECK_SIZE",
    "SETTINGS_FILE",
]
