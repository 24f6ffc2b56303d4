"""Persisted deck and hand size defaults for the land odds CLI."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from loguru import logger

from utils import constants
from utils.atomic_io import atomic_write_json, locked_path


@dataclass(frozen=True)
class LandOddsSettings:
    deck_size: int = constants.DEFAULT_DECK_SIZE
    hand_size: int = constants.DEFAULT_HAND_SIZE


class SettingsService:
    """Load and persist the default deck configuration."""

    def __init__(self, settings_path: Path | None = None) -> None:
        self.settings_path = settings_path or constants.SETTINGS_FILE

    def load(self) -> LandOddsSettings:
        raw = self._read_raw()
        return self.normalize(raw.get("deck_size"), raw.get("hand_size"))

    def normalize(self, deck_value: Any, hand_value: Any) -> LandOddsSettings:
        """Apply the supported deck and hand ranges to raw setting values."""
        deck_size = self.clamp_int(
            deck_value,
            default=constants.DEFAULT_DECK_SIZE,
            minimum=constants.MIN_DECK_SIZE,
            maximum=constants.MAX_DECK_SIZE,
        )
        hand_size = self.clamp_int(
            hand_value,
            default=min(constants.DEFAULT_HAND_SIZE, deck_size),
            minimum=0,
            maximum=deck_size,
        )
        return LandOddsSettings(deck_size=deck_size, hand_size=hand_size)

    def save(self, settings: LandOddsSettings) -> bool:
        normalized = self.normalize(settings.deck_size, settings.hand_size)
        if normalized != settings:
            logger.warning(f"Saving land odds settings as {normalized} instead of {settings}")
        try:
            atomic_write_json(self.settings_path, asdict(normalized))
        except OSError as exc:
            logger.warning(f"Unable to persist land odds settings: {exc}")
            return False
        logger.info(f"Saved land odds settings to {self.settings_path}")
        return True

    def _read_raw(self) -> dict[str, Any]:
        if not self.settings_path.exists():
            return {}
        try:
            with locked_path(self.settings_path):
                with self.settings_path.open("r", encoding="utf-8") as fh:
                    data = json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning(f"Failed to load land odds settings: {exc}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring land odds settings: expected an object, got {type(data).__name__}")
            return {}
        return data

    @staticmethod
    def clamp_int(value: Any, *, default: int, minimum: int, maximum: int) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            return default
        try:
            number = int(float(value))
        except (TypeError, ValueError, OverflowError):
            return default
        return max(minimum, min(number, maximum))
