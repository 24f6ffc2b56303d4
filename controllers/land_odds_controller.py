"""Turn CLI tokens into land-split queries and render the report."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from loguru import logger

from services.split_probability import DeckConfiguration, ExactFraction
from utils.constants import ALL_TARGETS_TOKEN

SEPARATOR = "-" * 69


@dataclass(frozen=True)
class LandOddsReport:
    deck: DeckConfiguration
    target_counts: list[int]
    results: list[ExactFraction]
    combined: ExactFraction

    def lines(self) -> list[str]:
        lines = [
            self._chance_line(str(target), result)
            for target, result in zip(self.target_counts, self.results)
        ]
        lines.append(SEPARATOR)
        lines.append(self._chance_line(format_land_counts(self.target_counts), self.combined))
        return lines

    def _chance_line(self, count_label: str, fraction: ExactFraction) -> str:
        percent = fraction.to_probability() * 100.0
        return (
            f"chance of {count_label} lands in a {self.deck.hand_size} card hand "
            f"from a deck with {self.deck.deck_count_of_type} lands: {percent:.3f}%"
        )


def parse_target_tokens(tokens: Iterable[str], hand_size: int) -> list[int]:
    """
    Expand target tokens into land counts, preserving order.

    Each token is a non-negative integer or ``all``, which stands for every
    count from 0 through ``hand_size``.

    Raises:
        ValueError: If a token is neither ``all`` nor a non-negative integer
    """
    targets: list[int] = []
    for token in tokens:
        cleaned = token.strip().lower()
        if cleaned == ALL_TARGETS_TOKEN:
            targets.extend(range(hand_size + 1))
            continue
        try:
            value = int(cleaned)
        except ValueError:
            raise ValueError(f"Invalid land count {token!r}: expected an integer or 'all'") from None
        if value < 0:
            raise ValueError(f"Land count must be non-negative, got {value}")
        targets.append(value)

    if not targets:
        raise ValueError("At least one land count is required")
    return targets


def format_land_counts(counts: Sequence[int]) -> str:
    """Join counts as "2", "2 or 3", or "1, 2, or 3"."""
    if not counts:
        return ""
    if len(counts) == 1:
        return str(counts[0])
    if len(counts) == 2:
        return f"{counts[0]} or {counts[1]}"
    leading = "".join(f"{count}, " for count in counts[:-1])
    return f"{leading}or {counts[-1]}"


class LandOddsController:
    """Run land-split queries for one deck configuration."""

    def __init__(self, deck: DeckConfiguration) -> None:
        self.deck = deck

    def build_report(self, target_counts: Sequence[int]) -> LandOddsReport:
        results = self.deck.splits(target_counts)
        combined = self.deck.combined(target_counts)
        logger.debug(
            f"Evaluated {len(results)} splits; combined "
            f"{combined.numerator}/{combined.denominator}"
        )
        return LandOddsReport(
            deck=self.deck,
            target_counts=list(target_counts),
            results=results,
            combined=combined,
        )
