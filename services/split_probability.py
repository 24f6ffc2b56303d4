"""
Exact land-split probabilities for a hand drawn from a deck.

Each query yields an ExactFraction whose numerator and denominator are
unreduced Python integers. Combined statistics ("2 or 3 lands") are summed
exactly over a common denominator and converted to float once, at the end.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce

from loguru import logger

from utils.combinatorics import mult_range_down_by, n_choose_k
from utils.constants import DEFAULT_DECK_SIZE

__all__ = [
    "DeckConfiguration",
    "ExactFraction",
    "evaluate_at_least",
    "evaluate_combined",
    "evaluate_split",
    "evaluate_splits",
    "sum_fractions",
]


@dataclass(frozen=True)
class ExactFraction:
    """Unreduced probability kept as an integer ratio."""

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.numerator < 0:
            raise ValueError(f"Numerator must be non-negative, got {self.numerator}")
        if self.denominator <= 0:
            raise ValueError(f"Denominator must be positive, got {self.denominator}")

    def __add__(self, other: ExactFraction) -> ExactFraction:
        if not isinstance(other, ExactFraction):
            return NotImplemented
        if self.denominator == other.denominator:
            return ExactFraction(self.numerator + other.numerator, self.denominator)
        return ExactFraction(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def to_probability(self) -> float:
        # int / int is correctly rounded even when both exceed float range
        return self.numerator / self.denominator


@dataclass(frozen=True)
class DeckConfiguration:
    deck_count_of_type: int
    hand_size: int
    deck_size: int = DEFAULT_DECK_SIZE

    def split(self, target_count: int) -> ExactFraction:
        return evaluate_split(self.hand_size, target_count, self.deck_count_of_type, self.deck_size)

    def splits(self, target_counts: Iterable[int]) -> list[ExactFraction]:
        return evaluate_splits(
            self.hand_size, target_counts, self.deck_count_of_type, self.deck_size
        )

    def combined(self, target_counts: Iterable[int]) -> ExactFraction:
        return evaluate_combined(
            self.hand_size, target_counts, self.deck_count_of_type, self.deck_size
        )


def _validate_deck(hand_size: int, deck_count_of_type: int, deck_size: int) -> None:
    if deck_size < 1:
        raise ValueError(f"Deck size must be positive, got {deck_size}")
    if hand_size < 0:
        raise ValueError(f"Hand size must be non-negative, got {hand_size}")
    if deck_count_of_type < 0:
        raise ValueError(f"Deck count of type must be non-negative, got {deck_count_of_type}")
    if hand_size > deck_size:
        raise ValueError(f"Hand size ({hand_size}) cannot exceed deck size ({deck_size})")
    if deck_count_of_type > deck_size:
        raise ValueError(
            f"Deck count of type ({deck_count_of_type}) cannot exceed deck size ({deck_size})"
        )


def _validate_target(target_count: int, hand_size: int) -> None:
    if target_count < 0:
        raise ValueError(f"Target count must be non-negative, got {target_count}")
    if target_count > hand_size:
        raise ValueError(f"Target count ({target_count}) cannot exceed hand size ({hand_size})")


def _split_fraction(
    hand_size: int,
    target_count: int,
    deck_count_of_type: int,
    deck_size: int,
) -> ExactFraction:
    hand_count_of_other = hand_size - target_count
    deck_count_of_other = deck_size - deck_count_of_type

    # Ordered draws: position choice × ordered picks of each type / ordered hands
    positions = n_choose_k(hand_size, target_count)
    type_draws = mult_range_down_by(deck_count_of_type, target_count)
    other_draws = mult_range_down_by(deck_count_of_other, hand_count_of_other)
    hands = mult_range_down_by(deck_size, hand_size)

    return ExactFraction(positions * type_draws * other_draws, hands)


def evaluate_split(
    hand_size: int,
    target_count: int,
    deck_count_of_type: int,
    deck_size: int = DEFAULT_DECK_SIZE,
) -> ExactFraction:
    """
    Probability of exactly ``target_count`` cards of a type in the hand.

    This is the hypergeometric probability mass P(X = k), restructured as

        C(n, k) × D!/(D-k)! × (N-D)!/(N-D-n+k)!  /  N!/(N-n)!

    so only short downward products are ever multiplied.

    Args:
        hand_size: Cards drawn (n)
        target_count: Cards of the type wanted in the hand (k)
        deck_count_of_type: Cards of the type in the deck (D)
        deck_size: Cards in the deck (N)

    Returns:
        ExactFraction whose denominator is the number of ordered hands.
        A split the deck cannot supply has numerator 0.

    Raises:
        ValueError: If the inputs break 0 <= k <= n <= N or D > N

    Example:
        >>> evaluate_split(6, 2, 20, 60).to_probability()
        0.3468...

    For 20 lands in a 60-card deck and a 6-card hand this gives 34.68% for
    2 lands and 22.50% for 3 lands. The 31.57% and 14.05% figures sometimes
    quoted for that deck do not come from this formula.
    """
    _validate_deck(hand_size, deck_count_of_type, deck_size)
    _validate_target(target_count, hand_size)

    fraction = _split_fraction(hand_size, target_count, deck_count_of_type, deck_size)
    logger.debug(
        f"Split {target_count}/{hand_size} from {deck_count_of_type}/{deck_size}: "
        f"{fraction.numerator}/{fraction.denominator}"
    )
    return fraction


def evaluate_splits(
    hand_size: int,
    target_counts: Iterable[int],
    deck_count_of_type: int,
    deck_size: int = DEFAULT_DECK_SIZE,
) -> list[ExactFraction]:
    """
    Evaluate one split per target count, in the order given.

    Results are not summed; use sum_fractions or evaluate_combined for that.
    """
    return [
        evaluate_split(hand_size, target, deck_count_of_type, deck_size)
        for target in target_counts
    ]


def sum_fractions(fractions: Iterable[ExactFraction]) -> ExactFraction:
    """Add fractions exactly. An empty input sums to 0/1."""
    return reduce(lambda total, fraction: total + fraction, fractions, ExactFraction(0, 1))


def evaluate_combined(
    hand_size: int,
    target_counts: Iterable[int],
    deck_count_of_type: int,
    deck_size: int = DEFAULT_DECK_SIZE,
) -> ExactFraction:
    """
    Probability that the hand holds any one of ``target_counts`` cards of the type.

    Splits are disjoint events, so their fractions are summed exactly.
    Repeated counts describe the same event and are counted once.
    """
    _validate_deck(hand_size, deck_count_of_type, deck_size)
    unique_targets = list(dict.fromkeys(target_counts))
    fractions = evaluate_splits(hand_size, unique_targets, deck_count_of_type, deck_size)
    if not fractions:
        return ExactFraction(0, mult_range_down_by(deck_size, hand_size))
    return sum_fractions(fractions)


def evaluate_at_least(
    hand_size: int,
    min_count: int,
    deck_count_of_type: int,
    deck_size: int = DEFAULT_DECK_SIZE,
) -> ExactFraction:
    """
    Probability of drawing ``min_count`` or more cards of the type.

    Args:
        hand_size: Cards drawn (n)
        min_count: Minimum cards of the type wanted
        deck_count_of_type: Cards of the type in the deck (D)
        deck_size: Cards in the deck (N)

    Returns:
        ExactFraction over the ordered-hand denominator. A minimum of 0 is
        certain; a minimum above the hand size is impossible.

    Raises:
        ValueError: If the deck inputs are invalid or min_count is negative
    """
    _validate_deck(hand_size, deck_count_of_type, deck_size)
    if min_count < 0:
        raise ValueError(f"Minimum count must be non-negative, got {min_count}")

    hands = mult_range_down_by(deck_size, hand_size)
    if min_count == 0:
        return ExactFraction(hands, hands)
    if min_count > hand_size:
        return ExactFraction(0, hands)

    return evaluate_combined(
        hand_size, range(min_count, hand_size + 1), deck_count_of_type, deck_size
    )
