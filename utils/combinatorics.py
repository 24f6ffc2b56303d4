"""
Integer combinatorics primitives for land-count probabilities.

All functions work on plain Python integers, which are arbitrary precision,
so factorial-scale intermediates never overflow. Nothing here converts to
floating point.
"""

import math


def mult_range(begin: int, end: int) -> int:
    """
    Multiply every integer in the inclusive range [begin, end].

    Callers pass begin <= end. The empty range (begin == end + 1) yields 1.

    Example:
        >>> mult_range(3, 5)
        60
    """
    return math.prod(range(begin, end + 1))


def mult_range_down_by(begin: int, down: int) -> int:
    """
    Multiply the ``down`` consecutive integers ending at ``begin``.

    Computes begin * (begin - 1) * ... * (begin - down + 1), which is
    begin! / (begin - down)! without building either factorial.

    Args:
        begin: Largest factor
        down: Number of factors

    Returns:
        The product. Zero factors give 1 for any ``begin``, including 0.
        When ``down`` exceeds ``begin`` the product passes through 0.

    Raises:
        ValueError: If either argument is negative

    Example:
        >>> mult_range_down_by(60, 2)
        3540
    """
    if begin < 0:
        raise ValueError(f"Range start must be non-negative, got {begin}")
    if down < 0:
        raise ValueError(f"Factor count must be non-negative, got {down}")

    if down == 0:
        return 1
    if down > begin:
        return 0

    return mult_range(begin - down + 1, begin)


def n_choose_k(n: int, k: int) -> int:
    """
    Count the unordered subsets of size k drawn from n distinct items.

    Formula: C(n, k) = [n × (n-1) × ... × (n-k+1)] / k!

    The division is always exact, so integer division loses nothing.

    Raises:
        ValueError: Unless n >= k >= 0

    Example:
        >>> n_choose_k(60, 7)
        386206920
    """
    if k < 0:
        raise ValueError(f"Subset size must be non-negative, got {k}")
    if k > n:
        raise ValueError(f"Subset size ({k}) cannot exceed item count ({n})")

    return mult_range_down_by(n, k) // mult_range(1, k)
