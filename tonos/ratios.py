"""Just ratio enumeration.

Ranks coprime fractions by complexity, using the least common multiple of
numerator and denominator as the measure: 3/2 (lcm 6) is simpler than
5/4 (lcm 20). Two independent rankings live here:

1. ``generate_ratios`` finds the simplest ratios inside one base interval
   (1 <= ratio <= base) for matching against a scale.
2. ``generate_continuous_ratios`` finds the most resonant ratios above 1
   with no upper bound, weighted by 1/lcm, for the continuous comparison.

Both keep a bounded, ordered top-K list and stop as soon as larger
denominators can no longer produce a better candidate.
"""

import bisect
import itertools
import math


def _rank_key(ratio: tuple[int, int, int]) -> tuple[int, int]:
    """Sort key for (numerator, denominator, lcm) entries: lcm, then numerator."""
    return ratio[2], ratio[0]


def _descending_weight(point: tuple[float, float]) -> float:
    return -point[1]


def lcm_weight(numerator: int, denominator: int) -> float:
    """Calculate the consonance weight of a ratio.

    Args:
        numerator: Ratio numerator
        denominator: Ratio denominator

    Returns:
        1 / lcm(numerator, denominator); simpler ratios weigh more
    """
    return 1.0 / math.lcm(numerator, denominator)


def generate_ratios(base: int, count: int) -> list[tuple[int, int, int]]:
    """Find the ``count`` simplest ratios within one base interval.

    Seeds with the whole-number ratios 1/1 .. base/1, then walks the
    denominators upwards, inserting every coprime ratio below ``base`` into
    the ranked list and cutting it back to ``count`` entries after each
    denominator.

    The walk ends once the list is full and the simplest ratio the next
    denominator can offer, (den+1)/den with lcm den*(den+1), would already
    rank below the worst entry kept.

    Args:
        base: Base interval (must be > 1)
        count: Number of ratios to return

    Returns:
        List of (numerator, denominator, lcm), ascending by lcm and then
        by numerator. Empty if count is 0.

    Examples:
        >>> generate_ratios(2, 3)
        [(1, 1, 1), (2, 1, 2), (3, 2, 6)]
    """
    if base <= 1:
        raise ValueError(f"Base must be greater than 1, got {base}")
    if count < 0:
        raise ValueError(f"Ratio count must be non-negative, got {count}")

    ratios: list[tuple[int, int, int]] = []
    if count == 0:
        return ratios

    for i in range(1, min(base, count) + 1):
        ratios.append((i, 1, i))

    for den in itertools.count(2):
        if len(ratios) == count and ratios[-1][2] < den * (den + 1):
            break
        for num in range(den + 1, den * base):
            if math.gcd(num, den) != 1:
                continue
            lcm = math.lcm(num, den)
            # Equal keys keep their insertion order
            index = bisect.bisect_right(ratios, (lcm, num), key=_rank_key)
            ratios.insert(index, (num, den, lcm))
        del ratios[count:]

    return ratios


def generate_continuous_ratios(count: int) -> list[tuple[float, float]]:
    """Find the ``count`` most resonant ratios above 1, independent of any base.

    Seeds with 2/1 .. (count+1)/1, then walks the denominators upwards.
    For each denominator the numerators are scanned from den+1 until the
    weight drops below the lightest entry kept; the whole walk stops once
    even (den+1)/den is too light.

    Args:
        count: Number of ratios to return

    Returns:
        List of (value, weight) with value = numerator/denominator and
        weight = 1/lcm, in descending weight order. Empty if count is 0.
    """
    if count < 0:
        raise ValueError(f"Ratio count must be non-negative, got {count}")

    ratios = [(float(num), lcm_weight(num, 1)) for num in range(2, count + 2)]
    if not ratios:
        return ratios

    for den in itertools.count(2):
        min_weight = ratios[-1][1]
        if lcm_weight(den + 1, den) < min_weight:
            break
        for num in itertools.count(den + 1):
            if math.gcd(num, den) != 1:
                continue
            weight = lcm_weight(num, den)
            if weight < min_weight:
                break
            # Ahead of entries with the same weight
            index = bisect.bisect_left(ratios, -weight, key=_descending_weight)
            ratios.insert(index, (num / den, weight))
        del ratios[count:]

    return ratios
