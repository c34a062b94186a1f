"""Equal-division scales and their just-ratio error.

A scale divides a base interval (2 = octave) into N equal logarithmic
steps, giving N+1 notes at offsets 0, 1/N, ..., 1. Each just ratio from
``generate_ratios`` is attached to the note closest to it, together with
its signed error in steps:

    error = (note.offset - log_base(ratio)) * N

For 12 notes per octave the perfect fifth (3/2) lands on note #8
(offset 7/12) with an error of about -0.0196 steps (~2 cents flat).
"""

import math
from dataclasses import dataclass

from . import config
from .ratios import generate_ratios, lcm_weight

HALF_STEP_TOLERANCE = config.HALF_STEP_ULPS * math.ulp(0.5)


def within_half_step(error: float) -> bool:
    """Whether an error (in steps) is at most half a step, within tolerance."""
    return abs(error) <= 0.5 + HALF_STEP_TOLERANCE


@dataclass(frozen=True)
class Ratio:
    """A just ratio attached to a note."""
    numerator: int
    denominator: int
    error: float  # Signed, in steps (note minus ratio)

    @property
    def value(self) -> float:
        return self.numerator / self.denominator

    @property
    def lcm(self) -> int:
        return math.lcm(self.numerator, self.denominator)

    @property
    def weight(self) -> float:
        return lcm_weight(self.numerator, self.denominator)

    @property
    def cents(self) -> float:
        """Error in hundredths of a step."""
        return self.error * config.CENTS_PER_STEP


@dataclass(frozen=True)
class Note:
    """One step of the scale."""
    offset: float     # Position within the base interval, 0.0 to 1.0
    frequency: float  # base ** offset
    ratios: tuple[Ratio, ...] = ()


@dataclass(frozen=True)
class Scale:
    """An equal division of ``base`` into ``note_count`` steps."""
    base: int
    note_count: int
    notes: tuple[Note, ...] = ()

    @classmethod
    def build(cls, base: int, note_count: int, ratio_count: int) -> "Scale":
        """Build a scale and attach the ``ratio_count`` simplest ratios.

        Each ratio goes to the note with the smallest offset distance; on an
        exact tie the lower note wins. Every note's ratios end up sorted by
        absolute error.

        With ``note_count == 0`` the only note sits at offset 0 and every
        ratio except the unison is an infinite number of steps away. Those
        ratios are left unmatched.

        Args:
            base: Base interval (must be > 1)
            note_count: Number of equal steps
            ratio_count: Number of ratios to match

        Returns:
            Scale with note_count + 1 notes
        """
        if note_count < 0:
            raise ValueError(f"Note count must be non-negative, got {note_count}")
        ratios = generate_ratios(base, ratio_count)

        if note_count == 0:
            offsets = [0.0]
        else:
            step = 1.0 / note_count
            offsets = [i * step for i in range(note_count + 1)]
        matched: list[list[Ratio]] = [[] for _ in offsets]

        for num, den, _ in ratios:
            ratio_offset = math.log(num / den, base)
            nearest = min(
                range(len(offsets)), key=lambda i: abs(offsets[i] - ratio_offset)
            )
            error = _step_error(offsets[nearest] - ratio_offset, note_count)
            if not math.isfinite(error):
                continue
            assert within_half_step(error), (
                f"{num}/{den} is {error} steps from its nearest note"
            )
            matched[nearest].append(Ratio(numerator=num, denominator=den, error=error))

        notes = tuple(
            Note(
                offset=offset,
                frequency=base ** offset,
                ratios=tuple(sorted(found, key=lambda ratio: abs(ratio.error))),
            )
            for offset, found in zip(offsets, matched)
        )
        return cls(base=base, note_count=note_count, notes=notes)

    def total_error(self) -> float:
        """Weighted mean error over every attached ratio.

        Each ratio counts with weight 1/lcm. Errors are doubled so that the
        worst possible fit (half a step) scores 1.0.

        Returns:
            Error in [0, 1]; 0.0 if no ratio is attached anywhere
        """
        weighted_sum = 0.0
        total_weight = 0.0
        for note in self.notes:
            for ratio in note.ratios:
                weight = ratio.weight
                weighted_sum += 2.0 * abs(ratio.error) * weight
                total_weight += weight
        if total_weight == 0.0:
            return 0.0
        return weighted_sum / total_weight

    def all_ratios(self) -> list[tuple[Note, Ratio]]:
        """Get every attached ratio paired with its note, in note order."""
        return [(note, ratio) for note in self.notes for ratio in note.ratios]


def _step_error(distance: float, note_count: int) -> float:
    """Convert an offset distance to steps.

    A zero-note scale has no step size: only a zero distance is finite.
    """
    if note_count == 0:
        return 0.0 if distance == 0.0 else math.copysign(math.inf, distance)
    return distance * note_count
