"""Main entry point for tonos.

Scores equal-division temperaments against just ratios and prints the
result in one of three modes:

- table: every note of one scale with the ratios it approximates
- compare: total error for every note count from 1 to N
- continuous: error curve over a real-valued division count
"""

import argparse
import sys
from typing import Iterator, Optional

import numpy as np

from . import config
from .config import TonosConfig
from .continuous import continuous_sweep
from .ratios import generate_continuous_ratios
from .scale import Scale


def format_number(value: float) -> str:
    """Format a float in positional notation with the fewest unique digits.

    Whole numbers drop the trailing '.0' and tiny values never switch to
    scientific notation: 2.0 -> '2', 1e-16 -> '0.0000000000000001'.
    """
    return np.format_float_positional(value, trim="-")


def _status(settings: TonosConfig, message: str) -> None:
    if settings.verbose:
        print(message, file=sys.stderr)


# =============================================================================
# Output Modes
# =============================================================================

def table_lines(settings: TonosConfig) -> Iterator[str]:
    """Describe every note of one scale.

    Each line holds the note frequency and the ratios matched to it whose
    error is below the display threshold, e.g.::

        1.4983070768766815f, // #8 (3:2)-1.96
    """
    scale = Scale.build(settings.base, settings.notes, settings.ratio_count)
    _status(
        settings,
        f"✓ Scale: {len(scale.notes)} notes, "
        f"{len(scale.all_ratios())}/{settings.ratio_count} ratios matched",
    )

    for i, note in enumerate(scale.notes):
        line = f"{note.frequency * settings.frequency_multiplier:.16f}f, // #{i + 1}"
        for ratio in note.ratios:
            if abs(ratio.cents) < settings.error_threshold:
                line += f" ({ratio.numerator}:{ratio.denominator}){ratio.cents:+.2f}"
        yield line
    yield ""
    yield f"Total error: {format_number(scale.total_error() * config.CENTS_PER_STEP)}"


def compare_lines(settings: TonosConfig) -> Iterator[str]:
    """Compare the total error of 1 to N notes per base interval.

    error_rel is in cents of a step, error_abs divides it by the note
    count (cents of the base interval).
    """
    yield "notes,error_rel,error_abs"
    for note_count in range(1, settings.notes + 1):
        scale = Scale.build(settings.base, note_count, settings.ratio_count)
        error = scale.total_error() * config.CENTS_PER_STEP
        yield f"{note_count},{format_number(error)},{format_number(error / note_count)}"


def continuous_lines(settings: TonosConfig) -> Iterator[str]:
    """Print the error curve over x = 1 .. limit."""
    ratios = generate_continuous_ratios(settings.ratio_count)
    _status(settings, f"✓ Continuous ratios: {len(ratios)}")

    yield "x,y"
    points = continuous_sweep(
        ratios, settings.base, settings.continuous_limit, settings.density
    )
    for x, score in points:
        yield f"{format_number(x)},{format_number(score)}"


MODES = {
    "table": table_lines,
    "compare": compare_lines,
    "continuous": continuous_lines,
}


def run(settings: TonosConfig) -> None:
    """Print the output of the configured mode to stdout."""
    _status(settings, f"✓ Mode: {settings.mode} (base {settings.base})")
    for line in MODES[settings.mode](settings):
        print(line)


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="tonos",
        description="tonos - Equal temperament analysis against just ratios",
    )
    parser.add_argument(
        "notes",
        nargs="?",
        type=int,
        default=config.DEFAULT_NOTES,
        help=f"Notes per base interval (default: {config.DEFAULT_NOTES})",
    )
    parser.add_argument(
        "-e", "--error",
        type=float,
        default=config.DEFAULT_ERROR_THRESHOLD,
        help=f"Error threshold in cents (default: {config.DEFAULT_ERROR_THRESHOLD:g})",
    )
    parser.add_argument(
        "-c", "--compare",
        action="store_true",
        help="Compare temperaments from 1 to NOTES notes",
    )
    parser.add_argument(
        "-r", "--ratios",
        type=int,
        default=config.DEFAULT_RATIO_COUNT,
        help=f"Number of ratios to match (default: {config.DEFAULT_RATIO_COUNT})",
    )
    parser.add_argument(
        "-b", "--base",
        type=int,
        default=config.DEFAULT_BASE,
        help=f"Base interval (default: {config.DEFAULT_BASE})",
    )
    parser.add_argument(
        "-f", "--frequency",
        type=float,
        default=config.DEFAULT_FREQUENCY_MULTIPLIER,
        help=f"Frequency multiplier (default: {config.DEFAULT_FREQUENCY_MULTIPLIER})",
    )
    parser.add_argument(
        "-z", "--continuous",
        nargs="?",
        type=int,
        const=config.DEFAULT_CONTINUOUS_LIMIT,
        default=None,
        metavar="LIMIT",
        help=(
            "Continuous comparison up to LIMIT divisions "
            f"(default LIMIT: {config.DEFAULT_CONTINUOUS_LIMIT})"
        ),
    )
    parser.add_argument(
        "-x", "--density",
        type=int,
        default=config.DEFAULT_DENSITY,
        help=(
            "Density along the X axis for continuous comparison "
            f"(default: {config.DEFAULT_DENSITY})"
        ),
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print status messages to stderr",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the tonos CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = TonosConfig.from_args(args)
    try:
        settings.validate()
    except ValueError as e:
        parser.error(str(e))

    run(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
