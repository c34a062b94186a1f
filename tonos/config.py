"""Configuration constants for tonos."""

import argparse
from dataclasses import dataclass
from typing import Optional

# =============================================================================
# Scale Settings
# =============================================================================

# Notes per base interval (12 = standard chromatic scale)
DEFAULT_NOTES = 12

# Base interval divided into equal steps (2 = octave, 3 = tritave)
DEFAULT_BASE = 2

# Number of just ratios matched against the scale
DEFAULT_RATIO_COUNT = 1

# =============================================================================
# Table Output
# =============================================================================

# Ratios deviating more than this from their note are hidden (in cents of a step)
DEFAULT_ERROR_THRESHOLD = 100.0

# Note frequencies are printed relative to 1.0, scaled by this multiplier
DEFAULT_FREQUENCY_MULTIPLIER = 1.0

# Errors are stored as fractions of one step; 100 cents = 1 step
CENTS_PER_STEP = 100.0

# =============================================================================
# Continuous Comparison
# =============================================================================

# Upper bound of the swept division count when -z is given without a value
DEFAULT_CONTINUOUS_LIMIT = 2

# Samples per unit along the X axis
DEFAULT_DENSITY = 100

# =============================================================================
# Numeric Tolerances
# =============================================================================

# A matched ratio is at most half a step away from its note, give or take
# this many units in the last place of 0.5
HALF_STEP_ULPS = 48


@dataclass(frozen=True)
class TonosConfig:
    """Immutable settings for one invocation.

    Built from the command line by ``from_args`` and handed to the output
    layer. The core functions take plain arguments and never read it.
    """
    notes: int = DEFAULT_NOTES
    error_threshold: float = DEFAULT_ERROR_THRESHOLD
    compare: bool = False
    ratio_count: int = DEFAULT_RATIO_COUNT
    base: int = DEFAULT_BASE
    frequency_multiplier: float = DEFAULT_FREQUENCY_MULTIPLIER
    continuous_limit: Optional[int] = None  # None = continuous mode off
    density: int = DEFAULT_DENSITY
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "TonosConfig":
        """Create a configuration from parsed command-line arguments."""
        return cls(
            notes=args.notes,
            error_threshold=args.error,
            compare=args.compare,
            ratio_count=args.ratios,
            base=args.base,
            frequency_multiplier=args.frequency,
            continuous_limit=args.continuous,
            density=args.density,
            verbose=args.verbose,
        )

    @property
    def mode(self) -> str:
        """Output mode: 'continuous', 'compare' or 'table'."""
        if self.continuous_limit is not None:
            return "continuous"
        if self.compare:
            return "compare"
        return "table"

    def validate(self) -> None:
        """Check value ranges.

        Raises:
            ValueError: If any setting is out of range
        """
        if self.base <= 1:
            raise ValueError(f"Base must be greater than 1, got {self.base}")
        if self.notes < 0:
            raise ValueError(f"Note count must be non-negative, got {self.notes}")
        if self.ratio_count < 0:
            raise ValueError(f"Ratio count must be non-negative, got {self.ratio_count}")
        if self.density < 1:
            raise ValueError(f"Density must be positive, got {self.density}")
        if self.continuous_limit is not None and self.continuous_limit < 0:
            raise ValueError(
                f"Continuous limit must be non-negative, got {self.continuous_limit}"
            )
