"""Tests for the continuous temperament comparison."""

import math

import pytest

from tonos.continuous import continuous_score, continuous_sweep, sweep_points
from tonos.ratios import generate_continuous_ratios, generate_ratios
from tonos.scale import Scale


@pytest.fixture
def harmonics():
    """2/1, 3/1 and 4/1 weighted 1/2, 1/3 and 1/4."""
    return generate_continuous_ratios(3)


class TestContinuousScore:
    """Tests for continuous_score."""

    def test_twelve_divisions(self, harmonics):
        """Only the third harmonic misses a step (by ~2 cents)."""
        error = abs(12 * math.log2(3) - 19)
        expected = 2 * error * (1 / 3) / (1 / 2 + 1 / 3 + 1 / 4)
        assert continuous_score(harmonics, 2, 12) == pytest.approx(expected)

    def test_one_division(self, harmonics):
        """One step per octave: 3/1 lands 0.415 steps below 4/1."""
        error = 2 - math.log2(3)
        expected = 2 * error * (1 / 3) / (1 / 2 + 1 / 3 + 1 / 4)
        assert continuous_score(harmonics, 2, 1) == pytest.approx(expected)

    def test_octaves_only_score_zero(self):
        """Octave-equivalent ratios fit every whole number of divisions."""
        ratios = [(2.0, 0.5), (4.0, 0.25), (8.0, 0.125)]
        for x in (1, 5, 12, 31):
            assert continuous_score(ratios, 2, x) == pytest.approx(0.0, abs=1e-9)

    def test_fractional_divisions(self):
        """Half a division per octave puts 2/1 halfway between steps."""
        score = continuous_score([(2.0, 1.0)], 2, 0.5)
        assert score == pytest.approx(1.0)

    def test_normalized_range(self):
        ratios = generate_continuous_ratios(30)
        for x in (1.0, 1.37, 5.5, 12.0, 17.25):
            assert 0.0 <= continuous_score(ratios, 2, x) <= 1.0

    def test_twelve_is_a_dip(self):
        """12 divisions fit resonant ratios better than its neighbours."""
        ratios = generate_continuous_ratios(20)
        twelve = continuous_score(ratios, 2, 12)
        assert twelve < continuous_score(ratios, 2, 11)
        assert twelve < continuous_score(ratios, 2, 13)

    def test_empty_ratio_set_is_zero(self):
        assert continuous_score([], 2, 12) == 0.0

    def test_base_one_raises(self, harmonics):
        with pytest.raises(ValueError):
            continuous_score(harmonics, 1, 12)

    def test_non_positive_x_raises(self, harmonics):
        with pytest.raises(ValueError):
            continuous_score(harmonics, 2, 0)
        with pytest.raises(ValueError):
            continuous_score(harmonics, 2, -1.5)


class TestCrossCheck:
    """Both pipelines agree at whole-number division counts."""

    @pytest.mark.parametrize("note_count", [5, 7, 12, 19])
    def test_matches_scale_total_error(self, note_count):
        """Scoring the scale's own ratios gives the scale's total error."""
        ratio_count = 20
        ratios = [
            (num / den, 1 / lcm) for num, den, lcm in generate_ratios(2, ratio_count)
        ]
        scale = Scale.build(2, note_count, ratio_count)
        assert continuous_score(ratios, 2, note_count) == pytest.approx(
            scale.total_error(), abs=1e-9
        )


class TestSweep:
    """Tests for sweep_points and continuous_sweep."""

    def test_sample_count(self):
        assert len(sweep_points(2, 100)) == 101
        assert len(sweep_points(5, 10)) == 41

    def test_sample_bounds(self):
        xs = sweep_points(3, 4)
        assert xs[0] == 1.0
        assert xs[-1] == 3.0
        assert xs[1] == 1.25

    def test_zero_limit_is_empty(self):
        assert len(sweep_points(0, 100)) == 0

    def test_invalid_density_raises(self):
        with pytest.raises(ValueError):
            sweep_points(2, 0)

    def test_ascending_x(self, harmonics):
        xs = [x for x, _ in continuous_sweep(harmonics, 2, 3, 20)]
        assert xs == sorted(xs)
        assert len(xs) == 41

    def test_agrees_with_single_score(self, harmonics):
        for x, score in continuous_sweep(harmonics, 2, 2, 10):
            assert score == pytest.approx(continuous_score(harmonics, 2, x), abs=1e-12)

    def test_returns_plain_floats(self, harmonics):
        x, score = continuous_sweep(harmonics, 2, 1, 1)[0]
        assert type(x) is float
        assert type(score) is float

    def test_empty_sweep(self, harmonics):
        assert continuous_sweep(harmonics, 2, 0, 100) == []

    def test_empty_ratio_set(self):
        points = continuous_sweep([], 2, 2, 10)
        assert len(points) == 11
        assert all(score == 0.0 for _, score in points)
