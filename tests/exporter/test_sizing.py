"""
Unit Tests for exporter.sizing.

Page width is always the target; height is the only rounded value.
"""

import pytest

from page_binder.core.models import PageSize
from page_binder.exporter.sizing import compute_page_size, round_half_up


class TestRoundHalfUp:
    """Tests for round_half_up()."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (297.5, 298),
            (298.5, 299),
            (0.5, 1),
            (1189.49, 1189),
            (1190.0, 1190),
        ],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestComputePageSize:
    """Tests for compute_page_size()."""

    def test_when_portrait_image_then_height_scales(self):
        assert compute_page_size(1000, 2000, 595) == PageSize(595, 1190)

    def test_when_half_pixel_result_then_rounds_up(self):
        # 400 * 595 / 800 = 297.5
        assert compute_page_size(800, 400, 595) == PageSize(595, 298)

    def test_when_already_target_width_then_unchanged(self):
        assert compute_page_size(595, 842, 595) == PageSize(595, 842)

    def test_when_upscaling_then_height_grows(self):
        assert compute_page_size(100, 150, 595) == PageSize(595, 893)  # 892.5

    def test_when_extreme_panorama_then_height_at_least_one(self):
        assert compute_page_size(100000, 10, 595) == PageSize(595, 1)

    def test_when_half_exceeds_float_precision_then_still_rounds_up(self):
        # Exact height is 10**17 + 0.5; float division loses the half
        height = 2 * 10**17 + 1
        assert compute_page_size(2, height, 1) == PageSize(1, 10**17 + 1)

    @pytest.mark.parametrize("width, height, target", [(3, 7, 595), (7, 3, 842), (999, 1001, 595), (13, 5, 2)])
    def test_height_matches_exact_fraction_rounding(self, width, height, target):
        from fractions import Fraction

        exact = Fraction(height * target, width)
        assert compute_page_size(width, height, target).height == max(1, int(exact + Fraction(1, 2)))

    def test_width_always_equals_target(self):
        for width, height in [(1, 1), (3, 7), (1234, 567), (4032, 3024)]:
            assert compute_page_size(width, height, 595).width == 595

    @pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-5, 10)])
    def test_when_non_positive_dimension_then_raises_error(self, width, height):
        with pytest.raises(ValueError, match="must be positive"):
            compute_page_size(width, height, 595)

    def test_when_non_positive_target_then_raises_error(self):
        with pytest.raises(ValueError, match="target_width"):
            compute_page_size(10, 10, 0)
