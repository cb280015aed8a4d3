# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""Tests for brand color selection (neutral filter, contrast filter, fallback)."""

import numpy as np
import pytest

from brandpick.schema import Algorithm, Color
from brandpick.measure.contrast import (
    get_contrast_color,
    get_contrast_ratio,
    is_neutral_color,
)
from brandpick.measure.selector import (
    SelectionConfig,
    candidate_count,
    merge_duplicates,
    select_brand_colors,
)

GOLD = Color(255, 215, 0)       # black text, ~15:1
CRIMSON = Color(220, 20, 60)    # white text, ~5:1
TEAL = Color(0, 128, 128)       # white text, ~4.8:1
RED = Color(255, 0, 0)          # white text, 4.0:1 (fails AA)
AZURE = Color(0, 128, 255)      # white text, ~3.8:1 (fails AA)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
GRAY = Color(128, 128, 128)


def _text_contrast(color):
    return get_contrast_ratio(color, get_contrast_color(color.hex))


def _high_contrast_image():
    return [WHITE] * 40 + [GOLD] * 30 + [CRIMSON] * 20 + [TEAL] * 10 + [BLACK] * 5


class TestContrastPath:

    def test_high_contrast_image(self):
        result = select_brand_colors(_high_contrast_image(), Algorithm.DOMINANT)
        assert result == [GOLD, CRIMSON, TEAL]
        for color in result:
            assert not is_neutral_color(color)
            assert _text_contrast(color) >= 4.5

    def test_sorted_by_contrast(self):
        result = select_brand_colors(_high_contrast_image(), "dominant")
        ratios = [_text_contrast(c) for c in result]
        assert ratios == sorted(ratios, reverse=True)

    def test_requested_count_caps_result(self):
        result = select_brand_colors(_high_contrast_image(), "dominant", requested_count=2)
        assert result == [GOLD, CRIMSON]

    def test_keeps_algorithm_weights(self):
        result = select_brand_colors(_high_contrast_image(), "dominant")
        assert [c.count for c in result] == [30, 20, 10]

    def test_single_color_image(self):
        """One candidate is not enough to trigger the fallback."""
        assert select_brand_colors([GOLD] * 10, "dominant") == [GOLD]

    def test_stricter_config(self):
        config = SelectionConfig(min_contrast=7.0, min_results=1)
        result = select_brand_colors(_high_contrast_image(), "dominant", config=config)
        assert result == [GOLD]


class TestFallbackPath:

    def test_all_neutral_image_returns_nothing(self):
        pixels = [WHITE] * 10 + [BLACK] * 10 + [GRAY] * 10
        assert select_brand_colors(pixels, "dominant") == []

    def test_low_contrast_colors_fall_back_to_saturation(self):
        pixels = [RED] * 20 + [AZURE] * 10 + [WHITE] * 5
        result = select_brand_colors(pixels, "dominant")
        assert result == [RED, AZURE]
        # This is the one path allowed to return sub-AA colors
        assert all(_text_contrast(c) < 4.5 for c in result)
        assert not any(is_neutral_color(c) for c in result)

    def test_single_survivor_is_padded(self):
        pixels = [GOLD] * 10 + [RED] * 5
        result = select_brand_colors(pixels, "dominant")
        assert result == [GOLD, RED]

    def test_fallback_ranks_by_saturation(self):
        muted_red = Color(200, 90, 90)   # saturation 0.55, fails AA with white
        pixels = [muted_red] * 20 + [RED] * 10
        result = select_brand_colors(pixels, "dominant")
        assert result == [RED, muted_red]


class TestDuplicateCandidates:

    def test_merge_sums_weights_in_first_position(self):
        merged = merge_duplicates([
            CRIMSON.with_count(32), GOLD.with_count(4), CRIMSON.with_count(8),
        ])
        assert merged == [CRIMSON, GOLD]
        assert [c.count for c in merged] == [40, 4]

    def test_median_cut_split_color_is_returned_once(self):
        result = select_brand_colors([CRIMSON] * 60 + [GOLD] * 4, "mediancut")
        assert result == [GOLD, CRIMSON]
        assert [c.count for c in result] == [4, 60]

    def test_repeated_survivor_still_triggers_fallback(self):
        """One legible color split across boxes is still one color."""
        result = select_brand_colors([GOLD] * 60 + [RED] * 4, "mediancut")
        assert result == [GOLD, RED]
        assert [c.count for c in result] == [60, 4]


class TestNeverNeutral:

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_no_neutral_colors_returned(self, algorithm):
        rs = np.random.RandomState(5)
        noise = [Color(*map(int, rs.randint(0, 256, size=3))) for _ in range(300)]
        pixels = noise + _high_contrast_image()
        result = select_brand_colors(pixels, algorithm, rng=9)
        assert len(result) <= 6
        assert not any(is_neutral_color(c) for c in result)


class TestCandidateCount:

    def test_doubles_requested(self):
        assert candidate_count(6, Algorithm.VIBRANT, SelectionConfig()) == 12

    def test_median_cut_gets_depth(self):
        assert candidate_count(6, Algorithm.MEDIANCUT, SelectionConfig()) == 4
        assert candidate_count(1, Algorithm.MEDIANCUT, SelectionConfig()) == 1


class TestErrors:

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError, match="Unknown algorithm"):
            select_brand_colors([GOLD], "rainbow")

    def test_requested_count_must_be_positive(self):
        with pytest.raises(ValueError):
            select_brand_colors([GOLD], "dominant", requested_count=0)

    def test_empty_pixels(self):
        assert select_brand_colors([], "vibrant") == []
