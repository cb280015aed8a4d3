# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""Tests for schema types and serialization roundtrips."""

import pytest

from brandpick.schema import (
    ALGORITHMS,
    BLACK,
    WHITE,
    Algorithm,
    Color,
    OKLCHColor,
    resolve_algorithm,
)
from brandpick.measure.contrast import get_contrast_rating


class TestColor:

    def test_hex_is_lowercase(self):
        assert Color(220, 20, 60).hex == "#dc143c"
        assert Color(0, 0, 0).hex == "#000000"

    def test_rgb(self):
        assert Color(1, 2, 3).rgb == (1, 2, 3)

    @pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 300)])
    def test_invalid_channel(self, channels):
        with pytest.raises(ValueError, match="Channel"):
            Color(*channels)

    def test_invalid_count(self):
        with pytest.raises(ValueError, match="Count"):
            Color(10, 10, 10, count=0)

    def test_equality_ignores_count(self):
        assert Color(10, 20, 30, count=5) == Color(10, 20, 30)
        assert hash(Color(10, 20, 30, count=5)) == hash(Color(10, 20, 30))
        assert Color(10, 20, 30) != Color(10, 20, 31)

    def test_with_count(self):
        c = Color(10, 20, 30)
        weighted = c.with_count(7)
        assert weighted.count == 7
        assert c.count is None

    def test_immutable(self):
        c = Color(10, 20, 30)
        with pytest.raises(AttributeError):
            c.r = 0

    def test_from_hex(self):
        assert Color.from_hex("#DC143C") == Color(220, 20, 60)
        assert Color.from_hex("dc143c") == Color(220, 20, 60)

    def test_from_hex_invalid(self):
        with pytest.raises(ValueError, match="Invalid hex"):
            Color.from_hex("#fff")

    def test_roundtrip(self):
        c = Color(220, 20, 60, count=12)
        d = c.to_dict()
        assert d == {"r": 220, "g": 20, "b": 60, "hex": "#dc143c", "count": 12}
        restored = Color.from_dict(d)
        assert restored == c
        assert restored.count == 12

    def test_to_dict_omits_missing_count(self):
        assert "count" not in Color(1, 2, 3).to_dict()

    def test_constants(self):
        assert BLACK.hex == "#000000"
        assert WHITE.hex == "#ffffff"


class TestOKLCHColor:

    def test_valid_color(self):
        c = OKLCHColor(L=0.5, C=0.1, H=200.0)
        assert (c.L, c.C, c.H) == (0.5, 0.1, 200.0)
        assert not c.is_achromatic

    def test_achromatic_low_chroma(self):
        assert OKLCHColor(L=0.5, C=0.01, H=200.0).is_achromatic

    def test_invalid_lightness(self):
        with pytest.raises(ValueError, match="Lightness"):
            OKLCHColor(L=1.5, C=0.1, H=200.0)

    def test_invalid_chroma(self):
        with pytest.raises(ValueError, match="Chroma"):
            OKLCHColor(L=0.5, C=-0.1)

    def test_invalid_hue(self):
        with pytest.raises(ValueError, match="Hue"):
            OKLCHColor(L=0.5, C=0.1, H=360.0)

    def test_roundtrip(self):
        c = OKLCHColor(L=0.63, C=0.26, H=29.2)
        assert OKLCHColor.from_dict(c.to_dict()) == c


class TestContrastRating:

    def test_to_dict(self):
        assert get_contrast_rating(5.0).to_dict() == {
            "aa": {"normal": True, "large": True},
            "aaa": {"normal": False, "large": True},
        }


class TestAlgorithmRegistry:

    def test_display_order(self):
        assert [info.id.value for info in ALGORITHMS] == [
            "vibrant", "palette", "dominant", "mediancut", "kmeans", "histogram",
        ]

    def test_every_algorithm_listed_once(self):
        assert {info.id for info in ALGORITHMS} == set(Algorithm)
        assert len(ALGORITHMS) == len(Algorithm)

    def test_info_to_dict(self):
        d = ALGORITHMS[0].to_dict()
        assert d == {
            "id": "vibrant",
            "name": "Vibrant Colors",
            "description": "Extracts highly saturated, vibrant colors",
        }

    def test_resolve_string(self):
        assert resolve_algorithm("kmeans") is Algorithm.KMEANS

    def test_resolve_member(self):
        assert resolve_algorithm(Algorithm.PALETTE) is Algorithm.PALETTE

    @pytest.mark.parametrize("bad", ["rainbow", "", "Vibrant"])
    def test_resolve_unknown(self, bad):
        with pytest.raises(ValueError, match="Unknown algorithm"):
            resolve_algorithm(bad)
