# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Color value types for brand color extraction.

Design principles:
- Immutable: All types are frozen dataclasses
- Per-call: Values are created by the call that needs them and never shared
- Serializable: JSON-ready dictionaries for the caller boundary

Identity:
    A Color is identified by its canonical hex string. The optional ``count``
    is a frequency weight (how many sampled pixels the color stands for) and
    does not take part in equality.

OKLCH Color Space:
- L (Lightness): 0.0 = black, 1.0 = white
- C (Chroma): 0.0 = gray, ~0.32 = max saturation in sRGB
- H (Hue): 0-360 degrees
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    An 8-bit sRGB color, optionally weighted by pixel frequency.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        count: Number of source pixels this color represents, or None
           when the color is not the output of an extraction algorithm
    """
    r: int
    g: int
    b: int
    count: Optional[int] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate channels and weight."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")
        if self.count is not None and self.count < 1:
            raise ValueError(f"Count must be a positive integer, got {self.count}")

    @property
    def hex(self) -> str:
        """Canonical lowercase hex string like "#dc143c"."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def with_count(self, count: int) -> Color:
        """Return the same color carrying a new frequency weight."""
        return replace(self, count=count)

    @classmethod
    def from_hex(cls, hex_color: str) -> Color:
        """
        Parse a hex string.

        Raises:
            ValueError: If the string is not a 6-digit hex color
        """
        from brandpick.measure.colorspace import hex_to_rgb
        color = hex_to_rgb(hex_color)
        if color is None:
            raise ValueError(f"Invalid hex color: {hex_color!r}")
        return color

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d = {"r": self.r, "g": self.g, "b": self.b, "hex": self.hex}
        if self.count is not None:
            d["count"] = self.count
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary."""
        return cls(
            r=data["r"],
            g=data["g"],
            b=data["b"],
            count=data.get("count"),
        )


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


@dataclass(frozen=True, slots=True)
class OKLCHColor:
    """
    A single color in OKLCH color space.

    Always derived from (or converted back to) a Color; never persisted
    on its own.

    Attributes:
        L: Lightness (0.0 = black, 1.0 = white)
        C: Chroma (0.0 = neutral gray, typical max ~0.32 for sRGB)
        H: Hue in degrees [0, 360)
    """
    L: float
    C: float
    H: float = 0.0

    def __post_init__(self) -> None:
        """Validate color values are within expected ranges."""
        if not 0.0 <= self.L <= 1.0:
            raise ValueError(f"Lightness must be 0-1, got {self.L}")
        if self.C < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.C}")
        if not 0.0 <= self.H < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.H}")

    @property
    def is_achromatic(self) -> bool:
        """True if the color has no perceptible hue (gray/white/black)."""
        return self.C < 0.02

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"L": self.L, "C": self.C, "H": self.H}

    @classmethod
    def from_dict(cls, data: dict) -> OKLCHColor:
        """Deserialize from dictionary."""
        return cls(L=data["L"], C=data["C"], H=data.get("H", 0.0))


# =============================================================================
# Contrast Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ContrastLevel:
    """Pass/fail for normal and large text at one WCAG level."""
    normal: bool
    large: bool

    def to_dict(self) -> dict:
        return {"normal": self.normal, "large": self.large}


@dataclass(frozen=True, slots=True)
class ContrastRating:
    """
    WCAG 2.0 conformance derived from a contrast ratio.

    Built by ``get_contrast_rating``; never assembled by hand.

    Attributes:
        aa: AA level (normal text >= 4.5, large text >= 3.0)
        aaa: AAA level (normal text >= 7.0, large text >= 4.5)
    """
    aa: ContrastLevel
    aaa: ContrastLevel

    @property
    def label(self) -> str:
        """Short badge: "AAA", "AA" or "Fail" (normal text)."""
        if self.aaa.normal:
            return "AAA"
        if self.aa.normal:
            return "AA"
        return "Fail"

    @property
    def summary(self) -> str:
        """Human-readable verdict for normal-size text."""
        if self.aaa.normal:
            return "Excellent contrast"
        if self.aa.normal:
            return "Good contrast"
        return "Poor contrast"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"aa": self.aa.to_dict(), "aaa": self.aaa.to_dict()}


# =============================================================================
# Recommendation Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ThemeRecommendation:
    """
    A background brand color with the foreground that reads best on it.

    Attributes:
        background: The brand color used as background
        foreground: Pure black or pure white, whichever contrasts more
        contrast_ratio: WCAG contrast ratio between the two (>= 1.0)
        rating: WCAG conformance for that ratio
    """
    background: Color
    foreground: Color
    contrast_ratio: float
    rating: ContrastRating

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "background": self.background.hex,
            "foreground": self.foreground.hex,
            "contrast_ratio": round(self.contrast_ratio, 2),
            "rating": self.rating.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class BrandingRecommendation:
    """Recommended brand colors for the light and dark color schemes."""
    light: ThemeRecommendation
    dark: ThemeRecommendation

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"light": self.light.to_dict(), "dark": self.dark.to_dict()}


@dataclass(frozen=True, slots=True)
class IconContrast:
    """
    How well an app icon stands out against a brand background.

    Attributes:
        icon_color: Average color of the icon's opaque pixels
        background: Background color the icon is placed on
        contrast_ratio: WCAG contrast ratio between the two
    """
    icon_color: Color
    background: Color
    contrast_ratio: float

    @property
    def is_visible(self) -> bool:
        """Icons need at least the WCAG non-text contrast of 3:1."""
        return self.contrast_ratio >= 3.0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "icon_color": self.icon_color.hex,
            "background": self.background.hex,
            "contrast_ratio": round(self.contrast_ratio, 2),
            "visible": self.is_visible,
        }


# =============================================================================
# Algorithm Registry
# =============================================================================


class Algorithm(Enum):
    """
    Extraction algorithm identifiers.

    The set is closed; each member has exactly one extractor.
    """
    DOMINANT = "dominant"
    HISTOGRAM = "histogram"
    KMEANS = "kmeans"
    MEDIANCUT = "mediancut"
    VIBRANT = "vibrant"
    PALETTE = "palette"


def resolve_algorithm(algorithm: Algorithm | str) -> Algorithm:
    """
    Coerce an identifier to an Algorithm.

    Raises:
        ValueError: If the identifier names no known algorithm
    """
    if isinstance(algorithm, Algorithm):
        return algorithm
    try:
        return Algorithm(algorithm)
    except ValueError:
        raise ValueError(f"Unknown algorithm: {algorithm!r}") from None


@dataclass(frozen=True, slots=True)
class AlgorithmInfo:
    """Display descriptor for an algorithm."""
    id: Algorithm
    name: str
    description: str

    def to_dict(self) -> dict:
        return {"id": self.id.value, "name": self.name, "description": self.description}


# Display order, most useful for branding first
ALGORITHMS: tuple[AlgorithmInfo, ...] = (
    AlgorithmInfo(
        Algorithm.VIBRANT,
        "Vibrant Colors",
        "Extracts highly saturated, vibrant colors",
    ),
    AlgorithmInfo(
        Algorithm.PALETTE,
        "Balanced Palette",
        "Diverse palette with light, dark, and vibrant colors",
    ),
    AlgorithmInfo(
        Algorithm.DOMINANT,
        "Dominant Colors",
        "Most frequently occurring colors",
    ),
    AlgorithmInfo(
        Algorithm.MEDIANCUT,
        "Median Cut",
        "Color quantization by recursive subdivision",
    ),
    AlgorithmInfo(
        Algorithm.KMEANS,
        "K-Means Clustering",
        "Groups similar colors using k-means algorithm",
    ),
    AlgorithmInfo(
        Algorithm.HISTOGRAM,
        "Histogram Analysis",
        "Color distribution analysis with binning",
    ),
)
