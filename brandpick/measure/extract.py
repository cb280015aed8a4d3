# Copyright (c) 2026 Brandpick
# SPDX-License-Identifier: MIT

"""
Main analysis API.

This is the primary entry point: decoded image in, brand colors out.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

import numpy as np
from numpy.typing import NDArray

from brandpick.schema import Algorithm, Color
from brandpick.algorithms.kmeans import RandomSource
from brandpick.measure.sample import sample_pixels
from brandpick.measure.selector import SelectionConfig, select_brand_colors

logger = logging.getLogger(__name__)

ImageInput = Union[NDArray[np.uint8], bytes, bytearray, memoryview, Any]


def analyze_image(
    image: ImageInput,
    algorithm: Union[Algorithm, str] = Algorithm.VIBRANT,
    *,
    count: int = 6,
    width: Optional[int] = None,
    height: Optional[int] = None,
    sample_size: int = 10000,
    config: Optional[SelectionConfig] = None,
    rng: RandomSource = None,
) -> list[Color]:
    """
    Extract brand colors from a decoded image.

    Args:
        image: One of:
            - NumPy uint8 array of shape (H, W, 4) or (H, W, 3)
            - Row-major RGBA bytes; ``width`` and ``height`` are then
              required to check the buffer length
            - An already decoded Pillow ``Image`` (any mode; converted
              to RGBA so transparency is honored)
        algorithm: Extraction algorithm or its string id (default: vibrant)
        count: Maximum number of brand colors (default: 6)
        width: Image width for raw byte buffers
        height: Image height for raw byte buffers
        sample_size: Target pixel sample size (default: 10000)
        config: Selection settings
        rng: Seed or numpy Generator for k-means

    Returns:
        Brand colors, best contrast first (may be empty)

    Example:
        >>> from brandpick import analyze_image
        >>> colors = analyze_image(pixels, "vibrant")
        >>> [c.hex for c in colors]
        ['#ffd700', '#dc143c']
    """
    pixels = _load_pixels(image, width=width, height=height)
    samples = sample_pixels(pixels, sample_size)
    logger.debug("Analyzing %d samples with %s", len(samples), algorithm)
    return select_brand_colors(samples, algorithm, count, config=config, rng=rng)


def _load_pixels(
    image: ImageInput,
    *,
    width: Optional[int],
    height: Optional[int],
) -> Union[NDArray[np.uint8], bytes, bytearray, memoryview]:
    """
    Validate a decoded image and return a buffer ``sample_pixels`` accepts.

    Raises:
        ValueError: Raw bytes without dimensions, or a length mismatch
        TypeError: Unsupported input type (file paths included; decoding
            is the caller's job)
        ImportError: A Pillow image was passed but Pillow is missing
    """
    if isinstance(image, np.ndarray):
        return image

    if isinstance(image, (bytes, bytearray, memoryview)):
        if width is None or height is None:
            raise ValueError("width and height are required for raw RGBA buffers")
        expected = width * height * 4
        if len(image) != expected:
            raise ValueError(
                f"Expected {expected} bytes for a {width}x{height} RGBA image, "
                f"got {len(image)}"
            )
        return image

    if hasattr(image, "getbands"):
        try:
            from PIL import Image
        except ImportError as e:
            raise ImportError(
                "Pillow is required for Image inputs. "
                "Install with: pip install brandpick[image]"
            ) from e

        if isinstance(image, Image.Image):
            if image.mode != "RGBA":
                image = image.convert("RGBA")
            return np.asarray(image, dtype=np.uint8)

    raise TypeError(
        f"Expected numpy array, RGBA bytes or PIL Image, got {type(image)}"
    )
