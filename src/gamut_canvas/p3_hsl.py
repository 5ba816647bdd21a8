"""
Hue/saturation/lightness over the Display-P3 primaries.

Same closed-form math as CSS HSL, but applied to Display-P3 RGB directly
instead of going through sRGB, so the full P3 gamut is reachable:

  h  – hue in degrees, [0, 360)
  s  – saturation, [0, 100]
  l  – lightness, [0, 100]

Undefined hue (achromatic input) is reported as 0.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
from coloraide import Color

P3_SPACE = "display-p3"


class P3Rgb(NamedTuple):
    r: float
    g: float
    b: float


class P3HslCoords(NamedTuple):
    h: float
    s: float
    l: float  # noqa: E741


# index into (chroma, x, 0) for each 60° sector
_SECTORS = ((0, 1, 2), (1, 0, 2), (2, 0, 1), (2, 1, 0), (1, 2, 0), (0, 2, 1))
_SECTOR_TABLE = np.array(_SECTORS, dtype=np.int64)


def rgb_to_hsl(rgb: P3Rgb) -> P3HslCoords:
    r, g, b = rgb
    hi = max(r, g, b)
    lo = min(r, g, b)
    delta = hi - lo
    light = (hi + lo) / 2.0

    if delta == 0:
        return P3HslCoords(0.0, 0.0, light * 100.0)

    denom = 1.0 - abs(2.0 * light - 1.0)
    sat = delta / denom if denom else 0.0

    if hi == r:
        hue = ((g - b) / delta) % 6.0
    elif hi == g:
        hue = (b - r) / delta + 2.0
    else:
        hue = (r - g) / delta + 4.0

    return P3HslCoords((hue * 60.0) % 360.0, sat * 100.0, light * 100.0)


def hsl_to_rgb(hsl: P3HslCoords) -> P3Rgb:
    h, s, l = hsl  # noqa: E741
    hue = h % 360.0
    sat = s / 100.0
    light = l / 100.0

    chroma = (1.0 - abs(2.0 * light - 1.0)) * sat
    hp = hue / 60.0
    x = chroma * (1.0 - abs(hp % 2.0 - 1.0))
    m = light - chroma / 2.0

    parts = (chroma, x, 0.0)
    i, j, k = _SECTORS[min(int(hp), 5)]
    return P3Rgb(parts[i] + m, parts[j] + m, parts[k] + m)


# ---- arrays ----
# Same formulas over (..., 3) arrays, for filling a whole canvas at once.


def rgb_to_hsl_array(rgb: np.ndarray) -> np.ndarray:
    """(..., 3) Display-P3 RGB in [0, 1] → (..., 3) P3-HSL."""
    rgb = np.asarray(rgb, dtype=np.float64)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    hi = rgb.max(axis=-1)
    lo = rgb.min(axis=-1)
    delta = hi - lo
    light = (hi + lo) / 2.0

    chromatic = delta > 0.0
    safe_delta = np.where(chromatic, delta, 1.0)
    denom = 1.0 - np.abs(2.0 * light - 1.0)
    sat = np.where(chromatic & (denom > 0.0), delta / np.where(denom > 0.0, denom, 1.0), 0.0)

    hue = np.where(
        hi == r,
        ((g - b) / safe_delta) % 6.0,
        np.where(hi == g, (b - r) / safe_delta + 2.0, (r - g) / safe_delta + 4.0),
    )
    hue = np.where(chromatic, (hue * 60.0) % 360.0, 0.0)

    return np.stack([hue, sat * 100.0, light * 100.0], axis=-1)


def hsl_to_rgb_array(hsl: np.ndarray) -> np.ndarray:
    """(..., 3) P3-HSL → (..., 3) Display-P3 RGB."""
    hsl = np.asarray(hsl, dtype=np.float64)
    hue = hsl[..., 0] % 360.0
    sat = hsl[..., 1] / 100.0
    light = hsl[..., 2] / 100.0

    chroma = (1.0 - np.abs(2.0 * light - 1.0)) * sat
    hp = hue / 60.0
    x = chroma * (1.0 - np.abs(hp % 2.0 - 1.0))
    m = light - chroma / 2.0

    parts = np.stack([chroma, x, np.zeros_like(chroma)], axis=-1)
    sector = np.minimum(hp.astype(np.int64), 5)
    order = _SECTOR_TABLE[sector]
    return np.take_along_axis(parts, order, axis=-1) + np.expand_dims(m, -1)


def p3_hsl_to_color(hsl: P3HslCoords, alpha: float = 1.0) -> Color:
    return Color(P3_SPACE, list(hsl_to_rgb(hsl)), alpha)


def color_to_p3_hsl(color: Color) -> P3HslCoords:
    r, g, b = color.convert(P3_SPACE).coords()
    return rgb_to_hsl(P3Rgb(r, g, b))


# ---- helpers ----


def is_valid_p3_hsl(hsl: P3HslCoords) -> bool:
    h, s, l = hsl  # noqa: E741
    # NaN fails every comparison
    return 0.0 <= h <= 360.0 and 0.0 <= s <= 100.0 and 0.0 <= l <= 100.0


def clamp_p3_hsl(hsl: P3HslCoords) -> P3HslCoords:
    h, s, l = hsl  # noqa: E741
    return P3HslCoords(
        max(0.0, min(360.0, h)),
        max(0.0, min(100.0, s)),
        max(0.0, min(100.0, l)),
    )


def p3_hsl_to_normalized(hsl: P3HslCoords) -> tuple[float, float, float]:
    return hsl.h / 360.0, hsl.s / 100.0, hsl.l / 100.0


def normalized_to_p3_hsl(values: tuple[float, float, float]) -> P3HslCoords:
    h, s, l = values  # noqa: E741
    return P3HslCoords(h * 360.0, s * 100.0, l * 100.0)


__all__ = [
    "P3_SPACE",
    "P3Rgb",
    "P3HslCoords",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsl_array",
    "hsl_to_rgb_array",
    "p3_hsl_to_color",
    "color_to_p3_hsl",
    "is_valid_p3_hsl",
    "clamp_p3_hsl",
    "p3_hsl_to_normalized",
    "normalized_to_p3_hsl",
]
