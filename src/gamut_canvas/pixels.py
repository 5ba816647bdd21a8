# pixels.py – color → 8-bit RGBA quadruplet for a display buffer

from __future__ import annotations

import logging
from math import isnan

from coloraide import Color

from .config import FALLBACK_DISPLAY_SPACE, NEUTRAL_GRAY
from .errors import ConversionFailure
from .spaces import canonical_name

log = logging.getLogger(__name__)

RGBA = tuple[int, int, int, int]

DISPLAY_SPACES = {
    "srgb": "srgb",
    "display-p3": "display-p3",
}


def _unit(v: float) -> float:
    return 0.0 if isnan(v) else max(0.0, min(1.0, v))


def _to_byte(v: float) -> int:
    # round half up
    return int(_unit(v) * 255.0 + 0.5)


def _quantize(color: Color, space: str) -> RGBA:
    try:
        out = color.convert(space)
        r, g, b = out.coords()
        alpha = out["alpha"]
    except Exception as exc:
        raise ConversionFailure(f"cannot convert {color!r} to {space}") from exc
    if isnan(alpha):
        alpha = 1.0
    return _to_byte(r), _to_byte(g), _to_byte(b), _to_byte(alpha)


def to_display_buffer(color: Color, display_space: str = FALLBACK_DISPLAY_SPACE) -> RGBA:
    """
    (r, g, b, a) in 0..255 for a canvas whose buffer is ``display_space``.

    Never raises: a failed conversion is retried once in sRGB, and if that
    fails too the pixel is neutral gray.
    """
    space = DISPLAY_SPACES.get(canonical_name(display_space), FALLBACK_DISPLAY_SPACE)
    for target in dict.fromkeys((space, FALLBACK_DISPLAY_SPACE)):
        try:
            return _quantize(color, target)
        except ConversionFailure as exc:
            log.warning("%s", exc)
    return NEUTRAL_GRAY


__all__ = ["RGBA", "DISPLAY_SPACES", "to_display_buffer"]
