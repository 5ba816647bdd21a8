# gamut.py – logical gamut names and exact (unmapped) gamut tests

from __future__ import annotations

import logging
from typing import Sequence

from coloraide import Color

from .slices import slice_for
from .spaces import canonical_name, config_by_id

log = logging.getLogger(__name__)

_GAMUTS = {
    "srgb": "srgb",
    "display-p3": "display-p3",
    "rec2020": "rec2020",
}


def gamut_space(name: str | None) -> str:
    """'sRGB' → 'srgb', 'Display-P3' → 'display-p3', 'Rec2020' → 'rec2020'."""
    return _GAMUTS.get(canonical_name(name), "srgb")


def exact_color(space_id: str, coords: Sequence[float]) -> Color:
    """Color with exactly these canvas-unit coordinates; no gamut mapping."""
    config = config_by_id(space_id)
    if config is None:
        return Color(space_id, list(coords))
    return slice_for(config).assemble(config, coords)


def is_out_of_gamut(coords: Sequence[float], space_id: str, gamut: str) -> bool:
    """True when ``coords`` in ``space_id`` fall outside the ``gamut`` space.

    Coordinates the color library cannot interpret count as out of gamut.
    """
    try:
        return not exact_color(space_id, coords).in_gamut(gamut)
    except (ValueError, TypeError) as exc:
        log.debug("gamut test failed for %s %s: %s", space_id, list(coords), exc)
        return True


__all__ = ["gamut_space", "exact_color", "is_out_of_gamut"]
