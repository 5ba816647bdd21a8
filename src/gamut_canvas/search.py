# search.py – keep a dragged canvas position inside the gamut

from __future__ import annotations

import logging
from functools import lru_cache
from math import hypot, inf

import numpy as np
from coloraide import Color

from .config import (
    DEFAULT_BUDGET,
    DEFAULT_GAMUT,
    DEFAULT_MODEL,
    DEFAULT_SPACE,
    FIT_CANDIDATES,
    SearchBudget,
)
from .errors import SearchExhausted
from .mapping import CanvasMapper, PixelPosition

log = logging.getLogger(__name__)


@lru_cache(maxsize=32)
def _ray_directions(rays: int) -> tuple[tuple[float, float], ...]:
    """Unit vectors for ``rays`` equally spaced angles over [0, 2π)."""
    angles = np.arange(rays, dtype=np.float64) * (2.0 * np.pi / rays)
    return tuple(zip(np.cos(angles).tolist(), np.sin(angles).tolist()))


def search_boundary(
    mapper: CanvasMapper,
    x: float,
    y: float,
    budget: SearchBudget = DEFAULT_BUDGET,
) -> PixelPosition:
    """
    Closest in-gamut point found by binary-searching each ray out of (x, y).

    Along every ray the bracket [low, high] starts at [0, radius_fraction *
    size]; an in-gamut probe pulls ``high`` in, an out-of-gamut probe pushes
    ``low`` out. The winner is the in-gamut probe nearest the target over all
    rays. Greedy: with a non-convex gamut boundary it can miss the true
    nearest point.
    """
    size = mapper.size
    max_radius = budget.radius_fraction * size

    best: PixelPosition | None = None
    best_dist = inf

    for dx, dy in _ray_directions(budget.rays):
        low, high = 0.0, max_radius
        for _ in range(budget.iterations):
            if high - low <= budget.tolerance:
                break
            radius = 0.5 * (low + high)
            px = min(size, max(0.0, x + dx * radius))
            py = min(size, max(0.0, y + dy * radius))

            if mapper.is_in_gamut(mapper.raw_color(px, py)):
                high = radius
                dist = hypot(px - x, py - y)
                if dist < best_dist:
                    best_dist = dist
                    best = PixelPosition(px, py)
            else:
                low = radius

    if best is None:
        raise SearchExhausted(
            f"no {mapper.gamut_space} position within {max_radius:.1f}px "
            f"of ({x:.1f}, {y:.1f})"
        )
    return best


def constrain_position(
    mapper: CanvasMapper,
    x: float,
    y: float,
    budget: SearchBudget = DEFAULT_BUDGET,
) -> PixelPosition:
    if mapper.is_in_gamut(mapper.raw_color(x, y)):
        return PixelPosition(x, y)
    try:
        return search_boundary(mapper, x, y, budget)
    except SearchExhausted as exc:
        log.debug("%s; using canvas center", exc)
        center = mapper.size / 2.0
        return PixelPosition(center, center)


def constrain(
    x: float,
    y: float,
    size: float,
    base_color: Color,
    space: str = DEFAULT_SPACE,
    model: str = DEFAULT_MODEL,
    channels: tuple[str, str] | None = None,
    gamut: str = DEFAULT_GAMUT,
    *,
    budget: SearchBudget = DEFAULT_BUDGET,
) -> PixelPosition:
    """Gamut-safe drag position: (x, y) itself when in gamut, else the
    nearest in-gamut position found, else the canvas center."""
    mapper = CanvasMapper(size, base_color, space, model, channels, gamut)
    return constrain_position(mapper, x, y, budget)


def find_closest_in_gamut_color(
    x: float,
    y: float,
    size: float,
    base_color: Color,
    space: str = DEFAULT_SPACE,
    model: str = DEFAULT_MODEL,
    channels: tuple[str, str] | None = None,
    gamut: str = DEFAULT_GAMUT,
) -> Color:
    """
    Color-level counterpart of constrain(): try each gamut mapping method and
    keep the result closest to the raw color under (x, y), measured in the
    canvas space with channels scaled to their ranges.
    """
    mapper = CanvasMapper(size, base_color, space, model, channels, gamut)
    return closest_color(mapper, x, y)


def closest_color(mapper: CanvasMapper, x: float, y: float) -> Color:
    raw = mapper.raw_color(x, y)
    if mapper.is_in_gamut(raw):
        return raw

    target = mapper.coordinates(raw)
    best: Color | None = None
    best_dist = inf
    for method in FIT_CANDIDATES:
        try:
            mapped = raw.clone().fit(mapper.gamut_space, method=method)
        except ValueError as exc:
            log.debug("gamut method %s unavailable: %s", method, exc)
            continue
        dist = mapper.distance(target, mapper.coordinates(mapped))
        if dist < best_dist:
            best_dist = dist
            best = mapped

    if best is None:
        log.warning("no gamut mapping method succeeded; keeping base color")
        return mapper.base_color
    return best


__all__ = [
    "search_boundary",
    "constrain_position",
    "constrain",
    "find_closest_in_gamut_color",
    "closest_color",
]
