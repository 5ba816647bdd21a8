# config.py – defaults shared by the mapper, the boundary search and the app

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SPACE = "sRGB"
DEFAULT_MODEL = "cartesian"
DEFAULT_GAMUT = "sRGB"

# gamut mapping handed to ColorAide's Color.fit()
FIT_METHOD = "raytrace"

# methods compared by find_closest_in_gamut_color
FIT_CANDIDATES = ("clip", "lch-chroma", "oklch-chroma", "raytrace")

FALLBACK_DISPLAY_SPACE = "srgb"
NEUTRAL_GRAY = (128, 128, 128, 255)


@dataclass(frozen=True)
class SearchBudget:
    """
    Knobs of the radial boundary search.
      rays             – equally spaced directions around the target
      iterations       – binary-search steps per ray
      radius_fraction  – search radius as a fraction of the canvas size
      tolerance        – stop a ray once its bracket is this narrow (px)
    """

    rays: int = 16
    iterations: int = 12
    radius_fraction: float = 0.5
    tolerance: float = 1.0

    def __post_init__(self) -> None:
        if self.rays < 1:
            raise ValueError("rays must be ≥ 1")
        if self.iterations < 1:
            raise ValueError("iterations must be ≥ 1")
        if self.radius_fraction <= 0.0:
            raise ValueError("radius_fraction must be positive")
        if self.tolerance < 0.0:
            raise ValueError("tolerance must be ≥ 0")


DEFAULT_BUDGET = SearchBudget()


__all__ = [
    "DEFAULT_SPACE",
    "DEFAULT_MODEL",
    "DEFAULT_GAMUT",
    "FIT_METHOD",
    "FIT_CANDIDATES",
    "FALLBACK_DISPLAY_SPACE",
    "NEUTRAL_GRAY",
    "SearchBudget",
    "DEFAULT_BUDGET",
]
