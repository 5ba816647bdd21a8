# spaces.py – canonical color-space configs and per-channel numeric ranges

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, NamedTuple

Channel = str
SpaceId = str

HUE_CHANNEL: Channel = "h"


@dataclass(frozen=True)
class ColorSpaceConfig:
    """
    One canonical space as laid out on the canvas.

    ``units`` converts ColorAide coordinates into canvas units, channel by
    channel (ColorAide keeps HSL saturation/lightness in [0, 1], the canvas
    works in [0, 100]).
    """

    id: SpaceId
    channels: tuple[Channel, Channel, Channel]
    default_channels: tuple[Channel, Channel]
    third_channel: Channel
    units: tuple[float, float, float] = (1.0, 1.0, 1.0)

    def index(self, channel: Channel) -> int:
        return self.channels.index(channel)

    def accepts(self, pair: Iterable[Channel]) -> bool:
        pair = tuple(pair)
        return (
            len(pair) == 2
            and pair[0] != pair[1]
            and all(ch in self.channels for ch in pair)
        )

    def third_channel_for(self, pair: Iterable[Channel]) -> Channel:
        """The axis held fixed when ``pair`` is shown on the plane."""
        rest = [ch for ch in self.channels if ch not in tuple(pair)]
        return rest[0] if len(rest) == 1 else self.third_channel


class ChannelRange(NamedTuple):
    low: float
    high: float

    @property
    def span(self) -> float:
        return self.high - self.low

    def scale(self, fraction: float) -> float:
        return self.low + fraction * (self.high - self.low)

    def normalize(self, value: float) -> float:
        return (value - self.low) / (self.high - self.low)


# --- configs -----------------------------------------------------------------
_RGB = ("r", "g", "b")
_HSL_CHANNELS = ("h", "s", "l")

SRGB = ColorSpaceConfig("srgb", _RGB, ("r", "g"), "b")
HSL = ColorSpaceConfig("hsl", _HSL_CHANNELS, ("s", "l"), "h", (1.0, 100.0, 100.0))
DISPLAY_P3 = ColorSpaceConfig("display-p3", _RGB, ("r", "g"), "b")
P3_HSL = ColorSpaceConfig("p3-hsl", _HSL_CHANNELS, ("s", "l"), "h")
OKLAB = ColorSpaceConfig("oklab", ("l", "a", "b"), ("a", "b"), "l")
OKLCH = ColorSpaceConfig("oklch", ("l", "c", "h"), ("c", "h"), "l")

_CONFIGS: dict[tuple[str, str], ColorSpaceConfig] = {
    ("srgb", "cartesian"): SRGB,
    ("srgb", "polar"): HSL,
    ("display-p3", "cartesian"): DISPLAY_P3,
    ("display-p3", "polar"): P3_HSL,
    ("oklch", "cartesian"): OKLAB,
    ("oklch", "polar"): OKLCH,
}

_ALIASES = {"p3": "display-p3", "oklab": "oklch"}


def canonical_name(name: str | None) -> str:
    """'Display P3' → 'display-p3', 'OKlch' → 'oklch'."""
    key = (name or "").strip().lower().replace(" ", "-")
    return _ALIASES.get(key, key)


@lru_cache(maxsize=None)
def resolve_space(space: str | None, model: str | None) -> ColorSpaceConfig:
    """Config for a (logical space, model) pair; unknown input → sRGB cartesian."""
    shape = "polar" if canonical_name(model) == "polar" else "cartesian"
    return _CONFIGS.get((canonical_name(space), shape), SRGB)


_BY_ID = {config.id: config for config in _CONFIGS.values()}


def config_by_id(space_id: SpaceId) -> ColorSpaceConfig | None:
    return _BY_ID.get(space_id)


# --- ranges ------------------------------------------------------------------
UNIT = ChannelRange(0.0, 1.0)
HUE = ChannelRange(0.0, 360.0)
PERCENT = ChannelRange(0.0, 100.0)

_RANGES: dict[SpaceId, dict[Channel, ChannelRange]] = {
    "hsl": {"h": HUE, "s": PERCENT, "l": PERCENT},
    "p3-hsl": {"h": HUE, "s": PERCENT, "l": PERCENT},
    # 0.26 is a practical chroma ceiling for displayable colors, not the
    # theoretical one
    "oklch": {"l": UNIT, "c": ChannelRange(0.0, 0.26), "h": HUE},
    "oklab": {
        "l": UNIT,
        "a": ChannelRange(-0.13, 0.20),
        "b": ChannelRange(-0.28, 0.10),
    },
}


def channel_range(channel: Channel, space_id: SpaceId) -> ChannelRange:
    """Numeric domain a [0,1] canvas fraction is scaled into."""
    return _RANGES.get(space_id, {}).get(channel, UNIT)


__all__ = [
    "ColorSpaceConfig",
    "ChannelRange",
    "HUE_CHANNEL",
    "SRGB",
    "HSL",
    "DISPLAY_P3",
    "P3_HSL",
    "OKLAB",
    "OKLCH",
    "UNIT",
    "HUE",
    "PERCENT",
    "canonical_name",
    "resolve_space",
    "config_by_id",
    "channel_range",
]
