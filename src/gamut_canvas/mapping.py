# mapping.py – canvas pixel ⇄ color transforms for a 2-channel slice

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import sqrt
from typing import NamedTuple, Sequence

from coloraide import Color

from .config import DEFAULT_GAMUT, DEFAULT_MODEL, DEFAULT_SPACE, FIT_METHOD
from .errors import InvalidChannels
from .gamut import gamut_space as resolve_gamut
from .slices import finite, slice_for
from .spaces import (
    HUE_CHANNEL,
    ChannelRange,
    ColorSpaceConfig,
    channel_range,
    resolve_space,
)

log = logging.getLogger(__name__)


class PixelPosition(NamedTuple):
    x: float
    y: float


@dataclass
class CanvasMapper:
    """
    Maps a ``size`` × ``size`` canvas onto two channels of a color space.

    Pixel (0, 0) is the top-left corner: X grows with the first channel,
    Y grows *against* the second (top of the canvas = channel maximum).
    """

    size: float
    base_color: Color
    space: str = DEFAULT_SPACE
    model: str = DEFAULT_MODEL
    channels: tuple[str, str] | None = None
    gamut: str = DEFAULT_GAMUT
    fit_method: str = FIT_METHOD

    config: ColorSpaceConfig = field(init=False, repr=False)
    gamut_space: str = field(init=False)
    x_channel: str = field(init=False)
    y_channel: str = field(init=False)
    third_channel: str = field(init=False)
    x_range: ChannelRange = field(init=False, repr=False)
    y_range: ChannelRange = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.size > 0:
            raise ValueError(f"canvas size must be positive, got {self.size!r}")

        self.config = resolve_space(self.space, self.model)
        pair = tuple(self.channels) if self.channels else self.config.default_channels
        if not self.config.accepts(pair):
            raise InvalidChannels(pair, self.space, self.model)

        self.channels = pair
        self.x_channel, self.y_channel = pair
        self.third_channel = self.config.third_channel_for(pair)
        self.x_range = channel_range(self.x_channel, self.config.id)
        self.y_range = channel_range(self.y_channel, self.config.id)
        self.gamut_space = resolve_gamut(self.gamut)

        self._slice = slice_for(self.config)(self.config, self.base_color, pair)

    # ---- forward ----

    def raw_color(self, x: float, y: float) -> Color:
        """Color under pixel (x, y) before any gamut mapping."""
        fx = x / self.size
        fy = (self.size - y) / self.size
        return self._slice.color_at(self.x_range.scale(fx), self.y_range.scale(fy))

    def is_in_gamut(self, color: Color) -> bool:
        return color.in_gamut(self.gamut_space)

    def pixel_to_color(self, x: float, y: float) -> Color:
        color = self.raw_color(x, y)
        if not self.is_in_gamut(color):
            log.debug(
                "(%.1f, %.1f) outside %s; fitting with %s",
                x,
                y,
                self.gamut_space,
                self.fit_method,
            )
            color.fit(self.gamut_space, method=self.fit_method)
        return color

    # ---- inverse ----

    def _fraction(self, channel: str, value: float, rng: ChannelRange) -> float:
        if channel == HUE_CHANNEL:
            return rng.normalize(value % 360.0)
        return max(0.0, min(1.0, rng.normalize(value)))

    def color_to_pixel(self, color: Color) -> PixelPosition:
        """
        Pixel showing ``color``. Exact inverse of pixel_to_color only for
        in-gamut colors; a fitted color lands where its fitted values are.
        """
        vx, vy = self._slice.values_of(color)
        nx = self._fraction(self.x_channel, vx, self.x_range)
        ny = self._fraction(self.y_channel, vy, self.y_range)
        return PixelPosition(nx * self.size, (1.0 - ny) * self.size)

    # ---- single channel ----

    def color_with_channel_value(self, channel: str, value: float) -> Color:
        """
        Base color with one channel (in canvas units) replaced.

        A value the color library cannot build a color from leaves the base
        color unchanged.
        """
        if channel not in self.config.channels:
            raise InvalidChannels((channel,), self.space, self.model)
        try:
            return self._slice.with_value(self.config.index(channel), value)
        except (ValueError, TypeError) as exc:
            log.warning(
                "cannot set %s=%r on %s: %s", channel, value, self.config.id, exc
            )
            return self.base_color

    # ---- distances ----

    def coordinates(self, color: Color) -> list[float]:
        """All three coordinates of ``color`` in canvas units."""
        return self._slice.coordinates(color)

    def distance(self, a: Sequence[float], b: Sequence[float]) -> float:
        """Euclidean distance with every channel scaled to its range."""
        total = 0.0
        for channel, u, v in zip(self.config.channels, a, b):
            d = finite(u) - finite(v)
            if channel == HUE_CHANNEL:
                d = (d + 180.0) % 360.0 - 180.0
            total += (d / channel_range(channel, self.config.id).span) ** 2
        return sqrt(total)


def pixel_to_color(
    x: float,
    y: float,
    size: float,
    base_color: Color,
    space: str = DEFAULT_SPACE,
    model: str = DEFAULT_MODEL,
    channels: tuple[str, str] | None = None,
    gamut: str = DEFAULT_GAMUT,
) -> Color:
    mapper = CanvasMapper(size, base_color, space, model, channels, gamut)
    return mapper.pixel_to_color(x, y)


def color_to_pixel(
    color: Color,
    size: float,
    space: str = DEFAULT_SPACE,
    model: str = DEFAULT_MODEL,
    channels: tuple[str, str] | None = None,
) -> PixelPosition:
    return CanvasMapper(size, color, space, model, channels).color_to_pixel(color)


__all__ = ["PixelPosition", "CanvasMapper", "pixel_to_color", "color_to_pixel"]
