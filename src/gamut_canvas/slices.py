# slices.py – how each canonical space reads and builds canvas-unit coordinates

from __future__ import annotations

from math import isnan
from typing import Sequence

from coloraide import Color

from .p3_hsl import P3HslCoords, color_to_p3_hsl, p3_hsl_to_color
from .spaces import P3_HSL, ColorSpaceConfig


def finite(v: float) -> float:
    # ColorAide reports an undefined (achromatic) hue as NaN
    return 0.0 if isnan(v) else v


class Slice:
    """
    A fixed 2D slice through one canonical space.

    The base color is read once in canvas units; every color on the plane
    shares its third coordinate and only the two plotted coordinates change.
    Subclasses say how a color is read into canvas units and built back.
    """

    def __init__(self, config: ColorSpaceConfig, base: Color, pair: Sequence[str]):
        self.config = config
        self._ix = config.index(pair[0])
        self._iy = config.index(pair[1])
        alpha = base["alpha"]
        self._alpha = 1.0 if isnan(alpha) else alpha
        self._base = self.coordinates(base)

    @staticmethod
    def read(config: ColorSpaceConfig, color: Color) -> list[float]:
        raise NotImplementedError

    @staticmethod
    def assemble(config: ColorSpaceConfig, coords: Sequence[float], alpha: float = 1.0) -> Color:
        raise NotImplementedError

    def coordinates(self, color: Color) -> list[float]:
        return self.read(self.config, color)

    def build(self, coords: Sequence[float]) -> Color:
        return self.assemble(self.config, coords, self._alpha)

    def color_at(self, vx: float, vy: float) -> Color:
        coords = list(self._base)
        coords[self._ix] = vx
        coords[self._iy] = vy
        return self.build(coords)

    def with_value(self, index: int, value: float) -> Color:
        coords = list(self._base)
        coords[index] = value
        return self.build(coords)

    def values_of(self, color: Color) -> tuple[float, float]:
        coords = self.coordinates(color)
        return finite(coords[self._ix]), finite(coords[self._iy])


class CoordinateSlice(Slice):
    """Any space the color library knows: convert, then overwrite by index."""

    @staticmethod
    def read(config: ColorSpaceConfig, color: Color) -> list[float]:
        coords = color.convert(config.id).coords()
        return [v * u for v, u in zip(coords, config.units)]

    @staticmethod
    def assemble(config: ColorSpaceConfig, coords: Sequence[float], alpha: float = 1.0) -> Color:
        lib = [v / u for v, u in zip(coords, config.units)]
        return Color(config.id, lib, alpha)


class P3HslSlice(Slice):
    """P3-HSL lives outside the color library; colors are Display-P3."""

    @staticmethod
    def read(config: ColorSpaceConfig, color: Color) -> list[float]:
        return list(color_to_p3_hsl(color))

    @staticmethod
    def assemble(config: ColorSpaceConfig, coords: Sequence[float], alpha: float = 1.0) -> Color:
        return p3_hsl_to_color(P3HslCoords(*coords), alpha)


_SLICES: dict[str, type[Slice]] = {P3_HSL.id: P3HslSlice}


def slice_for(config: ColorSpaceConfig) -> type[Slice]:
    return _SLICES.get(config.id, CoordinateSlice)


__all__ = ["finite", "Slice", "CoordinateSlice", "P3HslSlice", "slice_for"]
