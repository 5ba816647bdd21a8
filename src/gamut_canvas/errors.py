from __future__ import annotations


class GamutCanvasError(Exception):
    """Base class for errors raised by the canvas mapping core."""


class InvalidChannels(GamutCanvasError, ValueError):
    """Channel pair is not valid for the resolved color space and model."""

    def __init__(self, channels, space: str, model: str) -> None:
        self.channels = tuple(channels)
        self.space = space
        self.model = model
        super().__init__(
            f"invalid channels {list(self.channels)} for color space "
            f"{space!r} and model {model!r}"
        )


class ConversionFailure(GamutCanvasError):
    """The color library could not convert a color."""


class SearchExhausted(GamutCanvasError):
    """No in-gamut position was found within the search budget."""


__all__ = [
    "GamutCanvasError",
    "InvalidChannels",
    "ConversionFailure",
    "SearchExhausted",
]
