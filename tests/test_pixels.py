import logging

from coloraide import Color

from gamut_canvas.config import NEUTRAL_GRAY
from gamut_canvas.pixels import to_display_buffer


def test_srgb_bytes_round_half_up():
    assert to_display_buffer(Color("srgb", [0.5, 0.25, 0.75])) == (128, 64, 191, 255)


def test_alpha_is_quantized():
    assert to_display_buffer(Color("srgb", [1.0, 1.0, 1.0], 0.5)) == (255, 255, 255, 128)


def test_out_of_range_channels_are_clamped():
    assert to_display_buffer(Color("srgb", [1.3, -0.2, 0.5])) == (255, 0, 128, 255)


def test_display_p3_buffer():
    green = Color("srgb", [0.0, 1.0, 0.0])
    r, g, b, a = to_display_buffer(green, "Display P3")
    # sRGB green sits inside P3, away from its corner
    assert 0 < r < 255
    assert 0 < g < 255
    assert 0 < b < 255
    assert a == 255
    assert to_display_buffer(green, "srgb") == (0, 255, 0, 255)


def test_unknown_display_space_uses_srgb():
    color = Color("srgb", [0.2, 0.4, 0.6])
    assert to_display_buffer(color, "cmyk") == to_display_buffer(color, "srgb")


def test_unconvertible_input_is_neutral_gray(caplog):
    with caplog.at_level(logging.WARNING, logger="gamut_canvas.pixels"):
        assert to_display_buffer(None) == NEUTRAL_GRAY
    assert "cannot convert" in caplog.text
