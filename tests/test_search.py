import time
from math import hypot

import pytest
from coloraide import Color

from gamut_canvas.config import SearchBudget
from gamut_canvas.errors import SearchExhausted
from gamut_canvas.mapping import CanvasMapper
from gamut_canvas.search import (
    constrain,
    constrain_position,
    find_closest_in_gamut_color,
    search_boundary,
)

SIZE = 200.0
GRAY = Color("srgb", [0.5, 0.5, 0.5])


def oklch_mapper():
    return CanvasMapper(SIZE, GRAY, "OKLCh", "polar", ("c", "h"), "sRGB")


def test_in_gamut_position_is_returned_unchanged():
    assert constrain(10, 100, SIZE, GRAY, "OKLCh", "polar", ("c", "h")) == (10, 100)
    assert constrain(37.5, 160.25, SIZE, GRAY) == (37.5, 160.25)


def test_out_of_gamut_position_moves_onto_the_gamut():
    mapper = oklch_mapper()
    assert not mapper.is_in_gamut(mapper.raw_color(190, 190))

    x, y = constrain_position(mapper, 190, 190)
    assert 0.0 <= x <= SIZE
    assert 0.0 <= y <= SIZE
    assert mapper.is_in_gamut(mapper.raw_color(x, y))
    assert hypot(x - 190, y - 190) < hypot(SIZE / 2 - 190, SIZE / 2 - 190)


def test_different_targets_give_different_positions():
    mapper = oklch_mapper()
    a = constrain_position(mapper, 190, 190)
    b = constrain_position(mapper, 150, 80)
    assert a != b


def test_search_boundary_raises_when_nothing_in_reach():
    mapper = oklch_mapper()
    tiny = SearchBudget(radius_fraction=0.01)
    with pytest.raises(SearchExhausted):
        search_boundary(mapper, 200, 90, tiny)


def test_exhausted_search_falls_back_to_center():
    mapper = oklch_mapper()
    tiny = SearchBudget(radius_fraction=0.01)
    assert constrain_position(mapper, 200, 90, tiny) == (SIZE / 2, SIZE / 2)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rays": 0},
        {"iterations": 0},
        {"radius_fraction": 0.0},
        {"tolerance": -1.0},
    ],
)
def test_budget_validation(kwargs):
    with pytest.raises(ValueError):
        SearchBudget(**kwargs)


def test_closest_color_is_in_gamut():
    color = find_closest_in_gamut_color(190, 190, SIZE, GRAY, "OKLCh", "polar", ("c", "h"))
    assert color.in_gamut("srgb")


def test_closest_color_of_in_gamut_pixel_is_the_raw_color():
    color = find_closest_in_gamut_color(100, 100, SIZE, GRAY)
    assert color.coords() == pytest.approx([0.5, 0.5, 0.5])


def p3_hsl_mapper():
    red = Color("display-p3", [1.0, 0.0, 0.0])
    return CanvasMapper(SIZE, red, "Display P3", "polar", None, "sRGB")


@pytest.mark.parametrize("target", [(190, 100), (190, 30)])
def test_p3_hsl_position_moves_onto_the_gamut(target):
    mapper = p3_hsl_mapper()
    tx, ty = target
    assert not mapper.is_in_gamut(mapper.raw_color(tx, ty))

    x, y = constrain_position(mapper, tx, ty)
    assert 0.0 <= x <= SIZE
    assert 0.0 <= y <= SIZE
    assert mapper.is_in_gamut(mapper.raw_color(x, y))
    assert hypot(x - tx, y - ty) < hypot(SIZE / 2 - tx, SIZE / 2 - ty)


def test_p3_hsl_different_targets_give_different_positions():
    mapper = p3_hsl_mapper()
    assert constrain_position(mapper, 190, 100) != constrain_position(mapper, 190, 30)


@pytest.mark.parametrize("make_mapper", [oklch_mapper, p3_hsl_mapper])
def test_constrain_fits_a_drag_event(make_mapper):
    mapper = make_mapper()
    constrain_position(mapper, 190, 190)

    best = float("inf")
    for _ in range(5):
        start = time.perf_counter()
        constrain_position(mapper, 190, 190)
        best = min(best, time.perf_counter() - start)
    assert best < 0.010
