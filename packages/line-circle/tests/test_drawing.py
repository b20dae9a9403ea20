"""Tests for per-node drawing primitives."""

import pytest

from line_circle import ConfigurationError, LineCircleConfig, draw_node, node_geometry

SIZE = 100.0 / 2.9


def test_geometry_divides_width_into_slots(canvas):
    config = LineCircleConfig()
    assert node_geometry(canvas, 0, config) == (100.0, 200.0, pytest.approx(SIZE))
    assert node_geometry(canvas, 4, config)[0] == 500.0


def test_styles_configured(canvas):
    draw_node(canvas, 0, 0.0, LineCircleConfig())
    assert canvas.named("line_width") == [("line_width", pytest.approx(400.0 / 90))]
    assert canvas.named("line_cap") == [("line_cap", "round")]
    assert canvas.named("stroke_style") == [("stroke_style", "#2196F3")]
    assert canvas.named("fill_style") == [("fill_style", "#2196F3")]


def test_at_rest_draws_full_lines_and_no_circle(canvas):
    draw_node(canvas, 0, 0.0, LineCircleConfig())
    lines = canvas.named("line")
    assert len(lines) == 2
    for _, x0, y0, x1, y1 in lines:
        assert (x0, x1) == (0, 0)
        assert y0 == pytest.approx(-SIZE)
        assert y1 == 0
    assert canvas.named("circle") == [("circle", 0, 0, 0.0)]


def test_lanes_are_mirrored(canvas):
    draw_node(canvas, 0, 0.0, LineCircleConfig())
    assert canvas.named("scale") == [("scale", 1, 1), ("scale", 1, -1)]


def test_halfway_lines_gone_circle_not_started(canvas):
    draw_node(canvas, 0, 0.5, LineCircleConfig())
    for _, _x0, y0, _x1, y1 in canvas.named("line"):
        assert y1 == pytest.approx(y0)
    assert canvas.named("circle")[0][3] == 0.0


def test_complete_draws_full_circle(canvas):
    draw_node(canvas, 0, 1.0, LineCircleConfig())
    assert canvas.named("circle")[0][3] == pytest.approx(SIZE / 2)


def test_phase_one_grows_circle(canvas):
    draw_node(canvas, 0, 0.75, LineCircleConfig())
    assert canvas.named("circle")[0][3] == pytest.approx(SIZE / 4)


def test_translates_to_slot_and_restores(canvas):
    draw_node(canvas, 3, 0.3, LineCircleConfig())
    assert canvas.named("translate") == [("translate", 400.0, 200.0)]
    assert canvas.depth == 0


@pytest.mark.parametrize("width, height", [(0, 0), (600, 0), (0, 400), (-10, 400)])
def test_empty_surface_rejected(make_canvas, width, height):
    with pytest.raises(ConfigurationError):
        draw_node(make_canvas(width, height), 0, 0.5, LineCircleConfig())


def test_empty_surface_draws_nothing(make_canvas):
    canvas = make_canvas(0, 0)
    with pytest.raises(ConfigurationError):
        draw_node(canvas, 0, 0.5, LineCircleConfig())
    assert canvas.calls == []
