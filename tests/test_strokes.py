import cairo
import pytest

from strokes import PenMode, StrokeSurface, parse_color


def pixel(surface, x, y):
    """(b, g, r, a) eines ARGB32-Pixels (little endian)."""
    surface.flush()
    data = surface.get_data()
    offset = y * surface.get_stride() + x * 4
    return tuple(data[offset:offset + 4])


@pytest.fixture
def strokes():
    s = StrokeSurface()
    s.resize(100, 80)
    return s


RED = (1.0, 0.0, 0.0, 1.0)


def test_parse_color_rgb():
    assert parse_color("#FF0000") == (1.0, 0.0, 0.0, 1.0)


def test_parse_color_with_alpha():
    r, g, b, a = parse_color("#00FF0080")
    assert (r, g, b) == (0.0, 1.0, 0.0)
    assert a == pytest.approx(128 / 255)


@pytest.mark.parametrize("spec", ["red", "#FFF", "#GG0000", "", None])
def test_parse_color_rejects_invalid(spec):
    with pytest.raises(ValueError):
        parse_color(spec)


def test_new_surface_is_transparent(strokes):
    assert strokes.size == (100, 80)
    assert pixel(strokes.surface, 50, 40)[3] == 0


def test_drawing_without_surface_is_noop():
    s = StrokeSurface()
    assert s.begin(10, 10, PenMode.DRAWING, RED) is False
    assert s.clear() is False


def test_begin_draws_dot_with_offset(strokes):
    assert strokes.begin(10, 10, PenMode.DRAWING, RED)
    # Punkt sitzt um +2 px versetzt
    b, g, r, a = pixel(strokes.surface, 12, 12)
    assert a == 255 and r == 255 and g == 0 and b == 0
    assert pixel(strokes.surface, 5, 5)[3] == 0


def test_extend_draws_segment(strokes):
    strokes.begin(10, 20, PenMode.DRAWING, RED)
    assert strokes.extend(60, 20, RED)
    assert pixel(strokes.surface, 40, 22)[3] == 255
    assert (strokes.prev_x, strokes.prev_y) == (60, 20)


def test_extend_when_idle_does_nothing(strokes):
    assert strokes.extend(60, 20, RED) is False
    assert pixel(strokes.surface, 62, 22)[3] == 0


def test_end_stops_stroke(strokes):
    strokes.begin(10, 20, PenMode.DRAWING, RED)
    strokes.end()
    assert strokes.mode is PenMode.IDLE
    assert strokes.extend(60, 20, RED) is False


def test_eraser_clears_wide_area(strokes):
    cr = cairo.Context(strokes.surface)
    cr.set_source_rgba(0, 0, 1, 1)
    cr.paint()
    strokes.begin(50, 40, PenMode.ERASING)
    # Radius 30 um (52, 42)
    assert pixel(strokes.surface, 52, 42)[3] == 0
    assert pixel(strokes.surface, 75, 42)[3] == 0
    assert pixel(strokes.surface, 99, 79)[3] == 255


def test_clear_makes_everything_transparent(strokes):
    strokes.begin(10, 10, PenMode.DRAWING, RED)
    strokes.end()
    assert strokes.clear()
    assert pixel(strokes.surface, 12, 12)[3] == 0


def test_resize_keeps_content(strokes):
    strokes.begin(10, 10, PenMode.DRAWING, RED)
    strokes.end()
    strokes.resize(200, 150)
    assert strokes.size == (200, 150)
    assert pixel(strokes.surface, 12, 12)[3] == 255
    assert pixel(strokes.surface, 150, 120)[3] == 0


def test_resize_ignores_empty_size(strokes):
    old = strokes.surface
    assert strokes.resize(0, 50) is False
    assert strokes.surface is old


def test_paint_onto_composites(strokes):
    strokes.begin(10, 10, PenMode.DRAWING, RED)
    target = cairo.ImageSurface(cairo.FORMAT_ARGB32, 100, 80)
    strokes.paint_onto(cairo.Context(target))
    assert pixel(target, 12, 12)[3] == 255
