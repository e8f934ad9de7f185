import enum

import cairo

from config import BRUSH_WIDTH, ERASER_WIDTH, STROKE_OFFSET

TRANSPARENT = (1.0, 1.0, 1.0, 0.0)


class PenMode(enum.Enum):
    IDLE = 0
    DRAWING = 1
    ERASING = 2


def parse_color(spec: str) -> tuple[float, float, float, float]:
    """
    Wandelt "#RRGGBB" oder "#RRGGBBAA" in ein RGBA-Tupel (Werte 0..1) um.
    """
    if not isinstance(spec, str) or not spec.startswith("#") or len(spec) not in (7, 9):
        raise ValueError(f"Ungültige Farbe: {spec!r}")
    try:
        channels = [int(spec[i:i + 2], 16) / 255.0 for i in range(1, len(spec), 2)]
    except ValueError:
        raise ValueError(f"Ungültige Farbe: {spec!r}") from None
    if len(channels) == 3:
        channels.append(1.0)
    return tuple(channels)


class StrokeSurface:
    """
    Off-Screen Rasterfläche eines Fensters samt Stiftzustand.
    Striche werden direkt eingebrannt, beim Neuzeichnen wird nur die Fläche
    auf das Widget kopiert.
    """

    def __init__(self, brush_width=BRUSH_WIDTH, eraser_width=ERASER_WIDTH, offset=STROKE_OFFSET):
        self.brush_width = brush_width
        self.eraser_width = eraser_width
        self.offset = offset
        self.surface = None
        self.mode = PenMode.IDLE
        self.prev_x = -1.0
        self.prev_y = -1.0

    @property
    def size(self):
        if self.surface is None:
            return (0, 0)
        return (self.surface.get_width(), self.surface.get_height())

    def resize(self, width: int, height: int) -> bool:
        if width <= 0 or height <= 0:
            return False
        new_surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
        cr = cairo.Context(new_surface)
        if self.surface is not None:
            # Alten Inhalt übernehmen, Überstand wird abgeschnitten
            cr.set_source_surface(self.surface, 0, 0)
            cr.set_operator(cairo.OPERATOR_SOURCE)
            cr.rectangle(0, 0, width, height)
            cr.fill()
            self.surface.finish()
        else:
            _paint_transparent(cr)
        self.surface = new_surface
        return True

    def clear(self) -> bool:
        if self.surface is None:
            return False
        _paint_transparent(cairo.Context(self.surface))
        return True

    def begin(self, x: float, y: float, mode: PenMode, color=None) -> bool:
        self.prev_x = x
        self.prev_y = y
        self.mode = mode
        return self.extend(x, y, color)

    def extend(self, x: float, y: float, color=None) -> bool:
        if self.mode is PenMode.IDLE or self.surface is None:
            return False
        if self.mode is PenMode.ERASING:
            self._segment(x, y, self.eraser_width, TRANSPARENT, cairo.OPERATOR_SOURCE)
        else:
            self._segment(x, y, self.brush_width, color or (0.0, 0.0, 0.0, 1.0), cairo.OPERATOR_OVER)
        self.prev_x = x
        self.prev_y = y
        return True

    def end(self):
        self.mode = PenMode.IDLE

    def paint_onto(self, cr: cairo.Context):
        if self.surface is None:
            return
        cr.set_source_surface(self.surface, 0, 0)
        cr.paint()

    def _segment(self, x, y, width, rgba, operator):
        cr = cairo.Context(self.surface)
        cr.move_to(self.prev_x + self.offset, self.prev_y + self.offset)
        cr.line_to(x + self.offset, y + self.offset)
        cr.set_line_width(width)
        cr.set_line_cap(cairo.LINE_CAP_ROUND)
        cr.set_operator(operator)
        cr.set_source_rgba(*rgba)
        cr.stroke()


def _paint_transparent(cr):
    cr.set_source_rgba(*TRANSPARENT)
    cr.set_operator(cairo.OPERATOR_SOURCE)
    cr.paint()
