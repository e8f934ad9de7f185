import sys

import gi
gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from config import BRUSH_WIDTH, ERASER_WIDTH, STROKE_OFFSET
from strokes import PenMode, StrokeSurface, parse_color


class Canvas(Gtk.DrawingArea):
    def __init__(self, palette, config=None):
        super().__init__()
        self.palette = palette
        self.config = config or {}
        self.strokes = StrokeSurface(
            brush_width=self.config.get("brush_width", BRUSH_WIDTH),
            eraser_width=self.config.get("eraser_width", ERASER_WIDTH),
            offset=self.config.get("stroke_offset", STROKE_OFFSET),
        )
        self._bad_colors = set()

        # Eingaben kommen über die Controller des Fensters
        self.set_can_target(False)
        self.set_hexpand(True)
        self.set_vexpand(True)
        self.set_draw_func(self.on_draw)
        self.connect_after("resize", self.on_resize)

    def on_draw(self, area, cr, width, height):
        self.strokes.paint_onto(cr)

    def on_resize(self, area, width, height):
        # Erst sobald ein natives Surface existiert
        native = self.get_native()
        if native is None or native.get_surface() is None:
            return
        if self.strokes.resize(width, height) and self.config.get("debug"):
            print(f"[Debug] Zeichenfläche {width}x{height}", file=sys.stderr)

    def current_rgba(self):
        spec = self.palette.current
        try:
            return parse_color(spec)
        except ValueError:
            if spec not in self._bad_colors:
                self._bad_colors.add(spec)
                print(f"⚠️ Ungültige Farbe {spec!r}, verwende Weiß", file=sys.stderr)
            return (1.0, 1.0, 1.0, 1.0)

    def press(self, x, y, erase=False):
        mode = PenMode.ERASING if erase else PenMode.DRAWING
        if self.strokes.begin(x, y, mode, self.current_rgba()):
            self.queue_draw()

    def motion(self, x, y):
        if self.strokes.mode is PenMode.IDLE:
            return
        if self.strokes.extend(x, y, self.current_rgba()):
            self.queue_draw()

    def release(self):
        self.strokes.end()

    def clear(self):
        if self.strokes.clear():
            self.queue_draw()
