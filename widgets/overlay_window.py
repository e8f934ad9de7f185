import sys

import cairo
import gi
gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")
gi.require_version("Gtk4LayerShell", "1.0")
from gi.repository import Gtk, Gdk, Gtk4LayerShell as LayerShell

from config import CURSOR_DEFAULT, CURSOR_ERASE, NAMESPACE
from widgets.canvas import Canvas

LAYER_MAP = {
    "overlay": LayerShell.Layer.OVERLAY,
    "top": LayerShell.Layer.TOP,
    "bottom": LayerShell.Layer.BOTTOM,
    "background": LayerShell.Layer.BACKGROUND,
}


class OverlayWindow(Gtk.ApplicationWindow):
    """
    Randloses, transparentes Fenster über einem Monitor mit einer Zeichenfläche.
    Cursor-Wechsel und Beenden laufen über den OverlayManager, damit alle
    Monitore gleich reagieren.
    """

    def __init__(self, app, manager, palette, config, monitor=None, layer_shell=True):
        super().__init__(application=app)
        self.manager = manager
        self.palette = palette
        self.config = config
        self.monitor = monitor
        self.layer_shell = layer_shell
        self.passthrough = False

        namespace = config.get("namespace", NAMESPACE)
        self.set_title(namespace)
        self.set_decorated(False)  # Kein Fensterdekor, reines Overlay

        if layer_shell:
            LayerShell.init_for_window(self)
            LayerShell.set_namespace(self, namespace)
            if monitor is not None:
                LayerShell.set_monitor(self, monitor)
            LayerShell.set_layer(self, LAYER_MAP[config.get("layer", "overlay")])
            LayerShell.set_anchor(self, LayerShell.Edge.LEFT, True)
            LayerShell.set_anchor(self, LayerShell.Edge.TOP, True)
            LayerShell.set_keyboard_mode(self, LayerShell.KeyboardMode.ON_DEMAND)
        if monitor is not None:
            geometry = monitor.get_geometry()
            self.set_default_size(geometry.width, geometry.height)

        self.canvas = Canvas(palette, config)
        self.set_child(self.canvas)
        self.canvas.set_cursor_from_name(CURSOR_DEFAULT)

        if config.get("mode", "click") == "drag":
            self._setup_drag_controllers()
        else:
            self._setup_click_controllers()

        scroll = Gtk.EventControllerScroll.new(Gtk.EventControllerScrollFlags.BOTH_AXES)
        scroll.connect("scroll", self.on_scroll)
        self.add_controller(scroll)

        keys = Gtk.EventControllerKey()
        keys.connect("key-pressed", self.on_key_pressed)
        self.add_controller(keys)

        self.connect_after("realize", self.on_realize)

    # ─── Controller ────────────────────────────────────────────────────────────

    def _click_gesture(self, button, pressed, released=None):
        gesture = Gtk.GestureClick()
        gesture.set_button(button)
        gesture.connect("pressed", pressed)
        if released is not None:
            gesture.connect("released", released)
        self.add_controller(gesture)
        return gesture

    def _setup_click_controllers(self):
        # Klicken & Halten: Drücken startet, Bewegung zeichnet, Loslassen beendet
        self._click_gesture(Gdk.BUTTON_PRIMARY, self.on_draw_pressed, self.on_draw_released)
        self._click_gesture(Gdk.BUTTON_SECONDARY, self.on_erase_pressed, self.on_erase_released)
        self._click_gesture(Gdk.BUTTON_MIDDLE, self.on_clear_pressed)

        motion = Gtk.EventControllerMotion()
        motion.connect_after("motion", self.on_motion)
        self.add_controller(motion)

    def _setup_drag_controllers(self):
        for button, erase in ((Gdk.BUTTON_PRIMARY, False), (Gdk.BUTTON_SECONDARY, True)):
            drag = Gtk.GestureDrag()
            drag.set_button(button)
            drag.connect("drag-begin", self.on_drag_begin, erase)
            drag.connect("drag-update", self.on_drag_update)
            drag.connect("drag-end", self.on_drag_end, erase)
            self.add_controller(drag)
        self._click_gesture(Gdk.BUTTON_MIDDLE, self.on_clear_pressed)

    # ─── Klicken & Halten ──────────────────────────────────────────────────────

    def on_draw_pressed(self, gesture, n_press, x, y):
        self.canvas.press(x, y)

    def on_draw_released(self, gesture, n_press, x, y):
        self.canvas.release()

    def on_erase_pressed(self, gesture, n_press, x, y):
        self.canvas.press(x, y, erase=True)
        self.manager.set_cursor(CURSOR_ERASE)

    def on_erase_released(self, gesture, n_press, x, y):
        self.canvas.release()
        self.manager.set_cursor(CURSOR_DEFAULT)

    def on_clear_pressed(self, gesture, n_press, x, y):
        self.canvas.clear()

    def on_motion(self, controller, x, y):
        self.canvas.motion(x, y)

    # ─── Ziehen ────────────────────────────────────────────────────────────────

    def on_drag_begin(self, gesture, start_x, start_y, erase):
        self.canvas.press(start_x, start_y, erase=erase)
        if erase:
            self.manager.set_cursor(CURSOR_ERASE)

    def on_drag_update(self, gesture, offset_x, offset_y):
        ok, start_x, start_y = gesture.get_start_point()
        if ok:
            self.canvas.motion(start_x + offset_x, start_y + offset_y)

    def on_drag_end(self, gesture, offset_x, offset_y, erase):
        self.canvas.release()
        if erase:
            self.manager.set_cursor(CURSOR_DEFAULT)

    # ─── Sonstiges ─────────────────────────────────────────────────────────────

    def on_scroll(self, controller, dx, dy):
        color = self.palette.scroll(dy)
        if self.config.get("debug"):
            print(f"[Debug] Farbe: {color}", file=sys.stderr)
        return True

    def on_key_pressed(self, controller, keyval, keycode, state):
        if keyval == Gdk.KEY_Escape:
            self.manager.quit()
            return True
        return False

    def on_realize(self, window):
        # Gesamte Fläche nimmt wieder Eingaben an
        surface = self.get_surface()
        if surface is not None:
            surface.set_input_region(self._full_region())

    def _full_region(self):
        width, height = self.get_width(), self.get_height()
        if self.monitor is not None:
            geometry = self.monitor.get_geometry()
            width, height = max(width, geometry.width), max(height, geometry.height)
        if width <= 0 or height <= 0:
            width, height = self.get_default_size()
        return cairo.Region(cairo.RectangleInt(0, 0, max(width, 1), max(height, 1)))

    # ─── Zustandswechsel (Signale) ─────────────────────────────────────────────

    def set_passthrough(self, enabled: bool):
        surface = self.get_surface()
        if surface is not None:
            surface.set_input_region(cairo.Region() if enabled else self._full_region())
        if enabled:
            self.add_css_class("pass")
        else:
            self.remove_css_class("pass")
        self.passthrough = enabled
        # Neu anzeigen, damit der Compositor die Eingaberegion übernimmt
        self.set_visible(False)
        self.set_visible(True)

    def toggle_layer(self):
        if LayerShell.get_layer(self) == LayerShell.Layer.BOTTOM:
            LayerShell.set_keyboard_mode(self, LayerShell.KeyboardMode.ON_DEMAND)
            LayerShell.set_layer(self, LayerShell.Layer.OVERLAY)
        else:
            LayerShell.set_keyboard_mode(self, LayerShell.KeyboardMode.NONE)
            LayerShell.set_layer(self, LayerShell.Layer.BOTTOM)
        return LayerShell.get_layer(self)
