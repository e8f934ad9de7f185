import signal
import sys

import gi
gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")
gi.require_version("Gtk4LayerShell", "1.0")
from gi.repository import Gtk, Gdk, GLib, Gtk4LayerShell as LayerShell

from config import CSS, CURSOR_DEFAULT, PASSTHROUGH_OPACITY
from widgets.overlay_window import OverlayWindow


def get_monitors(display=None, connector=None):
    """
    Liefert alle Monitore des Displays, optional gefiltert nach Anschlussname
    (z.B. "DP-1").
    """
    display = display or Gdk.Display.get_default()
    if display is None:
        return []
    model = display.get_monitors()
    monitors = [model.get_item(i) for i in range(model.get_n_items())]
    if connector:
        monitors = [m for m in monitors if m.get_connector() == connector]
    return monitors


class OverlayManager:
    """
    Hält alle Overlay-Fenster eines Prozesses und setzt die per Signal
    ausgelösten Zustandswechsel auf allen gleichzeitig um.
    """

    def __init__(self, app, config, palette):
        self.app = app
        self.config = config
        self.palette = palette
        self.windows = []
        self.passthrough = False
        self.layer_shell = False

    def _debug(self, message):
        if self.config.get("debug"):
            print(f"[Debug] {message}", file=sys.stderr)

    def build(self, app=None):
        """activate-Callback: CSS laden und ein Fenster pro Monitor erzeugen."""
        if self.windows:
            # Zweite Aktivierung (z.B. erneuter Start): vorhandene Fenster zeigen
            for window in self.windows:
                window.present()
            return

        self.layer_shell = LayerShell.is_supported()
        if not self.layer_shell:
            print("⚠️ Layer-Shell wird vom Compositor nicht unterstützt, nur ein normales Fenster.",
                  file=sys.stderr)
        self._load_css()

        connector = self.config.get("monitor")
        monitors = get_monitors(connector=connector)
        if not monitors:
            if connector:
                print(f"❌ Kein Monitor mit Anschluss {connector} gefunden.", file=sys.stderr)
            else:
                print("❌ Keine Monitore gefunden.", file=sys.stderr)
            self.quit()
            return

        if self.config.get("single") or not self.layer_shell:
            monitors = monitors[:1]

        for monitor in monitors:
            window = OverlayWindow(
                self.app,
                manager=self,
                palette=self.palette,
                config=self.config,
                monitor=monitor,
                layer_shell=self.layer_shell,
            )
            window.present()
            # Einmal aus- und einblenden, damit die Layer-Shell Größe übernimmt
            window.set_visible(False)
            window.set_visible(True)
            window.set_cursor_from_name(CURSOR_DEFAULT)
            self.windows.append(window)
            self._debug(f"Overlay erstellt für {monitor.get_connector() or 'unbekannt'}")

    def _load_css(self):
        css = Gtk.CssProvider()
        opacity = self.config.get("passthrough_opacity", PASSTHROUGH_OPACITY)
        css.connect("parsing-error", self.on_css_error)
        css.load_from_string(CSS % {"opacity": opacity})
        display = Gdk.Display.get_default()
        if display is not None:
            Gtk.StyleContext.add_provider_for_display(display, css, Gtk.STYLE_PROVIDER_PRIORITY_USER)

    def on_css_error(self, provider, section, error):
        print(f"⚠️ Fehler beim Laden der CSS-Styles: {error.message}", file=sys.stderr)

    def set_cursor(self, name):
        for window in self.windows:
            window.set_cursor_from_name(name)

    def toggle_layer(self):
        if not self.layer_shell:
            print("⚠️ Ebenenwechsel ohne Layer-Shell nicht möglich.", file=sys.stderr)
            return
        for window in self.windows:
            layer = window.toggle_layer()
            self._debug(f"Ebene gewechselt: {layer}")

    def toggle_passthrough(self):
        if not self.layer_shell:
            print("⚠️ Durchklicken ohne Layer-Shell nicht möglich.", file=sys.stderr)
            return
        # Ein Zustand für alle Fenster
        self.passthrough = not self.passthrough
        for window in self.windows:
            window.set_passthrough(self.passthrough)
        self._debug(f"Durchklicken: {'an' if self.passthrough else 'aus'}")

    def quit(self):
        self.app.quit()

    def _on_signal(self, signum):
        if signum == signal.SIGUSR1:
            self.toggle_layer()
        elif signum == signal.SIGUSR2:
            self.toggle_passthrough()
        else:
            self.quit()
        return GLib.SOURCE_CONTINUE

    def install_signal_handlers(self):
        """
        SIGUSR1: Ebene wechseln, SIGUSR2: Durchklicken umschalten,
        SIGTERM/SIGINT: beenden. Läuft im GLib-Mainloop, nicht im Signal-Kontext.
        """
        for signum in (signal.SIGUSR1, signal.SIGUSR2, signal.SIGTERM, signal.SIGINT):
            GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, signum, self._on_signal, signum)
