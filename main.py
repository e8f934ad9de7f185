#!/usr/bin/env python3
import sys
from ctypes import CDLL

import gi

# Layer Shell muss vor libwayland geladen werden
try:
    CDLL("libgtk4-layer-shell.so")
except OSError as e:
    print(f"⚠️ LayerShell konnte nicht geladen werden: {e}", file=sys.stderr)

try:
    gi.require_version("Gtk", "4.0")
    gi.require_version("Gtk4LayerShell", "1.0")
except ValueError:
    print("GTK4 oder GtkLayerShell nicht verfügbar. Bitte sicherstellen, dass Gtk 4 und gtk4-layer-shell installiert sind.", file=sys.stderr)
    sys.exit(1)
from gi.repository import Gio, Gtk

# Lokale Modul-Imports
from cli import overrides, parse_args
from config_loader import apply_overrides, load_config
from palette import Palette
from window_manager import OverlayManager


def main(argv=None):
    args = parse_args(argv)
    try:
        config = load_config(args.config)
        config = apply_overrides(overrides(args))
    except RuntimeError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    # Keine application_id: mehrere Overlays dürfen parallel laufen
    app = Gtk.Application(flags=Gio.ApplicationFlags.NON_UNIQUE)
    manager = OverlayManager(app, config, Palette(config["palette"]))
    app.connect_after("activate", manager.build)
    manager.install_signal_handlers()
    # argv wurde bereits ausgewertet, GTK bekommt nur den Programmnamen
    return app.run(sys.argv[:1])


if __name__ == "__main__":
    sys.exit(main())
