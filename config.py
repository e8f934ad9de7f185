# config.py

# Farbpalette (Scrollrad wechselt durch die Liste)
PALETTE = [
    "#E40303",
    "#FF8C00",
    "#FFED00",
    "#008026",
    "#24408E",
    "#732982",
]

# ─── Pinsel ────────────────────────────────────────────────────────────────────
BRUSH_WIDTH   = 4.0    # Linienbreite beim Zeichnen
ERASER_WIDTH  = 60.0   # Linienbreite des Radiergummis
STROKE_OFFSET = 2.0    # Versatz zum Hotspot des Fadenkreuz-Cursors
# ────────────────────────────────────────────────────────────────────────────────

NAMESPACE           = "wallace"   # Layer-Shell Namespace und Fenstertitel
PASSTHROUGH_OPACITY = 0.33

CURSOR_DEFAULT = "crosshair"
CURSOR_ERASE   = "not-allowed"

MODES  = ("click", "drag")
LAYERS = ("overlay", "top", "bottom", "background")

# Standardwerte, solange keine config.json existiert
DEFAULT_CONFIG = {
    "palette": PALETTE,
    "brush_width": BRUSH_WIDTH,
    "eraser_width": ERASER_WIDTH,
    "stroke_offset": STROKE_OFFSET,
    "passthrough_opacity": PASSTHROUGH_OPACITY,
    "namespace": NAMESPACE,
    "mode": "click",
    "single": False,
    "monitor": None,
    "layer": "overlay",
    "debug": False,
}

CSS = """
window { background: rgba(0, 0, 0, 0); }
window.pass { opacity: %(opacity)s; }
* { margin: 0; padding: 0; border: none; border-radius: 0; }
"""
