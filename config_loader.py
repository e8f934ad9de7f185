import copy
import json
import os
import sys

from config import DEFAULT_CONFIG, LAYERS, MODES

# Globale Konfigurationsdaten
config_data = {}


def default_config_path():
    """
    Pfad der Benutzerkonfiguration: $XDG_CONFIG_HOME/wallace/config.json
    (Fallback ~/.config/wallace/config.json).
    """
    base_dir = os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(base_dir, "wallace", "config.json")


def load_config(path=None):
    """
    Lädt die Konfigurationsdatei (JSON) über die Standardwerte und stellt das
    Ergebnis in config_data bereit. Ohne Pfad wird die Benutzerkonfiguration
    verwendet; fehlt diese, gelten nur die Standardwerte.
    """
    global config_data
    explicit = path is not None
    if path is None:
        path = default_config_path()

    merged = copy.deepcopy(DEFAULT_CONFIG)
    if not explicit and not os.path.exists(path):
        config_data = merged
        return config_data

    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise RuntimeError(f"Konfigurationsdatei konnte nicht geladen werden: {e}")
    if not isinstance(loaded, dict):
        raise RuntimeError(f"Konfigurationsdatei {path} enthält kein JSON-Objekt")

    for key, value in loaded.items():
        if key not in DEFAULT_CONFIG:
            print(f"⚠️ Unbekannter Konfigurationsschlüssel ignoriert: {key}", file=sys.stderr)
            continue
        merged[key] = value

    _validate(merged)
    config_data = merged
    return config_data


def get_config():
    """
    Gibt die geladene Konfiguration zurück. Lädt sie bei Bedarf nach.
    """
    if not config_data:
        load_config()
    return config_data


def apply_overrides(overrides):
    """
    Übernimmt Kommandozeilenwerte (None = nicht gesetzt) in config_data.
    """
    cfg = get_config()
    for key, value in overrides.items():
        if value is not None:
            cfg[key] = value
    _validate(cfg)
    return cfg


def _validate(cfg):
    palette = cfg.get("palette")
    if not isinstance(palette, list) or not palette or not all(isinstance(c, str) for c in palette):
        raise RuntimeError("'palette' muss eine nicht-leere Liste von Farben sein")
    for key in ("brush_width", "eraser_width"):
        value = cfg.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise RuntimeError(f"'{key}' muss eine positive Zahl sein")
    offset = cfg.get("stroke_offset")
    if isinstance(offset, bool) or not isinstance(offset, (int, float)):
        raise RuntimeError("'stroke_offset' muss eine Zahl sein")
    if cfg.get("mode") not in MODES:
        raise RuntimeError(f"'mode' muss einer von {', '.join(MODES)} sein")
    if cfg.get("layer") not in LAYERS:
        raise RuntimeError(f"'layer' muss einer von {', '.join(LAYERS)} sein")
    namespace = cfg.get("namespace")
    if not isinstance(namespace, str) or not namespace:
        raise RuntimeError("'namespace' muss ein nicht-leerer Text sein")
    opacity = cfg.get("passthrough_opacity")
    if isinstance(opacity, bool) or not isinstance(opacity, (int, float)) or not 0 <= opacity <= 1:
        raise RuntimeError("'passthrough_opacity' muss eine Zahl zwischen 0 und 1 sein")
    for key in ("single", "debug"):
        if not isinstance(cfg.get(key), bool):
            raise RuntimeError(f"'{key}' muss true oder false sein")
    monitor = cfg.get("monitor")
    if monitor is not None and not isinstance(monitor, str):
        raise RuntimeError("'monitor' muss ein Anschlussname oder null sein")
