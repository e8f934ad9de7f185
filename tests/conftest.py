import pytest

import config_loader


def gtk_available():
    try:
        import gi
        gi.require_version("Gtk", "4.0")
        gi.require_version("Gdk", "4.0")
        gi.require_version("Gtk4LayerShell", "1.0")
        from gi.repository import Gtk, Gtk4LayerShell  # noqa: F401
    except (ImportError, ValueError):
        return False
    return True


@pytest.fixture(autouse=True)
def reset_config():
    config_loader.config_data = {}
    yield
    config_loader.config_data = {}


@pytest.fixture
def no_user_config(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    return tmp_path
