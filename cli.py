import argparse

from config import LAYERS, MODES, NAMESPACE


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog=NAMESPACE,
        description="Transparentes Zeichen-Overlay für Wayland. "
                    "SIGUSR1 wechselt die Ebene, SIGUSR2 schaltet Durchklicken um.",
    )
    parser.add_argument("-c", "--config", help="Pfad zur config.json")
    parser.add_argument("-m", "--mode", choices=MODES, help="Interaktion: Klicken/Halten oder Ziehen")
    parser.add_argument("-s", "--single", action="store_true", default=None,
                        help="nur ein Fenster statt eines pro Monitor")
    parser.add_argument("-o", "--monitor", metavar="CONNECTOR",
                        help="nur den Monitor mit diesem Anschluss abdecken (z.B. DP-1)")
    parser.add_argument("-l", "--layer", choices=LAYERS, help="Start-Ebene der Layer-Shell")
    parser.add_argument("-d", "--debug", action="store_true", default=None, help="Debug-Ausgaben")
    return parser.parse_args(argv)


def overrides(args):
    """Kommandozeilenoptionen als Dict für config_loader.apply_overrides."""
    return {
        "mode": args.mode,
        "single": args.single,
        "monitor": args.monitor,
        "layer": args.layer,
        "debug": args.debug,
    }
