class Palette:
    """Feste Farbliste mit umlaufendem Index, gemeinsam für alle Fenster."""

    def __init__(self, colors, index=0):
        if not colors:
            raise ValueError("Palette braucht mindestens eine Farbe")
        self.colors = list(colors)
        self.index = index % len(self.colors)

    @property
    def current(self) -> str:
        return self.colors[self.index]

    def select(self, index: int) -> str:
        self.index = index % len(self.colors)
        return self.current

    def scroll(self, dy: float) -> str:
        # Hochscrollen (dy < 0) = nächste Farbe, runter = vorherige
        if dy < 0:
            return self.select(self.index + 1)
        if dy > 0:
            return self.select(self.index - 1)
        return self.current

    def __len__(self):
        return len(self.colors)
