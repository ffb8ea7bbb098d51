class FixedSource:
    """Random source cycling through a fixed list of floats."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def next_float(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


class FailingSource(FixedSource):
    """Like FixedSource but raises on draw number ``fail_at`` (0-based)."""

    def __init__(self, values, fail_at):
        super().__init__(values)
        self.fail_at = fail_at

    def next_float(self):
        if self.calls == self.fail_at:
            self.calls += 1
            raise OSError("entropy pool exhausted")
        return super().next_float()


def hue_distance(a: float, b: float) -> float:
    """Shortest angular distance between two hues in degrees."""
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)
