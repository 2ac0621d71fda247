"""Shared test helpers for IslandXP."""


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def default_curve_kwargs(**overrides) -> dict:
    """Keyword arguments for ``build_xp_table`` with the shipped constants."""
    kwargs = dict(
        max_level=399,
        midpoint_level=320,
        midpoint_xp=50_000_000,
        cap_xp=100_000_000,
        base_a=83.0,
        growth_a=1.0175,
        base_b=83.0,
        growth_b=1.03,
    )
    kwargs.update(overrides)
    return kwargs
