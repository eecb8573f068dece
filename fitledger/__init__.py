"""Personal food, exercise and goals ledger."""

__version__ = "1.0.0"
