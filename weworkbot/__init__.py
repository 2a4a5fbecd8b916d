"""WeWork group-robot alert notifier."""

__version__ = "0.1.0"
