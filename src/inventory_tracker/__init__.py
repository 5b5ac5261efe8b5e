"""Inventory and rental tracking over a single JSON datastore."""

from inventory_tracker.version import __app_name__, __version__

__all__ = ["__app_name__", "__version__"]
