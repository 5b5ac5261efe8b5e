"""Version metadata for InventoryTracker."""

__app_name__ = "InventoryTracker"
__version__ = "0.1.0"
