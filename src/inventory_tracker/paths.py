"""Filesystem paths for InventoryTracker."""

from __future__ import annotations

import os
from pathlib import Path

from inventory_tracker.config import (
    APP_DATA_DIRNAME,
    DATA_FILE_ENV_VAR,
    HOME_ENV_VAR,
    INVENTORY_FILENAME,
    LOGS_DIRNAME,
)


def _ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_app_data_dir() -> Path:
    """Create and return the app data directory for the current user."""
    home = os.getenv(HOME_ENV_VAR)
    if home:
        base_dir = Path(home)
    else:
        base_dir = Path.home() / ".inventory_tracker"
    return _ensure_dir(base_dir / APP_DATA_DIRNAME)


def get_inventory_path() -> Path:
    """Return the path to the inventory JSON document."""
    override = os.getenv(DATA_FILE_ENV_VAR)
    if override:
        return Path(override)
    return get_app_data_dir() / INVENTORY_FILENAME


def get_logs_dir() -> Path:
    """Create and return the log directory inside the app data folder."""
    return _ensure_dir(get_app_data_dir() / LOGS_DIRNAME)
