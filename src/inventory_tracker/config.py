"""Application configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from inventory_tracker.version import __app_name__

APP_NAME = __app_name__
APP_DATA_DIRNAME = "InventoryTracker"
INVENTORY_FILENAME = "inventory.json"
LOGS_DIRNAME = "logs"
LOG_FILENAME = "app.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3

HOME_ENV_VAR = "INVENTORY_TRACKER_HOME"
DATA_FILE_ENV_VAR = "INVENTORY_TRACKER_DATA_FILE"


@dataclass(frozen=True)
class AppConfig:
    """Runtime configuration values for InventoryTracker."""

    data_path: Path
    log_dir: Optional[Path] = None
    app_name: str = APP_NAME
