"""Filesystem paths and config locations."""

import os
import sys
from pathlib import Path


def _default_config_dir() -> Path:
    """Return the per-user directory for land odds settings."""
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "land_odds"
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    root = Path(xdg_config) if xdg_config else Path.home() / ".config"
    return root / "land_odds"


CONFIG_DIR = _default_config_dir()

SETTINGS_FILE = CONFIG_DIR / "settings.json"
