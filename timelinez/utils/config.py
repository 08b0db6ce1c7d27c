# timelinez/utils/config.py
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .logging_setup import get_logger
from .paths import config_dir, db_path, sheets_dir

DEFAULT_RANGE = "'Timeline'!A:AB"

# env var -> (section, key)
_ENV_OVERRIDES = {
    "TIMELINEZ_SHEET_ID": ("timeline", "sheet_id"),
    "TIMELINEZ_SOURCE_DIR": ("timeline", "source_dir"),
    "TIMELINEZ_DB": ("database", "path"),
}


def _defaults() -> Dict[str, Any]:
    return {
        "timeline": {
            "sheet_id": None,
            "range": DEFAULT_RANGE,
            "source_dir": str(sheets_dir()),
        },
        "database": {
            "path": str(db_path()),
        },
    }


def settings_file() -> Path:
    return config_dir() / "settings.json"


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """Defaults, overlaid by settings.json, overlaid by TIMELINEZ_* env vars."""
    data = _defaults()
    path = Path(path) if path is not None else settings_file()
    if path.exists():
        try:
            stored = json.loads(path.read_text(encoding="utf-8"))
        except ValueError:
            get_logger("config").warning("Ignoring unreadable settings file %s", path)
            stored = {}
        for section, values in stored.items():
            if isinstance(values, dict):
                data.setdefault(section, {}).update(values)
    for var, (section, key) in _ENV_OVERRIDES.items():
        val = os.environ.get(var)
        if val:
            data[section][key] = val
    return data
