# Rev 0.2.1

"""Paths and XDG helpers (Rev 0.2.1)
- Uses XDG Base Directory spec, resolved at call time so env changes apply
- Logs/state/config and the DB live under XDG dirs
- SQL migrations ship inside the package (timelinez/migrations)
"""
from __future__ import annotations
import os
from pathlib import Path


APP_NAME = "timelineZ"


PACKAGE_ROOT = Path(__file__).resolve().parents[1]
MIGRATIONS_DIR = (PACKAGE_ROOT / "migrations").resolve()


def _xdg(var: str, *fallback: str) -> Path:
    return Path(os.environ.get(var) or Path.home().joinpath(*fallback)) / APP_NAME


def data_dir() -> Path:
    return _xdg("XDG_DATA_HOME", ".local", "share")


def state_dir() -> Path:
    return _xdg("XDG_STATE_HOME", ".local", "state")


def logs_dir() -> Path:
    return state_dir() / "logs"


def db_path() -> Path:
    return data_dir() / "timelineZ.db"


def sheets_dir() -> Path:
    # CSV exports of the timeline sheet, one file per sheet id
    return data_dir() / "sheets"


def config_dir() -> Path:
    path = _xdg("XDG_CONFIG_HOME", ".config")
    path.mkdir(parents=True, exist_ok=True)
    return path
