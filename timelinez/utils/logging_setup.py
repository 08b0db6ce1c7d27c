# Rev 0.2.1

# timelineZ – logging setup (Rev 0.2.1)
from __future__ import annotations
import logging, os, sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from PySide6.QtCore import qInstallMessageHandler, QtMsgType

from .paths import APP_NAME, logs_dir

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}

_FMT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_HANDLER_NAMES = ("timelinez.file", "timelinez.console")


def _qt_handler(msg_type, context, message):
    logging.getLogger("qt").log(_QT_LEVELS.get(msg_type, logging.INFO), message)


def get_logger(name: str) -> logging.Logger:
    """Namespaced logger, e.g. get_logger("import") -> 'timelinez.import'."""
    return logging.getLogger(f"timelinez.{name}")


def remove_handlers() -> None:
    """Detach and close the handlers a previous setup_logging() installed."""
    root = logging.getLogger()
    for h in list(root.handlers):
        if h.get_name() in _HANDLER_NAMES:
            root.removeHandler(h)
            h.close()


def setup_logging(log_dir: Path | None = None) -> Path:
    # Level via env (DEBUG/INFO/WARNING/ERROR), default INFO
    level_name = os.environ.get("TIMELINEZ_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    log_dir = Path(log_dir) if log_dir is not None else logs_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    logfile = log_dir / "timelineZ.log"

    root = logging.getLogger()
    root.setLevel(level)
    remove_handlers()

    # File: rotate at 5MB, keep 7 backups
    fh = RotatingFileHandler(logfile, maxBytes=5_000_000, backupCount=7, encoding="utf-8")
    fh.set_name("timelinez.file")
    fh.setFormatter(logging.Formatter(_FMT, _DATEFMT))
    fh.setLevel(level)
    root.addHandler(fh)

    # Console on stderr; stdout carries command output only
    ch = logging.StreamHandler(sys.stderr)
    ch.set_name("timelinez.console")
    ch.setFormatter(logging.Formatter(_FMT, _DATEFMT))
    ch.setLevel(level)
    root.addHandler(ch)

    # Uncaught exceptions → log as ERROR
    def _excepthook(exctype, value, tb):
        logging.getLogger("unhandled").exception("Uncaught exception", exc_info=(exctype, value, tb))
        sys.__excepthook__(exctype, value, tb)
    sys.excepthook = _excepthook

    qInstallMessageHandler(_qt_handler)

    logging.getLogger(__name__).info("%s logging initialized at %s; file: %s", APP_NAME, level_name, logfile)
    return logfile
