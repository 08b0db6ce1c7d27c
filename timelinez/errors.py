# Rev 0.2.0
"""Error taxonomy for timeline import and CRUD.

ParseSkip is deliberately absent: unparseable headers and rows are
reported as ``None`` / skipped by the parser, never raised.
"""
from __future__ import annotations

from typing import Any


class TimelineError(Exception):
    """Base for errors a caller is expected to surface to the user."""


class ConfigurationError(TimelineError):
    """The timeline source is not configured (e.g. no sheet id)."""


class SourceDataError(TimelineError):
    """The tabular source returned too few rows or an unreadable shape."""


class ValidationError(TimelineError):
    """Client-correctable bad input on a CRUD call."""


class NotFound(TimelineError):
    def __init__(self, entity: str, key: Any):
        self.entity = entity
        self.key = key
        super().__init__(f"No {entity} found with {'name' if isinstance(key, str) else 'id'} {key!r}")
