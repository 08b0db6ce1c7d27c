# timelineZ application context
# Rev 0.2.0

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .repositories.db import Database
from .services.category_service import CategoryService
from .services.read_model import TimelineReadModel
from .services.timeline_import import TimelineImportService
from .services.timeline_service import TimelineService
from .sources.base import TabularSource
from .sources.csv_source import CsvSheetSource
from .utils.config import load_settings
from .utils.logging_setup import get_logger


@dataclass
class AppContext:
    """Central container for shared app resources."""
    db: Database
    importer: TimelineImportService
    timeline: TimelineService
    categories: CategoryService
    read_model: TimelineReadModel

    @classmethod
    def create(
        cls,
        settings: Optional[Dict[str, Any]] = None,
        *,
        source: Optional[TabularSource] = None,
    ) -> "AppContext":
        """Open + migrate the DB and wire the services."""
        log = get_logger("AppContext")
        settings = settings or load_settings()
        db = Database(Path(settings["database"]["path"]))
        db.run_migrations()
        timeline_cfg = settings["timeline"]
        source = source or CsvSheetSource(timeline_cfg["source_dir"])
        importer = TimelineImportService(
            db,
            source,
            sheet_id=timeline_cfg.get("sheet_id"),
            cell_range=timeline_cfg["range"],
        )
        log.info("AppContext initialized with DB=%s", db.path)
        return cls(
            db=db,
            importer=importer,
            timeline=TimelineService(db),
            categories=CategoryService(db),
            read_model=TimelineReadModel(db),
        )

    def close(self) -> None:
        self.db.close()
