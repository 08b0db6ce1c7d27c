# File: timelinez/cli.py
# Usage examples:
#   timelinez migrate
#   timelinez import --sheet-id 1AbC...
#   timelinez show --json
#   timelinez rename-category "Finishes" "Finish Work"
#   timelinez delete-category "Demo"
#
# Notes:
# - DB path defaults to env TIMELINEZ_DB or the XDG data dir
# - Sheet exports are read from TIMELINEZ_SOURCE_DIR/<sheet id>.csv

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

from timelinez.app_context import AppContext
from timelinez.errors import TimelineError
from timelinez.utils.config import load_settings
from timelinez.utils.logging_setup import setup_logging


def cmd_migrate(ctx: AppContext, args: argparse.Namespace) -> int:
    # AppContext.create already applied pending migrations
    print(f"DB: {ctx.db.path}")
    for name in sorted(ctx.db.applied()):
        print(f"  ✔ {name}")
    return 0


def cmd_import(ctx: AppContext, args: argparse.Namespace) -> int:
    summary = ctx.importer.import_timeline(args.sheet_id)
    print(summary.message)
    return 0


def cmd_show(ctx: AppContext, args: argparse.Namespace) -> int:
    view = ctx.read_model.load()
    if args.json:
        print(json.dumps(view.to_dict(), indent=2))
        return 0
    print(f"Weeks: {view.week_dates[0]} .. {view.week_dates[-1]} ({len(view.week_dates)} columns)")
    for category, tasks in view.categories.items():
        print(f"{category}")
        for t in tasks:
            print(f"  [{t.id}] {t.task}")
            for e in view.events_by_task.get(t.id, []):
                span = e.start_date if e.start_date == e.end_date else f"{e.start_date} → {e.end_date}"
                print(f"        {span}  {e.label}")
    return 0


def cmd_rename_category(ctx: AppContext, args: argparse.Namespace) -> int:
    count = ctx.categories.rename(args.old, args.new)
    print(f"Renamed {count} tasks from {args.old!r} to {args.new!r}")
    return 0


def cmd_delete_category(ctx: AppContext, args: argparse.Namespace) -> int:
    count = ctx.categories.delete(args.name)
    print(f"Deleted {count} tasks in {args.name!r}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="timelinez", description="Timeline sheet import and schedule store")
    p.add_argument("--db", help="SQLite DB path (overrides settings / TIMELINEZ_DB)")
    p.add_argument("--source-dir", help="Directory holding <sheet id>.csv exports")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("migrate", help="Apply pending migrations and list applied ones")
    sp.set_defaults(func=cmd_migrate)

    sp = sub.add_parser("import", help="Replace the stored timeline with the sheet's contents")
    sp.add_argument("--sheet-id", help="Sheet id (overrides TIMELINEZ_SHEET_ID)")
    sp.set_defaults(func=cmd_import)

    sp = sub.add_parser("show", help="Print the timeline read model")
    sp.add_argument("--json", action="store_true", help="Emit the full read model as JSON")
    sp.set_defaults(func=cmd_show)

    sp = sub.add_parser("rename-category", help="Rename a category across all its tasks")
    sp.add_argument("old")
    sp.add_argument("new")
    sp.set_defaults(func=cmd_rename_category)

    sp = sub.add_parser("delete-category", help="Delete a category with its tasks and events")
    sp.add_argument("name")
    sp.set_defaults(func=cmd_delete_category)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    settings = load_settings()
    if args.db:
        settings["database"]["path"] = args.db
    if args.source_dir:
        settings["timeline"]["source_dir"] = args.source_dir

    ctx = AppContext.create(settings)
    try:
        return args.func(ctx, args)
    except TimelineError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    finally:
        ctx.close()


if __name__ == "__main__":
    raise SystemExit(main())
