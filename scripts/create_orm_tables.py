from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from sqlalchemy import create_engine  # noqa: E402

from jobsai.config import is_sqlite_url, settings  # noqa: E402
from jobsai.database import Base, core_tables, mask_db_url  # noqa: E402
import jobsai.models  # noqa: F401,E402  # ensure all models are registered


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Create the job portal tables in the configured DB (EXPLICIT action)."
    )
    parser.add_argument(
        "--db-url",
        default=None,
        help="Target DB URL (defaults to DB_URL from .env/env vars).",
    )
    parser.add_argument(
        "--include-on-demand",
        action="store_true",
        help="Also create saved_searches and candidate_watchlist, which the API otherwise creates on first use.",
    )
    parser.add_argument(
        "--i-understand",
        action="store_true",
        help="Required safety flag. Prevents accidental DDL against shared DBs.",
    )
    args = parser.parse_args(argv)

    if not args.i_understand:
        print("Refusing to run without --i-understand (safety).")
        return 2

    url = args.db_url or settings.db_url
    print("creating tables on:", mask_db_url(url))

    connect_args = {"check_same_thread": False} if is_sqlite_url(url) else {}
    engine = create_engine(url, pool_pre_ping=True, future=True, connect_args=connect_args)
    tables = Base.metadata.sorted_tables if args.include_on_demand else core_tables()
    Base.metadata.create_all(bind=engine, tables=tables)
    print("created:", ", ".join(t.name for t in tables))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
