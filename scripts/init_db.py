"""Create the timecard database and apply database/schema.sql.

    python scripts/init_db.py [--seed]
"""
from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.timecard_system.timecard_system.database.bootstrap import apply_schema, apply_seed_sql, list_tables
from src.timecard_system.timecard_system.logging_utils import setup_logging

DATABASE_DIR = REPO_ROOT / "database"


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--seed", action="store_true", help="also load database/seed.sql (demo employees)")
    args = parser.parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
    if args.seed:
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")

    tables = sorted(list_tables(db_config))
    print(f"OK: {db_config.get('database')} on {db_config.get('host')} -> {', '.join(tables)}")


if __name__ == "__main__":
    main()
