from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_book.attendance_book.database.bootstrap import (
    DEMO_CLASS_ID,
    apply_seed_sql,
    ensure_demo_members,
)


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed demo roster and sessions")
    parser.add_argument("--class-id", default=DEMO_CLASS_ID)
    parser.add_argument("--members-only", action="store_true", help="skip database/seed.sql")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    added = ensure_demo_members(db_config, class_id=args.class_id)
    if not args.members_only:
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")

    print(
        f"OK: Seeded class '{args.class_id}' (+{added} members) -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
