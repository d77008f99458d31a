"""Example: use the service layer directly (no Flask).

Parses a pasted name list into this morning's session of a class, then prints
the monthly per-member report.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.attendance_book.attendance_book.container import build_container

PASTED = """
오전 출석 명단
1. 김민준  2. 이서연
3. 박지훈 (지각)
"""


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    today = date.today()
    result = container.scan_service.ingest("demo", today, "오전", PASTED)
    print(result.to_dict())

    report = container.report_service.individual_stats("demo", today.strftime("%Y-%m"))
    for row in report.rows:
        print(row["name"], row["total"], f"{row['rate']}%")


if __name__ == "__main__":
    main()
