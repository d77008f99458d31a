from __future__ import annotations

import csv
import io

import pandas as pd

from ..core.constants import TIME_SLOTS
from ..core.enums import ReportView
from .service import TOTAL_KEY, MonthlyReport

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _columns(view: ReportView) -> list[str]:
    if view == ReportView.DAILY:
        return ["날짜", *TIME_SLOTS, TOTAL_KEY]
    return ["이름", "구분", *TIME_SLOTS, TOTAL_KEY, "출석률(%)"]


def flatten_rows(report: MonthlyReport) -> list[dict]:
    """Report rows shaped as one flat dict per sheet line."""

    out = []
    for r in report.rows:
        if report.view == ReportView.DAILY:
            out.append({"날짜": r["date"], **{slot: r[slot] for slot in TIME_SLOTS}, TOTAL_KEY: r[TOTAL_KEY]})
        else:
            out.append(
                {
                    "이름": r["name"],
                    "구분": r["group"],
                    **{slot: r["slot_counts"][slot] for slot in TIME_SLOTS},
                    TOTAL_KEY: r["total"],
                    "출석률(%)": r["rate"],
                }
            )
    return out


def export_filename(report: MonthlyReport, ext: str) -> str:
    return f"attendance_{report.view.value}_{report.month.replace('-', '')}.{ext}"


def to_csv_bytes(report: MonthlyReport) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=_columns(report.view))
    writer.writeheader()
    for row in flatten_rows(report):
        writer.writerow(row)
    # BOM so Excel opens Hangul correctly.
    return out.getvalue().encode("utf-8-sig")


def to_xlsx_bytes(report: MonthlyReport) -> bytes:
    df = pd.DataFrame(flatten_rows(report), columns=_columns(report.view))
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=report.month)
    return out.getvalue()
