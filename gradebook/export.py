from __future__ import annotations
import pandas as pd
from io import BytesIO
from typing import Optional, Sequence
from .models import Mode, PersonRecord

SHEET_NAME = "Nhận xét"

# (record field, column header) per mode
COLUMNS = {
    Mode.SUBJECT: [
        ("name", "Họ và tên"),
        ("numeric_score", "Điểm TBM"),
        ("categorical_rating", "Xếp loại"),
        ("comment_text", "Nhận xét"),
    ],
    Mode.HOMEROOM: [
        ("name", "Họ và tên"),
        ("academic_result", "KQHT"),
        ("conduct_rating", "KQRL"),
        ("absence_count", "Số buổi nghỉ"),
        ("comment_text", "Nhận xét"),
    ],
}


def records_to_frame(records: Sequence[PersonRecord], mode: Mode | str) -> pd.DataFrame:
    cols = COLUMNS[Mode(mode)]
    rows = []
    for i, r in enumerate(records, start=1):
        row = {"STT": i}
        for attr, header in cols:
            v = getattr(r, attr)
            row[header] = "" if v is None else v
        rows.append(row)
    return pd.DataFrame(rows, columns=["STT"] + [h for _, h in cols])


def export_records_to_excel_bytes(
    records: Sequence[PersonRecord],
    mode: Mode | str,
    subject: Optional[str] = None,
) -> bytes:
    df = records_to_frame(records, mode)
    bio = BytesIO()

    # one title row above the table when the subject is known
    start_row = 1 if subject else 0

    with pd.ExcelWriter(bio, engine="xlsxwriter") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME, startrow=start_row)

        wb = writer.book
        ws = writer.sheets[SHEET_NAME]

        fmt_header = wb.add_format({"bold": True, "bg_color": "#F2F2F2", "border": 1, "valign": "vcenter"})
        fmt_title = wb.add_format({"bold": True, "font_size": 13})
        fmt_wrap = wb.add_format({"text_wrap": True, "valign": "top"})

        if subject:
            ws.write(0, 0, f"Môn: {subject}", fmt_title)

        for col, name in enumerate(df.columns):
            ws.write(start_row, col, name, fmt_header)

        ws.freeze_panes(start_row + 1, 0)
        ws.autofilter(start_row, 0, start_row + max(1, len(df)), max(0, len(df.columns) - 1))

        ws.set_column(0, 0, 6)
        ws.set_column(1, 1, 28)
        last = len(df.columns) - 1
        if last > 2:
            ws.set_column(2, last - 1, 14)
        ws.set_column(last, last, 60, fmt_wrap)

    return bio.getvalue()
