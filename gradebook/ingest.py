from __future__ import annotations
import csv
import math
from io import BytesIO, StringIO
from typing import Any, List, Optional, Union
import pandas as pd
from openpyxl import load_workbook
from .extract import parse_grid
from .logger import get_logger
from .models import IdFactory, Mode, ParseResult

log = get_logger("ingest")

Source = Union[bytes, bytearray, str]

_XLSX_MAGIC = b"PK\x03\x04"
# =========================

# Excel: first sheet as a raw matrix
# =========================
def _first_sheet_matrix(wb_bytes: bytes) -> List[List[Any]]:
    # merged cells are left as-is: only the top-left cell holds the value,
    # the name-span scan bridges the empty neighbours
    wb = load_workbook(BytesIO(wb_bytes), read_only=True, data_only=True)
    try:
        if not wb.sheetnames:
            return []
        ws = wb[wb.sheetnames[0]]
        rows = []
        for row in ws.iter_rows(values_only=True):
            rows.append(list(row))
        return rows
    finally:
        wb.close()
# =========================

# CSV / pasted tables
# =========================
def _decode(data: bytes) -> str:
    for enc in ("utf-8-sig", "cp1258"):
        try:
            return data.decode(enc)
        except UnicodeDecodeError:
            continue
    return data.decode("utf-8", errors="replace")


def _guess_delimiter(sample_text: str) -> str:
    try:
        dialect = csv.Sniffer().sniff(sample_text, delimiters=";,\t|")
        if dialect.delimiter:
            return dialect.delimiter
    except csv.Error:
        pass

    # fallback: average count per line
    candidates = [",", ";", "\t", "|"]
    lines = [ln for ln in sample_text.splitlines() if ln.strip()][:20]
    if not lines:
        return ","

    scores = {}
    for d in candidates:
        cnts = [ln.count(d) for ln in lines]
        scores[d] = sum(cnts) / max(1, len(cnts))

    best = max(scores.items(), key=lambda x: x[1])[0]
    return best if scores.get(best, 0) > 0 else ","


def _read_csv_bytes(data: bytes) -> pd.DataFrame:
    # header=None: title rows and the header stay in the matrix as ordinary rows
    text = _decode(data)
    delim = _guess_delimiter(text[:65536])

    # title rows are shorter than the table: fix the width up front
    width = max((len(r) for r in csv.reader(StringIO(text), delimiter=delim)), default=0)
    if width == 0:
        return pd.DataFrame()

    return pd.read_csv(
        StringIO(text),
        header=None,
        names=list(range(width)),
        sep=delim,
        engine="python",
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
    )


def _frame_to_rows(df: pd.DataFrame) -> List[List[Any]]:
    rows = []
    for rec in df.itertuples(index=False, name=None):
        row = []
        for v in rec:
            if v is None or (isinstance(v, float) and math.isnan(v)) or (isinstance(v, str) and not v.strip()):
                row.append(None)
            else:
                row.append(v)
        rows.append(row)
    return rows
# =========================

# Main: bytes -> grid
# =========================
def load_grid(data: Source, filename: Optional[str] = None) -> List[List[Any]]:
    """
    Raw grid of the first sheet.
      - .xlsx (by name or zip signature): openpyxl, cached values
      - anything else: delimited text (CSV/TSV, copied tables)
    Raises on unreadable containers; parse_workbook absorbs that.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    data = bytes(data)
    if not data:
        return []

    name = (filename or "").lower()
    if name.endswith((".xlsx", ".xlsm")) or data.startswith(_XLSX_MAGIC):
        return _first_sheet_matrix(data)

    df = _read_csv_bytes(data)
    return _frame_to_rows(df)


def parse_workbook(
    data: Source,
    mode: Mode | str,
    filename: Optional[str] = None,
    make_id: Optional[IdFactory] = None,
) -> ParseResult:
    """
    File upload -> records. Corrupt files, empty workbooks and sheets with no
    student rows all come back as an empty ParseResult.
    """
    mode = Mode(mode)
    try:
        grid = load_grid(data, filename=filename)
    except Exception:
        log.exception("could not read %s", filename or "upload")
        return ParseResult()

    if not grid:
        log.warning("no rows in %s", filename or "upload")
        return ParseResult()

    return parse_grid(grid, mode, make_id=make_id)
