from __future__ import annotations
from typing import Any, Optional, Sequence
from .fields import extract_fields
from .filters import reject_reason
from .logger import get_logger
from .models import IdFactory, Mode, ParseResult, PersonRecord, make_id_factory
from .names import partition_row
from .subject import detect_subject
from .utils import is_empty

log = get_logger("extract")


def parse_row(row: Sequence[Any], mode: Mode, make_id: IdFactory) -> Optional[PersonRecord]:
    """
    One grid row -> record, or None for headers/footers/noise.
    Pipeline: name span -> name filter -> trailing fields -> STT/data gate.
    """
    part = partition_row(row)
    name = part.full_name
    if not name:
        return None

    reason = reject_reason(name)
    if reason:
        log.debug("row rejected (%s): %r", reason, name)
        return None

    fields = extract_fields(part.remainder, mode)
    # no STT and nothing to comment on: title/signature lines, notes
    if not part.has_index and not fields.has_data(mode):
        log.debug("row without index or data: %r", name)
        return None

    return PersonRecord(
        id=make_id(),
        name=name,
        numeric_score=fields.numeric_score,
        categorical_rating=fields.categorical_rating,
        academic_result=fields.academic_result,
        conduct_rating=fields.conduct_rating,
        absence_count=fields.absence_count,
    )


def parse_grid(
    grid: Sequence[Any],
    mode: Mode | str,
    make_id: Optional[IdFactory] = None,
) -> ParseResult:
    """
    Heuristic extraction from a raw sheet (list of rows, no known header).
    Returns an empty result for empty grids; never raises on odd data.
    """
    mode = Mode(mode)
    if make_id is None:
        make_id = make_id_factory("student-xls")

    rows = list(grid or [])
    if not rows:
        return ParseResult()

    detected = detect_subject(rows)

    records = []
    for row in rows:
        if not isinstance(row, (list, tuple)) or all(is_empty(v) for v in row):
            continue
        rec = parse_row(row, mode, make_id)
        if rec is not None:
            records.append(rec)

    log.info("parsed %d records from %d rows (mode=%s, subject=%s)", len(records), len(rows), mode.value, detected)
    return ParseResult(records=records, detected_label=detected)
