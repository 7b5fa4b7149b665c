from __future__ import annotations
from typing import Any, Dict, List, Sequence
from .models import ExtractedFields, Mode
from .utils import bare_int, cell_text, is_empty, leading_float
from .vocab import EXTENDED_RATINGS, MAX_ABSENCES, MAX_SCORE, SHORT_RATINGS
# =========================

# GVBM: one score or rating, scanned from the right
# =========================
def extract_subject_fields(remainder: Sequence[Any]) -> ExtractedFields:
    """
    The final score (ĐTBmhk / TBM) is usually the rightmost filled column,
    so the first hit scanning backwards wins. Out-of-range numbers
    (years, totals) and unknown text are skipped, not terminators.
    """
    out = ExtractedFields()
    for cell in reversed(remainder):
        if is_empty(cell):
            continue

        num = leading_float(cell)
        if num is not None:
            if 0 <= num <= MAX_SCORE:
                out.numeric_score = num
                break
            continue

        up = cell_text(cell).upper()
        if up in SHORT_RATINGS:
            out.categorical_rating = up
            break
    return out
# =========================

# GVCN: KQHT | KQRL | ngày nghỉ, scanned from the left
# =========================
def extract_homeroom_fields(remainder: Sequence[Any]) -> ExtractedFields:
    out = ExtractedFields()
    ratings: List[str] = []

    for cell in remainder:
        if is_empty(cell):
            continue

        up = cell_text(cell).upper()
        if up in EXTENDED_RATINGS:
            ratings.append(up)
            continue

        # absences trail the rating columns: last small integer wins
        n = bare_int(cell)
        if n is not None and n < MAX_ABSENCES:
            out.absence_count = n

    if len(ratings) >= 2:
        out.academic_result = ratings[0]
        out.conduct_rating = ratings[1]
    elif len(ratings) == 1:
        out.academic_result = ratings[0]
    return out


_EXTRACTORS: Dict[Mode, Any] = {
    Mode.SUBJECT: extract_subject_fields,
    Mode.HOMEROOM: extract_homeroom_fields,
}


def extract_fields(remainder: Sequence[Any], mode: Mode) -> ExtractedFields:
    return _EXTRACTORS[Mode(mode)](remainder)
