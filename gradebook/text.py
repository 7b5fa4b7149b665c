from __future__ import annotations
import re
from typing import List, Optional, Tuple
from .filters import reject_reason
from .logger import get_logger
from .models import ExtractedFields, IdFactory, Mode, ParseResult, PersonRecord, make_id_factory
from .utils import bare_int, cell_text, leading_float, norm_text
from .vocab import MAX_SCORE, SHORT_RATINGS, TEXT_HEADER_MARKERS, TEXT_HEADER_PREFIXES, TEXT_RATING_RE

log = get_logger("text")

_LINES_RE = re.compile(r"(?:\r?\n)+")
# "Nguyễn Văn A 8,5" / "Trần Thị B T"
_TRAILING_TOKEN_RE = re.compile(r"^(.*\S)\s+(\d+(?:[.,]\d+)?|CĐ|TB|ĐẠT|T|K|Đ|G|Y)$", re.IGNORECASE)
_ORDINAL_RE = re.compile(r"^\d+[.)\s]+")


def _is_header_line(line: str) -> bool:
    low = norm_text(line)
    if low.startswith(TEXT_HEADER_PREFIXES):
        return True
    return any(m in low for m in TEXT_HEADER_MARKERS)


def split_line(line: str) -> Tuple[bool, str, Optional[str]]:
    """
    Pasted line -> (has ordinal, name, trailing token).
    Tab-separated lines (copied from Excel/Word tables) are split on tabs;
    otherwise a trailing score/code is peeled off the end.
    """
    fields = [f.strip() for f in line.split("\t")]
    fields = [f for f in fields if f]

    has_index = False
    # STT column
    while len(fields) > 1 and bare_int(fields[0]) is not None:
        fields.pop(0)
        has_index = True

    if len(fields) < 2:
        text = fields[0] if fields else ""
        m = _TRAILING_TOKEN_RE.match(text)
        fields = [m.group(1), m.group(2)] if m else [text]

    name = fields[0]
    m = _ORDINAL_RE.match(name)
    if m:
        has_index = True
        name = name[m.end():]
    name = name.strip()

    last = fields[-1] if len(fields) > 1 else None
    return has_index, name, last


def _fields_from_token(token: Optional[str], mode: Mode) -> ExtractedFields:
    out = ExtractedFields()
    if not token:
        return out
    token = token.strip().replace(",", ".")

    if mode is Mode.SUBJECT:
        num = leading_float(token)
        if num is not None:
            if 0 <= num <= MAX_SCORE:
                out.numeric_score = num
        elif token.upper() in SHORT_RATINGS:
            out.categorical_rating = token.upper()
    elif TEXT_RATING_RE.match(token):
        out.academic_result = token.upper()
    return out


def parse_text(text: str, mode: Mode | str, make_id: Optional[IdFactory] = None) -> ParseResult:
    """Degraded parser for plain pasted lines ("3. Lê Văn C<TAB>7")."""
    mode = Mode(mode)
    if make_id is None:
        make_id = make_id_factory("student-txt")

    records: List[PersonRecord] = []
    for line in _LINES_RE.split(text or ""):
        line = cell_text(line)
        if not line or _is_header_line(line):
            continue

        has_index, name, token = split_line(line)
        if not name or bare_int(name) is not None:
            continue

        reason = reject_reason(name)
        if reason:
            log.debug("line rejected (%s): %r", reason, line)
            continue

        fields = _fields_from_token(token, mode)
        if not has_index and not fields.has_data(mode):
            log.debug("line without index or data: %r", line)
            continue

        records.append(PersonRecord(
            id=make_id(),
            name=name,
            numeric_score=fields.numeric_score,
            categorical_rating=fields.categorical_rating,
            academic_result=fields.academic_result,
        ))

    log.info("parsed %d records from pasted text (mode=%s)", len(records), mode.value)
    return ParseResult(records=records)
