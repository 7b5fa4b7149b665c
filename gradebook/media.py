"""
Normalizes the JSON returned by the image/PDF extraction backend into the
same ParseResult shape the grid parser produces.

Expected payload (field names as the backend emits them):
    {"subjectName": "Tiếng Anh",
     "students": [{"name": ..., "score": ..., "rating": ...,
                   "kqht": ..., "kqrl": ..., "absences": ...}]}
A bare list is accepted as the students list.
"""
from __future__ import annotations
import json
import re
from typing import Any, Dict, List, Optional, Union
from .logger import get_logger
from .models import ExtractedFields, IdFactory, Mode, ParseResult, PersonRecord, make_id_factory
from .subject import normalize_subject_name
from .utils import bare_int, cell_text, is_empty, leading_float
from .vocab import EXTENDED_RATINGS, MAX_ABSENCES, MAX_SCORE, SHORT_RATINGS

log = get_logger("media")

_FENCE_RE = re.compile(r"```(?:json)?", re.I)

Payload = Union[str, bytes, Dict[str, Any], List[Any]]


def _load_payload(payload: Payload) -> Any:
    if isinstance(payload, (bytes, bytearray)):
        payload = payload.decode("utf-8", errors="replace")
    if not isinstance(payload, str):
        return payload
    try:
        return json.loads(payload)
    except json.JSONDecodeError:
        # models sometimes wrap the JSON in a markdown fence
        return json.loads(_FENCE_RE.sub("", payload))


def _score(v: Any) -> Optional[float]:
    if is_empty(v):
        return None
    num = leading_float(v)
    if num is None or not (0 <= num <= MAX_SCORE):
        return None
    return num


def _rating(v: Any, allowed) -> Optional[str]:
    up = cell_text(v).upper()
    return up if up in allowed else None


def _absences(v: Any) -> Optional[int]:
    n = bare_int(v)
    return n if n is not None and n < MAX_ABSENCES else None


def records_from_media_payload(
    payload: Payload,
    mode: Mode | str,
    make_id: Optional[IdFactory] = None,
) -> ParseResult:
    mode = Mode(mode)
    if make_id is None:
        make_id = make_id_factory("student-img")

    try:
        data = _load_payload(payload)
    except json.JSONDecodeError:
        log.warning("media payload is not JSON")
        return ParseResult()

    if isinstance(data, list):
        items, raw_subject = data, None
    elif isinstance(data, dict):
        items, raw_subject = data.get("students") or [], data.get("subjectName")
    else:
        return ParseResult()

    records: List[PersonRecord] = []
    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            continue
        name = cell_text(item.get("name")) or f"Học sinh {idx + 1}"

        fields = ExtractedFields()
        if mode is Mode.SUBJECT:
            fields.numeric_score = _score(item.get("score"))
            # a score and a rating never come together
            if fields.numeric_score is None:
                fields.categorical_rating = _rating(item.get("rating"), SHORT_RATINGS)
        else:
            fields.academic_result = _rating(item.get("kqht"), EXTENDED_RATINGS)
            fields.conduct_rating = _rating(item.get("kqrl"), EXTENDED_RATINGS)
            fields.absence_count = _absences(item.get("absences"))

        records.append(PersonRecord(
            id=make_id(),
            name=name,
            numeric_score=fields.numeric_score,
            categorical_rating=fields.categorical_rating,
            academic_result=fields.academic_result,
            conduct_rating=fields.conduct_rating,
            absence_count=fields.absence_count,
        ))

    label = normalize_subject_name(raw_subject) if isinstance(raw_subject, str) else None
    log.info("normalized %d records from media payload (subject=%s)", len(records), label)
    return ParseResult(records=records, detected_label=label)
