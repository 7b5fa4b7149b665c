from __future__ import annotations
import re
from typing import Any, Sequence
from .models import PartitionedRow
from .utils import bare_int, cell_text, is_empty
from .vocab import (MAX_SEQUENCE_NUMBER, NAME_CODE_RE, NAME_EXCLUDE_EXACT, NAME_EXCLUDE_SUBSTRINGS)

_DIGIT_RE = re.compile(r"\d")


def is_name_part(v: Any) -> bool:
    """
    Cell that can be (part of) a student's name.
    Rejects: non-text, < 2 chars, digits, header/grading words,
    institutional words anywhere in the cell, rating/column codes (T, CĐ, TX1...).
    """
    if not isinstance(v, str):
        return False
    s = cell_text(v)
    if len(s) < 2:
        return False
    # years / codes in headers ("HK1 2025")
    if _DIGIT_RE.search(s):
        return False

    low = s.lower()
    if low in NAME_EXCLUDE_EXACT:
        return False
    if any(k in low for k in NAME_EXCLUDE_SUBSTRINGS):
        return False
    if NAME_CODE_RE.match(s.upper()):
        return False
    return True


def _is_sequence_number(v: Any) -> bool:
    n = bare_int(v)
    return n is not None and 0 < n < MAX_SEQUENCE_NUMBER


def partition_row(row: Sequence[Any]) -> PartitionedRow:
    """
    Splits a row into (STT seen?, name tokens, cells after the name).

    Names are often split across columns (Họ | Tên) with gaps from merged
    cells, so an empty cell is bridged when the next cell is a name part.
    """
    has_index = False
    tokens: list[str] = []
    end = -1

    for i, cell in enumerate(row):
        if is_name_part(cell):
            tokens.append(cell_text(cell))
            end = i
            continue

        if not tokens:
            # before the name: STT and other leading cells are skipped
            if _is_sequence_number(cell):
                has_index = True
            continue

        nxt = row[i + 1] if i + 1 < len(row) else None
        if is_empty(cell) and is_name_part(nxt):
            continue
        break

    remainder = list(row[end + 1:]) if tokens else []
    return PartitionedRow(has_index=has_index, name_tokens=tokens, remainder=remainder)
