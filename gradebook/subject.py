from __future__ import annotations
from typing import Any, Optional, Sequence, Tuple
from .utils import HEADER_ROWS, cell_text
from .vocab import SUBJECT_NAME_RULES, SUBJECT_RULES

Rules = Sequence[Tuple[str, Sequence[str]]]


def match_rules(text: str, rules: Rules) -> Optional[str]:
    # first rule with any keyword in text wins; later rules are not consulted
    for label, keywords in rules:
        if any(k in text for k in keywords):
            return label
    return None


def header_blob(rows: Sequence[Any], max_rows: int = HEADER_ROWS) -> str:
    parts = []
    for row in list(rows)[:max_rows]:
        if not isinstance(row, (list, tuple)):
            continue
        for v in row:
            t = cell_text(v)
            if t:
                parts.append(t)
    return " ".join(parts).lower()


def detect_subject(rows: Sequence[Any], max_rows: int = HEADER_ROWS) -> Optional[str]:
    """Canonical subject label from the sheet title rows ("BẢNG ĐIỂM MÔN TOÁN" -> "Toán")."""
    return match_rules(header_blob(rows, max_rows=max_rows), SUBJECT_RULES)


def normalize_subject_name(raw: Optional[str]) -> Optional[str]:
    if not raw:
        return None
    return match_rules(cell_text(raw).lower(), SUBJECT_NAME_RULES)
