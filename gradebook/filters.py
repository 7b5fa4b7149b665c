from __future__ import annotations
from typing import Callable, Optional, Tuple
from .vocab import FOOTER_MARKERS, INSTITUTIONAL_MARKERS


def _too_short(name: str) -> bool:
    return len(name) < 2


def _institutional(name: str) -> bool:
    up = name.upper()
    return any(m in up for m in INSTITUTIONAL_MARKERS)


def _footer(name: str) -> bool:
    up = name.upper()
    return any(m in up for m in FOOTER_MARKERS)


def _percent(name: str) -> bool:
    return "%" in name


def _code_like(name: str) -> bool:
    # "HS-2024-01", "lop-6a" - ids that slipped through as names
    return "-" in name and len(name) > 5 and " " not in name


# (reason, predicate) - checked in order, first hit rejects
REJECT_RULES: Tuple[Tuple[str, Callable[[str], bool]], ...] = (
    ("too_short", _too_short),
    ("institutional_header", _institutional),
    ("statistical_footer", _footer),
    ("percent", _percent),
    ("code_like", _code_like),
)


def reject_reason(name: str) -> Optional[str]:
    s = (name or "").strip()
    for reason, pred in REJECT_RULES:
        if pred(s):
            return reason
    return None


def accept_name(name: str) -> bool:
    return reject_reason(name) is None
