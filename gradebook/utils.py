import os
import re
import math
import unicodedata
from typing import Any, Optional
import numpy as np

# =========================

# Config (env)
# =========================
def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default

LOG_LEVEL = os.environ.get("GRADEBOOK_LOG_LEVEL", "INFO").upper()
COMMENT_CHUNK_SIZE = max(1, env_int("GRADEBOOK_COMMENT_CHUNK_SIZE", 30))
HEADER_ROWS = max(1, env_int("GRADEBOOK_HEADER_ROWS", 5))
# =========================

# Cells
# =========================
_NBSP_RE = re.compile(r"[\u00A0\u2007\u202F]")
_BARE_INT_RE = re.compile(r"^\d+$")
_LEADING_FLOAT_RE = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)")


def is_number(v: Any) -> bool:
    # bool is an int subclass; a True/False cell is not a score
    if isinstance(v, bool):
        return False
    return isinstance(v, (int, float, np.integer, np.floating)) and not (
        isinstance(v, (float, np.floating)) and math.isnan(v)
    )


def is_empty(v: Any) -> bool:
    if v is None:
        return True
    if isinstance(v, (float, np.floating)) and math.isnan(v):
        return True
    if isinstance(v, str):
        return cell_text(v) == ""
    return False


def cell_text(v: Any) -> str:
    """
    Text form of a cell:
    - None/NaN -> ""
    - integral floats -> "3" (not "3.0"), as spreadsheets show them
    - NFC + non-breaking spaces -> plain spaces, trimmed
    """
    if v is None:
        return ""
    if is_number(v):
        f = float(v)
        if f.is_integer():
            return str(int(f))
        return str(f)
    if isinstance(v, (float, np.floating)):
        return ""
    s = unicodedata.normalize("NFC", str(v))
    s = s.replace("\ufeff", "")
    s = _NBSP_RE.sub(" ", s)
    return s.strip()


def norm_text(s: Any) -> str:
    # lowercase + collapsed whitespace, for substring tests
    t = cell_text(s).lower()
    return re.sub(r"\s+", " ", t).strip()


def bare_int(v: Any) -> Optional[int]:
    """Non-negative integer value of a cell, or None ("12", 12, 12.0 -> 12)."""
    if is_number(v):
        f = float(v)
        if f >= 0 and f.is_integer():
            return int(f)
        return None
    if isinstance(v, str):
        s = cell_text(v)
        if _BARE_INT_RE.match(s):
            return int(s)
    return None


def leading_float(v: Any) -> Optional[float]:
    # numeric prefix of a cell ("8,5" -> 8.5, "7 (khá)" -> 7.0), None when absent
    if is_number(v):
        return float(v)
    s = cell_text(v).replace(",", ".", 1)
    m = _LEADING_FLOAT_RE.match(s)
    if not m:
        return None
    try:
        return float(m.group(0))
    except ValueError:
        return None
