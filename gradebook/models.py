"""Records produced by the extractors."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional


class Mode(str, Enum):
    """Which teacher the sheet belongs to; decides how trailing columns are read."""

    SUBJECT = "GVBM"   # one score or rating per student
    HOMEROOM = "GVCN"  # academic result, conduct rating, absences


@dataclass
class PersonRecord:
    id: str
    name: str
    numeric_score: Optional[float] = None
    categorical_rating: Optional[str] = None
    academic_result: Optional[str] = None
    conduct_rating: Optional[str] = None
    absence_count: Optional[int] = None
    comment_text: str = ""
    processing_flag: bool = False


@dataclass
class PartitionedRow:
    """A row split around its name span."""

    has_index: bool
    name_tokens: list[str]
    remainder: list[Any] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return " ".join(self.name_tokens).strip()


@dataclass
class ExtractedFields:
    numeric_score: Optional[float] = None
    categorical_rating: Optional[str] = None
    academic_result: Optional[str] = None
    conduct_rating: Optional[str] = None
    absence_count: Optional[int] = None

    def has_data(self, mode: Mode) -> bool:
        if Mode(mode) is Mode.SUBJECT:
            return self.numeric_score is not None or self.categorical_rating is not None
        return (
            self.academic_result is not None
            or self.conduct_rating is not None
            or self.absence_count is not None
        )


@dataclass
class ParseResult:
    records: list[PersonRecord] = field(default_factory=list)
    detected_label: Optional[str] = None

    def __len__(self) -> int:
        return len(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)


IdFactory = Callable[[], str]


def make_id_factory(prefix: str = "student") -> IdFactory:
    """Sequential ids ("student-xls-1", "student-xls-2", ...), fresh per call."""
    counter = itertools.count(1)

    def _next() -> str:
        return f"{prefix}-{next(counter)}"

    return _next
