"""
Caller side of comment generation: builds per-student payloads, sends them to
a pluggable backend in fixed-size chunks and merges whatever came back.

The backend is any callable ``backend(payloads, mode, subject) -> {id: comment}``
that signals failures with the exceptions below.
"""
from __future__ import annotations
from dataclasses import replace
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence
from .logger import get_logger
from .models import Mode, PersonRecord
from .utils import COMMENT_CHUNK_SIZE

log = get_logger("comments")

DEFAULT_SUBJECT = "Môn học"

Backend = Callable[[List[Dict[str, Any]], Mode, str], Mapping[str, str]]


class CommentBackendError(Exception):
    """Base for failures reported by the comment backend."""


class CredentialsMissingError(CommentBackendError):
    """No API key configured."""


class RateLimitedError(CommentBackendError):
    """Quota exhausted (HTTP 429 / RESOURCE_EXHAUSTED)."""


class BackendConnectionError(CommentBackendError):
    """Network or service failure."""


class CommentBatchError(Exception):
    """A chunk failed; ``comments`` holds what earlier chunks produced."""

    def __init__(self, cause: CommentBackendError, comments: Dict[str, str]):
        super().__init__(str(cause))
        self.cause = cause
        self.comments = comments


def comment_payload(record: PersonRecord, mode: Mode | str) -> Dict[str, Any]:
    mode = Mode(mode)
    if mode is Mode.SUBJECT:
        score = record.numeric_score if record.numeric_score is not None else record.categorical_rating
        return {"id": record.id, "name": record.name, "score": score}
    return {
        "id": record.id,
        "name": record.name,
        "kqht": record.academic_result,
        "kqrl": record.conduct_rating,
        "absences": record.absence_count,
    }


def chunked(records: Sequence[PersonRecord], size: int) -> Iterator[List[PersonRecord]]:
    if size < 1:
        raise ValueError("chunk size must be >= 1")
    for i in range(0, len(records), size):
        yield list(records[i:i + size])


def generate_comments(
    records: Sequence[PersonRecord],
    mode: Mode | str,
    subject: Optional[str],
    backend: Backend,
    chunk_size: Optional[int] = None,
) -> Dict[str, str]:
    """
    Returns {record id: comment} for every record the backend answered.
    On a backend error the remaining chunks are not sent and CommentBatchError
    is raised with the partial result attached.
    """
    mode = Mode(mode)
    subject = subject or DEFAULT_SUBJECT
    size = chunk_size or COMMENT_CHUNK_SIZE

    out: Dict[str, str] = {}
    for n, chunk in enumerate(chunked(records, size), start=1):
        wanted = {r.id for r in chunk}
        payloads = [comment_payload(r, mode) for r in chunk]
        try:
            got = backend(payloads, mode, subject)
        except CommentBackendError as e:
            log.warning("comment chunk %d failed: %s: %s", n, type(e).__name__, e)
            raise CommentBatchError(e, out) from e

        for rid, text in (got or {}).items():
            # ignore ids the backend made up and empty answers
            if rid in wanted and text:
                out[rid] = str(text).strip()

        missing = len(wanted) - len(wanted & out.keys())
        if missing:
            log.info("comment chunk %d: %d records without a comment", n, missing)

    return out


def apply_comments(records: Sequence[PersonRecord], comments: Mapping[str, str]) -> List[PersonRecord]:
    """New records with comment_text filled in; the inputs are left untouched."""
    out = []
    for r in records:
        if r.id in comments:
            out.append(replace(r, comment_text=comments[r.id], processing_flag=False))
        else:
            out.append(replace(r, processing_flag=False))
    return out
