"""
Heuristic extraction of student records from Vietnamese gradebooks:
- reading the first sheet of an upload (XLSX/CSV) as a raw grid
- name span / noise row / trailing field heuristics (GVBM and GVCN modes)
- subject detection from the title rows
- pasted-text fallback
- image/PDF backend payload normalization
- comment batching and Excel export
"""
from .models import Mode, PersonRecord, ParseResult, make_id_factory
from .extract import parse_grid
from .text import parse_text
from .ingest import load_grid, parse_workbook
from .subject import detect_subject, normalize_subject_name
from .media import records_from_media_payload
from .comments import (
    CommentBackendError,
    CommentBatchError,
    CredentialsMissingError,
    RateLimitedError,
    BackendConnectionError,
    apply_comments,
    generate_comments,
)
from .export import export_records_to_excel_bytes

__all__ = [
    "Mode",
    "PersonRecord",
    "ParseResult",
    "make_id_factory",
    "parse_grid",
    "parse_text",
    "load_grid",
    "parse_workbook",
    "detect_subject",
    "normalize_subject_name",
    "records_from_media_payload",
    "CommentBackendError",
    "CommentBatchError",
    "CredentialsMissingError",
    "RateLimitedError",
    "BackendConnectionError",
    "apply_comments",
    "generate_comments",
    "export_records_to_excel_bytes",
]
