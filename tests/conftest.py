from __future__ import annotations

from io import BytesIO

import pytest
from openpyxl import Workbook


SUBJECT_SHEET = [
    ["UBND HUYỆN ĐẠI LỘC", None, None, None, "CỘNG HÒA XÃ HỘI CHỦ NGHĨA VIỆT NAM"],
    ["TRƯỜNG THCS ĐOÀN BẢO ĐỨC", None, None, None, "Độc lập - Tự do - Hạnh phúc"],
    ["BẢNG ĐIỂM MÔN TOÁN - LỚP 6A", None, None, None, None],
    ["Học kỳ I, năm học 2025-2026", None, None, None, None],
    ["STT", "Họ và tên", None, "ĐĐGtx", "ĐTBmhk"],
    [1, "Nguyễn Văn", "An", 8, 8.5],
    [2, "Trần Thị", "Mai", 6, 7],
    [3, "Lê Hoàng", "Cường", None, "Đ"],
    [4, "Phạm Minh", "Dũng", None, None],
    ["Số lượng", None, None, None, 4],
    ["Tỉ lệ", None, None, None, "100%"],
    [None, None, None, "Người lập biểu", None],
]

HOMEROOM_SHEET = [
    ["TRƯỜNG THCS ĐOÀN BẢO ĐỨC"],
    ["BẢNG TỔNG KẾT LỚP 7B"],
    ["STT", "Họ và tên", "KQHT", "KQRL", "Nghỉ"],
    ["1", "Nguyễn Thị Lan", "Tốt", "Tốt", "0"],
    ["2", "Trần Văn Minh", "Khá", "Đạt", "3"],
    ["3", "Võ Thị Ngọc", "CĐ", None, None],
    ["Tổng cộng", None, None, None, "3"],
]


@pytest.fixture
def subject_sheet():
    return [list(r) for r in SUBJECT_SHEET]


@pytest.fixture
def homeroom_sheet():
    return [list(r) for r in HOMEROOM_SHEET]


def _xlsx_bytes(rows) -> bytes:
    wb = Workbook()
    ws = wb.active
    for r in rows:
        ws.append(list(r))
    bio = BytesIO()
    wb.save(bio)
    return bio.getvalue()


@pytest.fixture
def subject_xlsx(subject_sheet) -> bytes:
    return _xlsx_bytes(subject_sheet)


@pytest.fixture
def homeroom_xlsx(homeroom_sheet) -> bytes:
    return _xlsx_bytes(homeroom_sheet)
