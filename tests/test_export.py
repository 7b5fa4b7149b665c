from io import BytesIO

from openpyxl import load_workbook

from gradebook.export import SHEET_NAME, export_records_to_excel_bytes, records_to_frame
from gradebook.models import Mode, PersonRecord


RECORDS = [
    PersonRecord(id="a", name="Nguyễn Văn An", numeric_score=8.5, comment_text="Học tốt."),
    PersonRecord(id="b", name="Trần Thị Bình", categorical_rating="Đ"),
]


def test_subject_frame_columns():
    df = records_to_frame(RECORDS, Mode.SUBJECT)
    assert list(df.columns) == ["STT", "Họ và tên", "Điểm TBM", "Xếp loại", "Nhận xét"]
    assert df["STT"].tolist() == [1, 2]
    assert df.iloc[1]["Xếp loại"] == "Đ"
    assert df.iloc[1]["Điểm TBM"] == ""


def test_homeroom_frame_columns():
    rec = PersonRecord(id="c", name="Võ Thị Ngọc", academic_result="T", conduct_rating="K", absence_count=0)
    df = records_to_frame([rec], "GVCN")
    assert list(df.columns) == ["STT", "Họ và tên", "KQHT", "KQRL", "Số buổi nghỉ", "Nhận xét"]
    assert df.iloc[0]["Số buổi nghỉ"] == 0


def test_export_roundtrip_with_title():
    data = export_records_to_excel_bytes(RECORDS, Mode.SUBJECT, subject="Toán")
    ws = load_workbook(BytesIO(data))[SHEET_NAME]
    assert ws["A1"].value == "Môn: Toán"
    assert ws["B2"].value == "Họ và tên"
    assert ws["B3"].value == "Nguyễn Văn An"
    assert ws["C3"].value == 8.5
    assert ws["E3"].value == "Học tốt."


def test_export_without_title_or_records():
    data = export_records_to_excel_bytes([], Mode.HOMEROOM)
    ws = load_workbook(BytesIO(data))[SHEET_NAME]
    assert ws["A1"].value == "STT"
