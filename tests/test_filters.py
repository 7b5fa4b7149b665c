import pytest

from gradebook.filters import REJECT_RULES, accept_name, reject_reason


@pytest.mark.parametrize("name", ["Nguyễn Văn An", "Lê Thị Thu-Hà", "Y Bli"])
def test_accepts_student_names(name):
    assert accept_name(name)


@pytest.mark.parametrize(
    "name, reason",
    [
        ("A", "too_short"),
        ("", "too_short"),
        ("Trường THCS Đoàn Bảo Đức", "institutional_header"),
        ("UBND huyện", "institutional_header"),
        ("Cộng hòa xã hội chủ nghĩa", "institutional_header"),
        ("Độc lập - Tự do - Hạnh phúc", "institutional_header"),
        ("Số lượng học sinh", "statistical_footer"),
        ("Tỷ lệ đạt", "statistical_footer"),
        ("Tổng cộng", "statistical_footer"),
        ("Thống kê", "statistical_footer"),
        ("15%", "percent"),
        ("HS-2024-001", "code_like"),
    ],
)
def test_rejects(name, reason):
    assert reject_reason(name) == reason
    assert not accept_name(name)


def test_hyphenated_short_or_spaced_is_kept():
    assert accept_name("Hà-My")
    assert accept_name("Lê Thị Thu-Hà")


def test_rule_order():
    assert [r for r, _ in REJECT_RULES] == [
        "too_short",
        "institutional_header",
        "statistical_footer",
        "percent",
        "code_like",
    ]
