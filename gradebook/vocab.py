"""
Closed vocabulary of Vietnamese school gradebooks (sổ điểm / bảng tổng kết).

Everything here is read-only. Tables whose order matters (subject rules)
are tuples of (label, keywords) evaluated top to bottom.
"""
from __future__ import annotations
import re

# Header/grading words that are never a name part (exact, lowercased)
NAME_EXCLUDE_EXACT = frozenset([
    "stt", "họ", "tên", "thứ", "ngày", "tháng", "năm", "lớp", "trường",
    "dân", "tộc", "nữ", "nam", "điểm", "trung", "bình", "xếp", "loại",
    "ghi", "chú", "kết", "quả", "học", "kỳ", "môn", "toán", "lý", "hóa",
    "sinh", "sử", "địa", "anh", "gdcd", "công", "nghệ", "tin", "thể",
    "giáo", "viên", "người", "lập", "biểu", "thống", "kê", "đạt", "chưa",
    "tbm", "đtb", "hk1", "hk2", "cn", "tốt", "khá",
    # administrative headers
    "ubnd", "thcs", "thpt", "tiểu", "phòng", "sở", "đào", "tạo", "cộng", "hòa",
    "xã", "huyện", "tỉnh", "thành", "phố", "độc", "lập", "tự", "do",
    "đđg", "tx", "đgtx", "đđgc", "nhận", "xét", "khối",
    # statistical footer
    "số", "lượng", "tỉ", "lệ", "tỷ", "phần", "trăm", "tổng",
    # column codes
    "đđgtx", "đđgck", "đtbmhk",
])

# Substrings that exclude a cell from a name wherever they appear (lowercased)
NAME_EXCLUDE_SUBSTRINGS = (
    "số lượng", "tỉ lệ", "tỷ lệ", "thống kê",
    "trường", "phòng", "ủy", "ban", "cộng", "hòa",
)

# Ratings / column codes that look like short words
NAME_CODE_RE = re.compile(r"^(T|K|TB|Y|G|Đ|CĐ|TX\d|HK\d)$")

# Row-level rejects on the joined name (uppercased)
INSTITUTIONAL_MARKERS = ("TRƯỜNG", "THCS", "THPT", "UBND", "CỘNG HÒA", "ĐỘC LẬP")
FOOTER_MARKERS = ("SỐ LƯỢNG", "TỈ LỆ", "TỶ LỆ", "TỔNG CỘNG", "THỐNG KÊ")

# Subject-teacher rating column
SHORT_RATINGS = frozenset(["T", "K", "Đ", "CĐ", "TB", "G", "Y", "ĐẠT", "CHƯA ĐẠT"])

# Homeroom KQHT / KQRL columns
EXTENDED_RATINGS = frozenset([
    "T", "K", "Đ", "CĐ", "G", "TB", "Y",
    "TỐT", "KHÁ", "ĐẠT", "CHƯA ĐẠT", "GIỎI", "YẾU", "TRUNG BÌNH", "KÉM",
])

# Pasted-text trailing token accepted as KQHT
TEXT_RATING_RE = re.compile(r"^(T|K|Đ|CĐ|G|TB|Y)$", re.IGNORECASE)

# Pasted-text lines that are headers/boilerplate (lowercased substring)
TEXT_HEADER_MARKERS = tuple(
    [m.lower() for m in INSTITUTIONAL_MARKERS + FOOTER_MARKERS]
    + ["họ và tên", "full name", "người lập", "ngày"]
)
TEXT_HEADER_PREFIXES = ("stt",)

MAX_SCORE = 10.0
MAX_ABSENCES = 60
MAX_SEQUENCE_NUMBER = 1000

# Header text -> canonical subject label, first match wins
SUBJECT_RULES = (
    ("Toán", ("toán",)),
    ("Văn", ("văn", "việt", "ngữ")),
    ("LS & ĐL", ("lịch sử", "địa lý", "sử", "địa")),
    ("KHTN", ("khoa học tự nhiên", "khtn", "lý", "hóa", "sinh", "vật lý", "vật lí", "sinh học", "hóa học")),
    ("Tin học", ("tin", "tin học")),
    ("Ng.ngữ", ("anh", "ngoại ngữ", "tiếng anh")),
    ("GDCD", ("gdcd", "công dân")),
    ("C.nghệ", ("công nghệ",)),
    ("GDTC", ("thể dục", "gdtc", "thể chất")),
    ("Nghệ thuật", ("nhạc", "mỹ thuật", "âm nhạc", "nghệ thuật")),
    ("NDGDCĐP", ("địa phương", "ndgdcđp")),
    ("HĐTN&HN", ("trải nghiệm", "hướng nghiệp", "hđtn")),
)

# Free-form subject name (vision output, user input) -> canonical label
SUBJECT_NAME_RULES = (
    ("Toán", ("toán",)),
    ("Văn", ("văn", "việt", "ngữ")),
    ("LS & ĐL", ("ls", "lịch sử", "địa")),
    ("KHTN", ("khtn", "khoa học tự nhiên", "lý", "hóa", "sinh", "vật")),
    ("Tin học", ("tin",)),
    ("Ng.ngữ", ("anh", "ngoại ngữ")),
    ("GDCD", ("gdcd", "công dân")),
    ("C.nghệ", ("công nghệ", "c.nghệ")),
    ("GDTC", ("thể", "gdtc")),
    ("Nghệ thuật", ("nhạc", "mỹ thuật", "nghệ thuật")),
    ("NDGDCĐP", ("địa phương", "ndgdcđp")),
    ("HĐTN&HN", ("trải nghiệm", "hướng nghiệp", "hđtn")),
)

SUBJECT_LABELS = tuple(label for label, _ in SUBJECT_RULES)
