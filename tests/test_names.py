import pytest

from gradebook.names import is_name_part, partition_row


class TestIsNamePart:
    @pytest.mark.parametrize("value", ["Nguyễn Văn", "An", "Trần Thị Bình", "Lê Hoàng Cường"])
    def test_plain_names(self, value):
        assert is_name_part(value)

    @pytest.mark.parametrize("value", [None, 8.5, 12, "", "A", " B "])
    def test_non_text_and_short(self, value):
        assert not is_name_part(value)

    def test_digits_rejected(self):
        assert not is_name_part("Lớp 6A")
        assert not is_name_part("HK1 2025")

    def test_exact_keywords_rejected(self):
        for kw in ["STT", "Họ", "Tên", "Tốt", "Khá", "Đạt", "ĐĐGtx", "ĐTBmhk"]:
            assert not is_name_part(kw), kw

    def test_keyword_only_rejected_when_whole_cell(self):
        # "họ" alone is a header word, inside a longer cell it is not
        assert is_name_part("Họ và tên")

    def test_institutional_substrings_rejected(self):
        assert not is_name_part("Trường THCS Đoàn Bảo Đức")
        assert not is_name_part("Phòng GD&ĐT")
        assert not is_name_part("Số lượng HS")

    def test_institutional_substring_also_hits_given_names(self):
        # "hòa" is an institutional word (Cộng hòa); names containing it are lost
        assert not is_name_part("Nguyễn Thị Hòa")

    @pytest.mark.parametrize("value", ["TB", "CĐ", "cđ", "tb"])
    def test_rating_codes_rejected(self, value):
        assert not is_name_part(value)


class TestPartitionRow:
    def test_index_name_and_remainder(self):
        part = partition_row([1, "Nguyễn Văn", "An", 8, 8.5])
        assert part.has_index
        assert part.name_tokens == ["Nguyễn Văn", "An"]
        assert part.full_name == "Nguyễn Văn An"
        assert part.remainder == [8, 8.5]

    def test_string_index(self):
        part = partition_row(["12", "Trần Thị B", "7"])
        assert part.has_index
        assert part.full_name == "Trần Thị B"

    def test_no_index(self):
        part = partition_row(["Trần Thị B", "7"])
        assert not part.has_index
        assert part.remainder == ["7"]

    def test_zero_and_large_numbers_are_not_sequence_numbers(self):
        assert not partition_row([0, "Trần Thị B"]).has_index
        assert not partition_row([2025, "Trần Thị B"]).has_index

    def test_empty_cell_bridged_before_name_part(self):
        part = partition_row([3, "Lê Hoàng", None, "Cường", 9])
        assert part.full_name == "Lê Hoàng Cường"
        assert part.remainder == [9]

    def test_empty_cell_not_followed_by_name_ends_span(self):
        part = partition_row([3, "Lê Hoàng", None, "Đ"])
        assert part.full_name == "Lê Hoàng"
        assert part.remainder == [None, "Đ"]

    def test_non_name_cell_ends_span(self):
        part = partition_row([1, "Nguyễn Thị Lan", "Tốt", "Bình An"])
        assert part.full_name == "Nguyễn Thị Lan"
        assert part.remainder == ["Tốt", "Bình An"]

    def test_keyword_given_name_in_own_cell_ends_span(self):
        # "Bình" alone is a header keyword (Trung bình); only the surname cell is kept
        part = partition_row([2, "Trần Thị", "Bình", 6, 7])
        assert part.full_name == "Trần Thị"
        assert part.remainder == ["Bình", 6, 7]

    def test_no_name(self):
        part = partition_row([1, 8.5, "TB"])
        assert part.name_tokens == []
        assert part.full_name == ""
        assert part.remainder == []
