import pytest

from engine import InvalidConfiguration
from utils import POLICY_CHOICES, format_frames, get_color, parse_reference_string


class TestParseReferenceString:

    def test_commas_and_spaces(self) -> None:
        assert parse_reference_string("1, 2 3,,4\n5") == [1, 2, 3, 4, 5]

    def test_negative_pages(self) -> None:
        assert parse_reference_string("-1 0 -1") == [-1, 0, -1]

    def test_blank_input(self) -> None:
        assert parse_reference_string("   ") == []

    def test_rejects_non_numbers(self) -> None:
        with pytest.raises(InvalidConfiguration, match="'a'"):
            parse_reference_string("1,a,3")


def test_format_frames() -> None:
    assert format_frames((1, None, 3)) == "[1 | - | 3]"
    assert format_frames(()) == "[]"


def test_get_color_differs_for_hit_and_fault() -> None:
    assert get_color(True) != get_color(False)


def test_menu_choices_match_original_numbering() -> None:
    assert POLICY_CHOICES == {1: "FIFO", 2: "OPT", 3: "LRU"}
