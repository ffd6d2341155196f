import pytest

from spaceman.utils import abbreviate_string, bytes_display


def test_small_counts_are_plain_bytes():
    assert bytes_display(0) == "0B"
    assert bytes_display(512) == "512B"


def test_exactly_one_kib_stays_in_bytes():
    assert bytes_display(1024) == "1024B"


def test_kilobytes():
    assert bytes_display(1025) == "1.00KB"


@pytest.mark.parametrize(
    "value, suffix",
    [
        (2 * 1024, "KB"),
        (1024 * 1024, "KB"),
        (1024 * 1024 + 1, "MB"),
        (5 * 1024 * 1024, "MB"),
        (1024 * 1024 * 1024 + 1, "GB"),
        (40 * 1024 * 1024 * 1024, "GB"),
    ],
)
def test_unit_boundaries(value, suffix):
    result = bytes_display(value)
    assert result.endswith(suffix)
    number = result[: -len(suffix)]
    assert len(number.split(".")[1]) == 2


def test_gigabytes_value():
    assert bytes_display(3 * 1024 * 1024 * 1024) == "3.00GB"


def test_abbreviate_short_string_unchanged():
    assert abbreviate_string("short", 15) == "short"
    assert abbreviate_string("exactly15chars!", 15) == "exactly15chars!"


def test_abbreviate_long_string():
    text = "a_very_long_file_name.txt"
    result = abbreviate_string(text, 15)
    assert len(result) == 15
    assert result.endswith("...")
    assert text.startswith(result[:-3])


def test_abbreviate_counts_characters_not_bytes():
    text = "ééééééééééééééééééé"
    result = abbreviate_string(text, 10)
    assert len(result) == 10
    assert result[:-3] == text[:7]


def test_abbreviate_too_small_limit_raises():
    with pytest.raises(ValueError):
        abbreviate_string("abcdef", 2)