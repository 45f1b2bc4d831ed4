import pytest

from pfmt.conversions import (
    format_char,
    format_decimal,
    format_hex,
    format_pointer,
    format_string,
    format_unsigned,
)
from pfmt.flags import Flags
from pfmt.printf import main, printf, sprintf


def test_literal_text_passes_through():
    assert sprintf("hello world\n") == "hello world\n"


def test_percent_escape():
    assert sprintf("%%") == "%"


@pytest.mark.parametrize(
    "fmt, arg, expected",
    [
        ("|%5c|", "C", "|    C|"),
        ("|%-7.3s|", "hello world", "|hel    |"),
        ("|%-05d|", -42, "|-42  |"),
    ],
)
def test_demo_cases(fmt, arg, expected):
    assert sprintf(fmt, arg) == expected


def test_i_matches_d():
    assert sprintf("%+8i", -77) == sprintf("%+8d", -77)


def test_null_string():
    assert sprintf("%s", None) == format_string(None, Flags())
    assert sprintf("%s", None) == "(null)"


def test_none_pointer_is_zero_address():
    assert sprintf("%p", None) == sprintf("%p", 0)


def test_flags_persist_between_conversions():
    expected_flags = Flags(minus=True, width=5)
    first = format_decimal(1, Flags(minus=True, width=5))
    second = format_decimal(2, expected_flags)
    assert sprintf("%-5d|%d", 1, 2) == first + "|" + second


def test_dot_persists_between_conversions():
    assert sprintf("%.0d%d", 0, 0) == ""


def test_unknown_conversion_is_dropped():
    assert sprintf("a%qb") == "ab"


def test_trailing_percent_is_dropped():
    assert sprintf("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_extra_arguments_are_ignored():
    assert sprintf("%d", 5, 6, 7) == sprintf("%d", 5)


def test_printf_writes_and_counts_conversions_only(capsys):
    count = printf("abc%5d%%\n", 42)
    out = capsys.readouterr().out
    assert out == sprintf("abc%5d%%\n", 42)
    assert count == len(sprintf("%5d", 42))


def test_printf_count_sums_conversions(capsys):
    count = printf("%s-%x", "hello", 255)
    capsys.readouterr()
    assert count == len(sprintf("%s", "hello")) + len(sprintf("%x", 255))


def test_main_prints_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "My function : " + sprintf("|%5c| \n", "C") in out
    assert "My function : " + sprintf("|%-05d| \n", -42) in out
    assert "My function : " + sprintf("|%#015.11X| \n", 4294967295) in out
    assert "The original : " + "|%-7.3s| \n" % "hello world" in out