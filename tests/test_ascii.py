import string

import pytest

from pfmt.ascii import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII_CHARS = [chr(code) for code in range(128)]


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_classes_match_string_constants(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)
    assert is_digit(ch) == (ch in string.digits)
    assert is_alnum(ch) == (ch in string.ascii_letters + string.digits)


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_is_print_agrees_with_str_isprintable(ch):
    assert is_print(ch) == ch.isprintable()


def test_int_and_str_inputs_agree():
    for code in range(200):
        ch = chr(code)
        assert is_alpha(code) == is_alpha(ch)
        assert is_digit(code) == is_digit(ch)
        assert is_print(code) == is_print(ch)
        assert is_ascii(code) == is_ascii(ch)


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_digit("٣")
    assert not is_alnum("ß")


def test_case_mapping_on_letters():
    assert to_upper("a") == "A"
    assert to_lower("Z") == "z"
    assert to_upper(ord("q")) == ord("Q")


def test_case_mapping_round_trip():
    for ch in string.ascii_lowercase:
        assert to_lower(to_upper(ch)) == ch
    for ch in string.ascii_uppercase:
        assert to_upper(to_lower(ch)) == ch


def test_case_mapping_leaves_non_letters_alone():
    for ch in string.digits + string.punctuation + " " + "é":
        assert to_lower(ch) == ch
        assert to_upper(ch) == ch


def test_mapped_string_matches_example():
    text = "HelLo WorlD!"
    assert "".join(to_upper(c) for c in text) == text.upper()
    assert "".join(to_lower(c) for c in text) == text.lower()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")