import pytest

from algokata.strings import (
    array_strings_are_equal,
    find_the_difference,
    is_palindrome_text,
    is_valid_parentheses,
    longest_continuous_substring,
    min_partitions,
    percentage_letter,
    roman_to_int,
    to_lower_case,
)


def test_roman_single_symbols():
    assert roman_to_int("M") == 1000
    assert roman_to_int("D") == 500
    assert roman_to_int("C") == 100
    assert roman_to_int("L") == 50
    assert roman_to_int("X") == 10
    assert roman_to_int("V") == 5
    assert roman_to_int("I") == 1


def test_roman_additive_and_subtractive():
    assert roman_to_int("III") == 1 + 1 + 1
    assert roman_to_int("IV") == 5 - 1
    assert roman_to_int("LVIII") == 50 + 5 + 1 + 1 + 1
    assert roman_to_int("MCMXCIV") == 1000 + (1000 - 100) + (100 - 10) + (5 - 1)


def test_roman_subtractive_pair_consumes_both_symbols():
    assert roman_to_int("IVX") == roman_to_int("IV") + roman_to_int("X")


def test_roman_unknown_symbol_counts_as_one():
    assert roman_to_int("Z") == roman_to_int("I")


def test_roman_empty():
    assert roman_to_int("") == 0


@pytest.mark.parametrize("s", ["()", "()[]{}", "{[]}", "", "([{}])"])
def test_valid_parentheses(s):
    assert is_valid_parentheses(s)


@pytest.mark.parametrize("s", ["(]", "([)]", "(", ")(", "((", "ab", "(}"])
def test_invalid_parentheses(s):
    assert not is_valid_parentheses(s)


@pytest.mark.parametrize("s", ["A man, a plan, a canal: Panama", " ", "", "0P0", "Aa"])
def test_palindrome_text(s):
    assert is_palindrome_text(s)


@pytest.mark.parametrize("s", ["race a car", "0P", "ab"])
def test_not_palindrome_text(s):
    assert not is_palindrome_text(s)


@pytest.mark.parametrize("s,extra", [("abcd", "e"), ("", "y"), ("aab", "a")])
def test_find_the_difference(s, extra):
    assert find_the_difference(s, s + extra) == extra
    assert find_the_difference(s, extra + s[::-1]) == extra


@pytest.mark.parametrize("s", ["Hello", "here", "LOVELY", "Mixed 123 Text!"])
def test_to_lower_case_ascii(s):
    assert to_lower_case(s) == s.lower()


def test_to_lower_case_leaves_non_ascii():
    s = "\u00c0B"
    result = to_lower_case(s)
    assert result[0] == s[0]
    assert result[1] == s[1].lower()


def test_array_strings_are_equal():
    assert array_strings_are_equal(["ab", "c"], ["a", "bc"])
    assert array_strings_are_equal(["abc", "d", "defg"], ["abcddefg"])
    assert not array_strings_are_equal(["a", "cb"], ["ab", "c"])


@pytest.mark.parametrize("n,expected", [("32", 3), ("82734", 8), ("27346209830709182346", 9)])
def test_min_partitions(n, expected):
    assert min_partitions(n) == expected


def test_min_partitions_empty():
    assert min_partitions("") == 0


def test_percentage_letter_bounds():
    assert percentage_letter("aaaa", "a") == 100
    assert percentage_letter("jjjj", "k") == 0


def test_percentage_letter_rounds_down():
    s = "foobar"
    result = percentage_letter(s, "o")
    assert result * len(s) <= s.count("o") * 100 < (result + 1) * len(s)


def test_percentage_letter_empty():
    with pytest.raises(ZeroDivisionError):
        percentage_letter("", "a")


@pytest.mark.parametrize("s", ["abcde", "xyz", "a"])
def test_longest_continuous_whole_string(s):
    assert longest_continuous_substring(s) == len(s)


def test_longest_continuous_inside():
    assert longest_continuous_substring("zzabcdzz") == len("abcd")
    assert longest_continuous_substring("abacaba") == len("ab")


def test_longest_continuous_empty_is_one():
    assert longest_continuous_substring("") == 1