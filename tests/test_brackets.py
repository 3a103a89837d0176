import pytest

from algobox.brackets import (
    calculate,
    decode_string,
    is_valid,
    min_swaps,
    remove_duplicates,
    remove_stars,
    score_of_parentheses,
)
from algobox.recursion import generate_parenthesis


def test_min_swaps_examples():
    assert min_swaps("][][") == 1
    assert min_swaps("]]][[[") == 2


def test_min_swaps_balanced_needs_none():
    for pattern in generate_parenthesis(3):
        balanced = pattern.replace("(", "[").replace(")", "]")
        assert min_swaps(balanced) == min_swaps("")


def test_is_valid_accepts_generated_strings():
    assert all(is_valid(p) for p in generate_parenthesis(4))


@pytest.mark.parametrize("text", ["()", "()[]{}", "{[]}", ""])
def test_is_valid_accepts(text):
    assert is_valid(text)


@pytest.mark.parametrize("text", ["(]", "([)]", "(", ")", "a", "(a)"])
def test_is_valid_rejects(text):
    assert not is_valid(text)


def test_calculate_simple():
    assert calculate("1 + 1") == 1 + 1
    assert calculate(" 2-1 + 2 ") == 2 - 1 + 2


def test_calculate_nested():
    assert calculate("(1+(4+5+2)-3)+(6+8)") == (1 + (4 + 5 + 2) - 3) + (6 + 8)


def test_calculate_unary_minus():
    assert calculate("-(2+3)") == -(2 + 3)
    assert calculate("10-(3-(2-1))") == 10 - (3 - (2 - 1))


def test_calculate_unbalanced_rejected():
    with pytest.raises(ValueError):
        calculate("1+2)")


def test_decode_string_examples():
    assert decode_string("3[a]2[bc]") == "a" * 3 + "bc" * 2
    assert decode_string("3[a2[c]]") == ("a" + "c" * 2) * 3
    assert decode_string("2[abc]3[cd]ef") == "abc" * 2 + "cd" * 3 + "ef"


def test_decode_string_multi_digit_count():
    assert decode_string("12[x]") == "x" * 12


def test_decode_string_plain_text_unchanged():
    assert decode_string("hello") == "hello"


@pytest.mark.parametrize("text", ["2[a", "a]", "[a]"])
def test_decode_string_malformed(text):
    with pytest.raises(ValueError):
        decode_string(text)


def test_score_of_parentheses_rules():
    unit = score_of_parentheses("()")
    assert unit == 1
    assert score_of_parentheses("(())") == 2 * unit
    assert score_of_parentheses("()()") == unit + unit
    assert score_of_parentheses("(()(()))") == 2 * (unit + score_of_parentheses("(())"))


def test_score_of_parentheses_unbalanced():
    with pytest.raises(ValueError):
        score_of_parentheses(")")


def test_remove_duplicates_example():
    assert remove_duplicates("deeedbbcccbdaa", 3) == "aa"


def test_remove_duplicates_nothing_to_remove():
    assert remove_duplicates("abcd", 2) == "abcd"


def test_remove_duplicates_leaves_no_run_of_k():
    result = remove_duplicates("pbbcggttciiippooaais", 2)
    assert all(a != b for a, b in zip(result, result[1:]))


def test_remove_stars_example():
    assert remove_stars("leet**cod*e") == "lecoe"


def test_remove_stars_erases_everything():
    text = "erase"
    assert remove_stars(text + "*" * len(text)) == ""


def test_remove_stars_without_stars():
    assert remove_stars("plain") == "plain"