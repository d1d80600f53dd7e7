import pytest

from algoritma.wildcard import wildcard_match

WORDS = ["", "a", "baaabab", "hello", "xyzzy"]


@pytest.mark.parametrize(
    "pattern", ["*****ba*****ab", "ba*****ab", "ba*ab"]
)
def test_source_patterns_match(pattern):
    assert wildcard_match("baaabab", pattern) is True


def test_pattern_with_wrong_first_letter_fails():
    assert wildcard_match("baaabab", "a*ab") is False


@pytest.mark.parametrize("text", WORDS)
def test_star_matches_everything(text):
    assert wildcard_match(text, "*")
    assert wildcard_match(text, "***")


@pytest.mark.parametrize("text", WORDS)
def test_text_matches_itself(text):
    assert wildcard_match(text, text)


@pytest.mark.parametrize("text", WORDS)
def test_question_marks_match_exact_length(text):
    assert wildcard_match(text, "?" * len(text))
    assert not wildcard_match(text, "?" * (len(text) + 1))


@pytest.mark.parametrize("text", [w for w in WORDS if w])
def test_empty_pattern_only_matches_empty_text(text):
    assert not wildcard_match(text, "")
    assert wildcard_match("", "")


@pytest.mark.parametrize("text", [w for w in WORDS if w])
def test_prefix_star_suffix(text):
    assert wildcard_match(text, text[0] + "*")
    assert wildcard_match(text, "*" + text[-1])
    assert not wildcard_match(text, text + "q")