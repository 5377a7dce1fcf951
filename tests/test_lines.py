import pytest

from rank_snapshots.errors import MalformedLine, ParseError
from rank_snapshots.lines import split_line


def test_three_tokens_pass_through():
    assert split_line("John Doe  ESP 1200 3") == ("John Doe", ["ESP", "1200", "3"])


def test_two_tokens_get_empty_country():
    assert split_line("John Doe  1200 3") == ("John Doe", ["", "1200", "3"])


def test_other_token_counts_are_kept():
    assert split_line("John Doe  ESP 1200 3 9") == ("John Doe", ["ESP", "1200", "3", "9"])
    assert split_line("John Doe  1200") == ("John Doe", ["1200"])


def test_split_happens_at_first_run_only():
    name, tokens = split_line("Ana Lopez     ARG    850   12")
    assert name == "Ana Lopez"
    assert tokens == ["ARG", "850", "12"]


def test_wider_separator():
    assert split_line("John Doe   ESP 1200 3", separator_width=3) == ("John Doe", ["ESP", "1200", "3"])
    with pytest.raises(MalformedLine):
        split_line("John Doe  ESP 1200 3", separator_width=3)


def test_line_without_separator_is_malformed():
    with pytest.raises(ParseError) as exc:
        split_line("John Doe ESP 1200 3", line_number=7)
    assert isinstance(exc.value, MalformedLine)
    assert exc.value.line_number == 7
    assert "line 7" in str(exc.value)


def test_empty_line_is_malformed():
    with pytest.raises(MalformedLine):
        split_line("")


def test_invalid_width():
    with pytest.raises(ValueError):
        split_line("John Doe  ESP 1200 3", separator_width=0)
