import pytest

from gosh.parser import ParseError, parse_command


def test_empty_line():
    assert parse_command("   ") == ("", [])


def test_simple_words():
    assert parse_command("ls -l -a") == ("ls", ["-l", "-a"])


def test_quotes_group_words():
    assert parse_command('newnote todo "buy some milk"') == (
        "newnote",
        ["todo", "buy some milk"],
    )


def test_repeated_spaces_ignored():
    assert parse_command("  cd    dir  ") == ("cd", ["dir"])


def test_empty_quotes_give_nothing():
    assert parse_command('""') == ("", [])


def test_unclosed_quote():
    with pytest.raises(ParseError, match="unclosed quotes"):
        parse_command('echo "hello')