import pytest

from flagline.parser import Options, TokenKind, classify_token


@pytest.fixture
def options() -> Options:
    options = Options()
    options.add_option("-f", "--file", arity="one")
    options.add_option("-v")
    return options


@pytest.mark.parametrize(
    "token, expected",
    [
        ("--", TokenKind.TERMINATOR),
        ("-", TokenKind.LONE_DASH),
        ("-f", TokenKind.KNOWN_OPTION),
        ("--file", TokenKind.KNOWN_OPTION),
        ("--f", TokenKind.KNOWN_OPTION),
        ("-file", TokenKind.KNOWN_OPTION),
        ("-x", TokenKind.UNKNOWN_DASHED),
        ("--file=a", TokenKind.UNKNOWN_DASHED),
        ("---", TokenKind.UNKNOWN_DASHED),
        ("---v", TokenKind.UNKNOWN_DASHED),
        ("----file", TokenKind.UNKNOWN_DASHED),
        ("file", TokenKind.POSITIONAL),
        ("v", TokenKind.POSITIONAL),
        ("", TokenKind.POSITIONAL),
    ],
)
def test_classify_token(options, token, expected):
    assert classify_token(token, options) is expected
