from functools import partial

import pytest

from _jlistscan.errors import TokenizationError
from _jlistscan.scanner.combinators import one_of, repeated
from _jlistscan.scanner.common import recognize_spelling, skip_whitespace
from _jlistscan.scanner.cursor import TextCursor


@pytest.mark.parametrize("text, spelling", [("  /\\ x", "/\\"), ("  ∧ x", "∧")])
def test_recognize_spelling(text, spelling):
    cursor = TextCursor(text)
    cursor.seek(2)

    assert next(recognize_spelling(cursor, spelling)()) == 2
    assert cursor.tell() == 2 + len(spelling)
    assert cursor.token_end == 2


def test_recognize_partial_spelling_rewinds():
    cursor = TextCursor("/= x")

    with pytest.raises(TokenizationError, match="got '='"):
        next(recognize_spelling(cursor, "/\\")())

    assert cursor.tell() == 0
    assert cursor.token_end == 0


def test_one_of_spellings():
    cursor = TextCursor("\\/ x")
    recognizer = one_of(
        recognize_spelling(cursor, "∨"), recognize_spelling(cursor, "\\/")
    )
    assert next(recognizer()) == 0
    assert cursor.tell() == 2


def test_one_of_fails():
    cursor = TextCursor("x")
    recognizer = one_of(
        recognize_spelling(cursor, "∧"), recognize_spelling(cursor, "/\\")
    )
    with pytest.raises(TokenizationError, match="one of"):
        next(recognizer())
    assert cursor.tell() == 0


def test_skip_whitespace():
    cursor = TextCursor(" \t\r\n x")

    with pytest.raises(StopIteration):
        next(repeated(partial(skip_whitespace, cursor))())

    assert cursor.lookahead == "x"
    assert cursor.token_start == cursor.tell() == 5


def test_skip_whitespace_at_end():
    cursor = TextCursor("")
    with pytest.raises(TokenizationError):
        skip_whitespace(cursor)
