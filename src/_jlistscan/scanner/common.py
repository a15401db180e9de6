from _jlistscan.errors import TokenizationError

WHITESPACE = " \t\r\n"


def recognize_spelling(cursor, spelling):
    """
    Recognizer combinator for one spelling of a connective, ie. when the
    cursor is at '/\\' in the line "  /\\ x", recognize_spelling(cursor, '/\\')
    yields the column 2.

    The end of the (empty) token is marked before the spelling is consumed
    and the column is that of the first character, so that digraphs and
    single symbols give the same column.

    :param spelling: The characters of the connective.
    :returns: Recognizer yielding the column of the connective.
    """

    def spelling_recognizer():
        start = cursor.tell()
        column = cursor.column
        cursor.mark_end()
        for character in spelling:
            if cursor.lookahead != character:
                found = cursor.lookahead
                cursor.seek(start)
                raise TokenizationError(
                    f"Expected {spelling!r} at {start}, got {found!r}"
                )
            cursor.advance()
        yield column

    return spelling_recognizer


def skip_whitespace(cursor):
    """
    Recognize one whitespace character and drop it as trivia.

    Note: does not actually yield anything, raises TokenizationError
    if the lookahead is not whitespace.
    """
    if cursor.at_end or cursor.lookahead not in WHITESPACE:
        raise TokenizationError(
            f"Expected whitespace at {cursor.tell()} got {cursor.lookahead!r}"
        )
    cursor.skip()
    return iter([])
