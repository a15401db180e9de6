from collections.abc import Mapping
from contextlib import contextmanager
from functools import partial

from _jlistscan import state_codec
from _jlistscan.column_stack import ColumnStack
from _jlistscan.errors import (
    CapacityError,
    ContractViolationError,
    TokenizationError,
)
from _jlistscan.scanner.combinators import one_of, repeated
from _jlistscan.scanner.common import recognize_spelling, skip_whitespace
from _jlistscan.scanner.junction import Junction
from _jlistscan.scanner.token import Token
from _jlistscan.scanner.token_kind import JListTokenKind


def legal_kinds(valid_tokens):
    """
    :param valid_tokens: Either a collection of JListTokenKind or a
        mapping from JListTokenKind to bool.
    :returns: The set of kinds the grammar accepts.
    """
    if isinstance(valid_tokens, Mapping):
        return {kind for kind, valid in valid_tokens.items() if valid}
    return set(valid_tokens)


class JunctionListScanner:
    """
    Decides where junction lists open, continue and close.

    Junction lists are identified by the column of the connective of their
    first item (the anchor column). The scanner keeps the anchor columns of
    the open lists on a ColumnStack and, for each position the host asks
    about, emits at most one of LIST_OPEN, ITEM_SEPARATOR and LIST_CLOSE.
    For instance, in

        /\\ a
        /\\ /\\ b
           /\\ c
        /\\ d

    LIST_OPEN is emitted before the connective of line 1 and the second
    connective of line 2, ITEM_SEPARATOR before the first connective of
    lines 2 and 3, and LIST_CLOSE followed by ITEM_SEPARATOR before line 4.

    The scanner is only advisory: it never emits a token the grammar did
    not declare legal. The state can be saved with serialize and restored
    with deserialize at any token boundary.
    """

    def __init__(
        self, junction=Junction.CONJUNCTION, endianess="little", close_at_eof=False
    ):
        """
        :param junction: The connective family of the lists recognized.
        :param endianess: Byte order of columns in the serialized state.
        :param close_at_eof: Whether to close open lists at the end of input.
        """
        self.junction = Junction(junction)
        self._endianess = None
        self.endianess = endianess
        self.close_at_eof = close_at_eof
        self._stack = ColumnStack()

    @property
    def endianess(self):
        return self._endianess

    @endianess.setter
    def endianess(self, value):
        if value not in ["little", "big"]:
            raise ValueError("endianess has to be either 'little' or 'big'")
        self._endianess = value

    @property
    def columns(self):
        return tuple(self._stack)

    @property
    def depth(self):
        return len(self._stack)

    def serialize(self):
        return state_codec.encode(self._stack, self.endianess)

    def deserialize(self, buffer, strict=False):
        self._stack = state_codec.decode(buffer, self.endianess, strict=strict)

    @contextmanager
    def speculative(self):
        """
        Context manager for exploring a parse branch: any change
        to the open lists is undone on exit.
        """
        snapshot = self.serialize()
        try:
            yield self
        finally:
            self.deserialize(snapshot)

    def scan(self, cursor, valid_tokens):
        """
        Scan for a structural token at the cursor.

        On success the cursor is left at the end of the returned token,
        otherwise it is rewound to where it was when scan was called.

        :param cursor: The Cursor for the input.
        :param valid_tokens: The structural tokens the grammar accepts
            at this position, see legal_kinds.
        :returns: The Token emitted, or None if the host should tokenize
            the input itself.
        :raises ContractViolationError: If the open lists require a token
            which is not valid.
        :raises CapacityError: If a list can not be opened.
        """
        valid = legal_kinds(valid_tokens)
        if not valid:
            return None

        start = cursor.tell()
        cursor.seek(start)
        try:
            token = next(self.tokenize_junction(cursor, valid), None)
        except (CapacityError, ContractViolationError):
            cursor.seek(start)
            raise

        if token is None:
            cursor.seek(start)
        else:
            cursor.seek(token.end)
        return token

    def tokenize_junction(self, cursor, valid):
        """
        Tokenizer yielding at most one structural token at the cursor.
        """
        yield from repeated(partial(skip_whitespace, cursor))()

        if cursor.at_end:
            yield from self.handle_end_of_input(cursor, valid)
            return

        column = cursor.column
        try:
            column = next(self.tokenize_connective(cursor)())
        except TokenizationError:
            yield from self.handle_non_connective(cursor, valid, column)
        else:
            yield from self.handle_connective(cursor, valid, column)

    def tokenize_connective(self, cursor):
        return one_of(
            *[recognize_spelling(cursor, s) for s in self.junction.spellings]
        )

    def handle_connective(self, cursor, valid, column):
        """
        There are four cases for a connective at the given column:
        1. Right of the current anchor and LIST_OPEN is valid
           -> a new nested list, emit LIST_OPEN
        2. Right of the current anchor and LIST_OPEN is not valid
           -> an infix operator, emit nothing
        3. At the current anchor
           -> the next item of the current list, emit ITEM_SEPARATOR
        4. Left of the current anchor
           -> the current list has ended, emit LIST_CLOSE
        """
        current = self._stack.top_or_sentinel()
        if current < column:
            if JListTokenKind.LIST_OPEN in valid:
                self._stack.push(column)
                yield self.make_token(JListTokenKind.LIST_OPEN, cursor, column)
        elif current == column:
            self.require(JListTokenKind.ITEM_SEPARATOR, valid, column)
            yield self.make_token(JListTokenKind.ITEM_SEPARATOR, cursor, column)
        else:
            yield from self.close_list(cursor, valid, column)

    def handle_non_connective(self, cursor, valid, column):
        """
        Any other token at or left of the current anchor ends the list.
        Tokens right of the anchor are part of the expression of the
        current item, eg.

            /\\ IF e THEN P
                    ELSE Q
            /\\ R

        so nothing is emitted.
        """
        current = self._stack.top_or_sentinel()
        if column <= current:
            yield from self.close_list(cursor, valid, column)
        # TODO: close lists at right delimiters matching a left delimiter
        # opened before the list began, and at the start of the next unit
        # (eg. "op == expr"), even when right of the anchor.

    def handle_end_of_input(self, cursor, valid):
        if (
            self.close_at_eof
            and len(self._stack) > 0
            and JListTokenKind.LIST_CLOSE in valid
        ):
            yield from self.close_list(cursor, valid, cursor.column)

    def close_list(self, cursor, valid, column):
        # One level per call, the host scans the same position again
        # to close further lists.
        self.require(JListTokenKind.LIST_CLOSE, valid, column)
        self._stack.pop()
        yield self.make_token(JListTokenKind.LIST_CLOSE, cursor, column)

    def require(self, kind, valid, column):
        if kind not in valid:
            raise ContractViolationError(
                f"Open lists at columns {list(self._stack)} require {kind.name} "
                f"for column {column}, but the grammar only accepts "
                f"{sorted(k.name for k in valid)}"
            )

    @staticmethod
    def make_token(kind, cursor, column):
        return Token(kind, cursor.token_start, cursor.token_end, column)
