import jlistscan.version
from _jlistscan.column_stack import MAX_DEPTH, NO_LIST_COLUMN, ColumnStack
from _jlistscan.errors import (
    CapacityError,
    ColumnOutOfRangeError,
    ContractViolationError,
    NestingTooDeepError,
    StateFormatError,
)
from _jlistscan.scanner import (
    Cursor,
    JListTokenKind,
    Junction,
    JunctionListScanner,
    TextCursor,
    Token,
)
from _jlistscan.state_codec import decode, encode

__author__ = """JListScan developers"""

__version__ = jlistscan.version.version

__all__ = [
    "MAX_DEPTH",
    "NO_LIST_COLUMN",
    "CapacityError",
    "ColumnOutOfRangeError",
    "ColumnStack",
    "ContractViolationError",
    "Cursor",
    "JListTokenKind",
    "Junction",
    "JunctionListScanner",
    "NestingTooDeepError",
    "StateFormatError",
    "TextCursor",
    "Token",
    "decode",
    "encode",
]
