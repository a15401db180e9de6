"""
In this module, a recognizer is a generator that inspects a Cursor. If the
expected spelling is not found, the recognizer winds the cursor back to the
position where it started and raises a TokenizationError.

The JunctionListScanner is consulted by the host at every position where a
structural token of a junction list may occur, and either emits one such
token or declines so that the host tokenizes the input itself. Whether a
list opens, continues or closes is decided from the column of the next
token relative to the anchor columns of the currently open lists.

Scanners only recognize one connective family, see Junction. Grammars with
both conjunction and disjunction lists use one scanner for each.
"""

from .cursor import Cursor, TextCursor
from .junction import Junction
from .junction_list_scanner import JunctionListScanner
from .token import Token
from .token_kind import JListTokenKind

__all__ = [
    "Cursor",
    "JListTokenKind",
    "Junction",
    "JunctionListScanner",
    "TextCursor",
    "Token",
]
