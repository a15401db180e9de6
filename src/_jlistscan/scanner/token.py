from dataclasses import dataclass

from _jlistscan.scanner.token_kind import JListTokenKind


@dataclass
class Token:
    """
    A structural token of a junction list. Structural tokens never contain
    text so start == end, column is the column which decided the token.
    """

    kind: JListTokenKind
    start: int
    end: int
    column: int
