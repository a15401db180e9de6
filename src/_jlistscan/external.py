"""
Functions with the lifecycle of a parser generator's external scanner:
the host creates one scanner per parse session, calls scan once per
candidate token with a flag for each structural token kind, serializes
after every token it accepts and deserializes whenever it backtracks or
re-lexes after an edit.
"""

from _jlistscan.errors import ContractViolationError
from _jlistscan.scanner.junction_list_scanner import JunctionListScanner
from _jlistscan.scanner.token_kind import JListTokenKind


class ExternalScanner:
    """
    Handle for a scanner owned by a host, see create.
    """

    def __init__(self, scanner):
        self._scanner = scanner

    @property
    def scanner(self):
        if self._scanner is None:
            raise ContractViolationError("Scanner used after it was destroyed")
        return self._scanner

    @property
    def destroyed(self):
        return self._scanner is None


def create(**options):
    """
    :param options: Keyword arguments of JunctionListScanner.
    :returns: A handle to a scanner with no open lists.
    """
    return ExternalScanner(JunctionListScanner(**options))


def destroy(handle):
    if not handle.destroyed:
        handle.scanner.deserialize(b"")
        handle._scanner = None


def serialize(handle):
    return handle.scanner.serialize()


def deserialize(handle, buffer):
    handle.scanner.deserialize(buffer)


def scan(handle, cursor, valid_symbols):
    """
    :param valid_symbols: Sequence of three booleans telling whether
        LIST_OPEN, ITEM_SEPARATOR and LIST_CLOSE are valid, in that order.
    :returns: The emitted Token or None.
    """
    valid = JListTokenKind.from_valid_symbols(valid_symbols)
    return handle.scanner.scan(cursor, valid)
