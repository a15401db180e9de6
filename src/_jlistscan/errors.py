class TokenizationError(Exception):
    """
    A recognizer will throw a TokenizationError if the expected spelling
    is not found at the cursor (however, it could be that some other
    token not covered by that recognizer is at the cursor). The cursor
    is rewound to where the recognizer started before raising.
    """

    pass


class ContractViolationError(Exception):
    """
    Raised when the legality oracle of the host grammar and the column
    stack disagree, ie. the stack requires a structural token which the
    grammar does not accept at this position. This signals that the
    grammar and the scanner have fallen out of sync, not malformed input.
    """

    pass


class CapacityError(Exception):
    """
    Raised when a junction list cannot be represented in the scanner
    state. The construct should be rejected by the host.
    """

    pass


class NestingTooDeepError(CapacityError):
    """
    Thrown when opening a junction list would exceed the maximum
    nesting depth.
    """

    pass


class ColumnOutOfRangeError(CapacityError):
    """
    Thrown when the column of a connective does not fit into the
    16 bit column field of the serialized state.
    """

    pass


class StateFormatError(Exception):
    """
    Raised when a serialized scanner state is malformed and strict
    decoding was requested.
    """

    pass
