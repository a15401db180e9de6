from enum import Enum, auto, unique


@unique
class JListTokenKind(Enum):
    # Declaration order is the order of the host's valid symbol array.
    LIST_OPEN = auto()
    ITEM_SEPARATOR = auto()
    LIST_CLOSE = auto()

    @classmethod
    def from_valid_symbols(cls, valid_symbols):
        """
        :param valid_symbols: Sequence of booleans indexed in
            declaration order, eg. [True, False, False].
        :returns: Set of the kinds flagged as valid.
        """
        kinds = list(cls)
        if len(valid_symbols) != len(kinds):
            raise ValueError(
                f"Expected {len(kinds)} valid symbol flags, got {len(valid_symbols)}"
            )
        return {kind for kind, valid in zip(kinds, valid_symbols) if valid}
