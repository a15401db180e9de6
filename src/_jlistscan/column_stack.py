from _jlistscan.errors import (
    ColumnOutOfRangeError,
    ContractViolationError,
    NestingTooDeepError,
)

# The depth is stored in a single byte and every column in
# a signed 16 bit field of the serialized state. Columns are never
# negative, so NO_LIST_COLUMN is below every anchor column.
MAX_DEPTH = 255
MIN_COLUMN = 0
MAX_COLUMN = 2**15 - 1

NO_LIST_COLUMN = -1


class ColumnStack:
    """
    The anchor columns of the currently open junction lists, the
    outermost list at the bottom and the innermost list at the top.

    >>> stack = ColumnStack()
    >>> stack.top_or_sentinel()
    -1
    >>> stack.push(2)
    >>> stack.push(5)
    >>> stack.pop()
    5
    >>> list(stack)
    [2]

    """

    def __init__(self, columns=()):
        """
        :param columns: Initial anchor columns, bottom to top.
        """
        self._columns = []
        for column in columns:
            self.push(column)

    def push(self, column):
        """
        Open a new innermost list anchored at the given column.

        :raises NestingTooDeepError: If the stack is already at MAX_DEPTH.
        :raises ColumnOutOfRangeError: If the column is negative or does
            not fit in 16 signed bits.
        """
        if not MIN_COLUMN <= column <= MAX_COLUMN:
            raise ColumnOutOfRangeError(
                f"Column {column} is outside of [{MIN_COLUMN}, {MAX_COLUMN}]"
            )
        if len(self._columns) >= MAX_DEPTH:
            raise NestingTooDeepError(
                f"Junction lists nested deeper than {MAX_DEPTH} levels "
                f"(at column {column})"
            )
        self._columns.append(column)

    def pop(self):
        if not self._columns:
            raise ContractViolationError("Attempted to close a list when none is open")
        return self._columns.pop()

    def top_or_sentinel(self):
        """
        :returns: The anchor column of the innermost open list, or
            NO_LIST_COLUMN if no list is open.
        """
        if not self._columns:
            return NO_LIST_COLUMN
        return self._columns[-1]

    def clear(self):
        self._columns.clear()

    def copy(self):
        return ColumnStack(self._columns)

    def __len__(self):
        return len(self._columns)

    def __iter__(self):
        return iter(self._columns)

    def __eq__(self, other):
        if not isinstance(other, ColumnStack):
            return NotImplemented
        return self._columns == other._columns

    def __repr__(self):
        return f"ColumnStack({self._columns})"
