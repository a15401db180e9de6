import pytest
from hypothesis import given

from _jlistscan.column_stack import (
    MAX_COLUMN,
    MAX_DEPTH,
    MIN_COLUMN,
    NO_LIST_COLUMN,
    ColumnStack,
)
from _jlistscan.errors import (
    ColumnOutOfRangeError,
    ContractViolationError,
    NestingTooDeepError,
)

from .generators.junction_lists import column_stacks


def test_empty_stack_has_sentinel():
    stack = ColumnStack()
    assert len(stack) == 0
    assert stack.top_or_sentinel() == NO_LIST_COLUMN


def test_push_and_pop():
    stack = ColumnStack()
    stack.push(2)
    stack.push(5)
    assert stack.top_or_sentinel() == 5
    assert stack.pop() == 5
    assert stack.top_or_sentinel() == 2
    assert list(stack) == [2]


def test_pop_empty_is_contract_violation():
    with pytest.raises(ContractViolationError):
        ColumnStack().pop()


def test_nesting_depth_boundary():
    stack = ColumnStack(range(MAX_DEPTH))
    assert len(stack) == MAX_DEPTH

    with pytest.raises(NestingTooDeepError, match="255"):
        stack.push(MAX_DEPTH)

    assert len(stack) == MAX_DEPTH
    assert stack.top_or_sentinel() == MAX_DEPTH - 1


@pytest.mark.parametrize("column", [MIN_COLUMN - 1, MAX_COLUMN + 1])
def test_column_out_of_range(column):
    stack = ColumnStack([1])
    with pytest.raises(ColumnOutOfRangeError):
        stack.push(column)
    assert list(stack) == [1]


def test_copy_is_independent():
    stack = ColumnStack([1, 2])
    copied = stack.copy()
    copied.push(3)
    assert stack == ColumnStack([1, 2])
    assert copied != stack


def test_clear():
    stack = ColumnStack([1, 2])
    stack.clear()
    assert stack == ColumnStack()


@given(column_stacks)
def test_stack_order(columns):
    stack = ColumnStack(columns)
    assert list(stack) == columns
    if columns:
        assert stack.top_or_sentinel() == columns[-1]
    else:
        assert stack.top_or_sentinel() == NO_LIST_COLUMN


def test_sentinel_is_not_a_column():
    with pytest.raises(ColumnOutOfRangeError):
        ColumnStack([NO_LIST_COLUMN])
    assert NO_LIST_COLUMN < MIN_COLUMN
