"""
The state codec serializes a ColumnStack so that the host can snapshot the
scanner between tokens and restore it when it backtracks or re-lexes after
an edit.

The format is one unsigned byte giving the depth N of the stack, followed by
N signed 16 bit columns in stack order (bottom to top).
"""

import warnings

import numpy as np

from _jlistscan.column_stack import ColumnStack
from _jlistscan.errors import StateFormatError

DEPTH_SIZE = 1
COLUMN_SIZE = 2


def column_dtype(endianess):
    if endianess == "little":
        return np.dtype("<i2")
    if endianess == "big":
        return np.dtype(">i2")
    raise ValueError("endianess has to be either 'little' or 'big'")


def encoded_size(depth):
    """
    :returns: The number of bytes used to serialize a stack of
        the given depth.
    """
    return DEPTH_SIZE + COLUMN_SIZE * depth


def encode(stack, endianess="little"):
    """
    Serialize a column stack.

    :param stack: Any iterable of columns, bottom to top, for instance
        a ColumnStack.
    :param endianess: Byte order of the column values.
    :returns: The serialized stack as bytes.
    """
    dtype = column_dtype(endianess)
    columns = ColumnStack(stack)
    return bytes([len(columns)]) + np.array(list(columns), dtype=dtype).tobytes()


def decode(buffer, endianess="little", strict=False):
    """
    Deserialize a column stack.

    An empty buffer is the empty stack. Bytes following the last column
    are ignored.

    :param buffer: A bytes-like object as returned by encode.
    :param endianess: Byte order of the column values.
    :param strict: Whether to raise StateFormatError on a truncated
        buffer. Otherwise the columns which are present are kept and
        a warning is emitted.
    :returns: The decoded ColumnStack.
    """
    dtype = column_dtype(endianess)
    buffer = bytes(buffer)
    if not buffer:
        return ColumnStack()

    depth = buffer[0]
    available = (len(buffer) - DEPTH_SIZE) // COLUMN_SIZE
    if available < depth:
        message = (
            f"Scanner state declares {depth} columns but only "
            f"{len(buffer)} bytes were given, expected {encoded_size(depth)}"
        )
        if strict:
            raise StateFormatError(message)
        warnings.warn(message + f". Keeping the first {available} columns.")
        depth = available
    if depth == 0:
        return ColumnStack()

    columns = np.frombuffer(buffer, dtype=dtype, count=depth, offset=DEPTH_SIZE)
    return ColumnStack(int(c) for c in columns)
