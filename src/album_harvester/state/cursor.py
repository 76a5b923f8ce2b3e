"""Batch cursor over the stably ordered artist list."""

from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def next_batch(
    full_list: Sequence[T], cursor_index: int, batch_size: int
) -> Tuple[List[T], bool]:
    """
    Return the slice the cursor points at and whether the list is exhausted.

    The slice is ``[cursor_index * batch_size, (cursor_index + 1) * batch_size)``.
    Exhausted means the slice is empty. Advancing and wrapping the cursor is
    left to the caller.
    """
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    if cursor_index < 0:
        raise ValueError(f"cursor_index must not be negative, got {cursor_index}")

    start = cursor_index * batch_size
    batch = list(full_list[start:start + batch_size])
    return batch, not batch


def batch_count(length: int, batch_size: int) -> int:
    """Number of non-empty batches in a list of the given length."""
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    return -(-length // batch_size)
