"""Small in-place array algorithms."""

from __future__ import annotations

from collections.abc import MutableSequence

__all__ = ["move_zeros", "merge_sort"]


def move_zeros(nums: MutableSequence[int]) -> None:
    """Shift every zero to the end of ``nums`` in place.

    The non-zero values keep their relative order.
    """
    write = 0
    for value in list(nums):
        if value != 0:
            nums[write] = value
            write += 1
    for index in range(write, len(nums)):
        nums[index] = 0


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _sorted_run(values: list[int]) -> list[int]:
    if len(values) <= 1:
        return values
    if len(values) == 2:
        first, second = values
        return [second, first] if first > second else values
    # Left half takes the middle element, as with an inclusive midpoint.
    mid = (len(values) - 1) // 2 + 1
    return _merge(_sorted_run(values[:mid]), _sorted_run(values[mid:]))


def merge_sort(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``nums`` in place with a stable merge sort and return it."""
    nums[:] = _sorted_run(list(nums))
    return nums