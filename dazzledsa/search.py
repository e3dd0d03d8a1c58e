"""Binary search family for DazzleDSA.

All functions expect ``values`` sorted in non-decreasing order. Duplicates
are allowed. TC O(log n), SC O(1).
"""

from typing import Optional, Sequence


def find(values: Sequence, target, head: int = 0, tail: Optional[int] = None) -> int:
    """Find an index holding ``target``.

    With duplicates, any matching index may be returned; which one depends
    on where the midpoints fall.

    Args:
        values: Sorted sequence
        target: Value to look for
        head: First index of the lookup range
        tail: Last index of the lookup range (inclusive, defaults to the end)

    Returns:
        Index of target, or -1 if not found
    """
    if tail is None:
        tail = len(values) - 1

    while head <= tail:
        mid = head + ((tail - head) >> 1)

        if values[mid] < target:
            # Too small: drop left side and mid
            head = mid + 1
        elif values[mid] > target:
            # Too big: drop right side and mid
            tail = mid - 1
        else:
            return mid

    return -1


def lower_bound(values: Sequence, target, low: int = 0, high: Optional[int] = None) -> int:
    """Find the leftmost index whose value is greater than or equal to ``target``.

    This is where ``target`` can be inserted while keeping ``values`` sorted,
    before any equal values.

    Args:
        values: Sorted sequence
        target: Value to position
        low: First index of the lookup range
        high: End of the lookup range (exclusive, defaults to len(values))

    Returns:
        Insertion index; len(values) when target is above every value
    """
    if high is None:
        high = len(values)

    while low < high:
        mid = low + ((high - low) >> 1)

        if values[mid] < target:
            low = mid + 1
        else:
            # Equal or greater: mid may be the answer, keep it
            high = mid

    return low


def upper_bound(values: Sequence, target, low: int = 0, high: Optional[int] = None) -> int:
    """Find the leftmost index whose value is strictly greater than ``target``.

    Insertion point after any values equal to ``target``.

    Returns:
        Insertion index; len(values) when target is at or above the tail value
    """
    if high is None:
        high = len(values)

    while low < high:
        mid = low + ((high - low) >> 1)

        if values[mid] <= target:
            low = mid + 1
        else:
            high = mid

    return low
