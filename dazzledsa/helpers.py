"""List helpers for DazzleDSA."""

from typing import Any, List


def insert_at(values: List[Any], index: int, value: Any) -> None:
    """Insert ``value`` at ``index`` in place, shifting the tail right.

    Values from ``index`` to the end move one slot to the right, one swap
    at a time. TC O(n - index), SC O(1).

    Args:
        values: List to modify
        index: Target index, between 0 and len(values) included
        value: Value to insert

    Raises:
        IndexError: If index is outside [0, len(values)]
    """
    if index < 0 or index > len(values):
        raise IndexError(
            f"insert index {index} out of range for list of length {len(values)}"
        )

    carried = value
    for position in range(index, len(values)):
        carried, values[position] = values[position], carried

    # Former tail value lands in the new last slot
    values.append(carried)
