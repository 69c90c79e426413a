import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


class InvalidArgumentError(Exception):
    def __init__(self, msg: str) -> None:
        super().__init__("Invalid argument: " + msg)


def _check(arr: Any) -> None:
    if arr is None:
        raise InvalidArgumentError("sequence is None")
    if isinstance(arr, Mapping) or not all(hasattr(arr, attr) for attr in ("__getitem__", "__setitem__", "__len__")):
        raise InvalidArgumentError(f"expected a mutable sequence, got {type(arr).__name__}")
    # rows of a 2-D numpy array are views, swapping them would clobber data
    if getattr(arr, "ndim", 1) != 1:
        raise InvalidArgumentError(f"expected a one-dimensional sequence, got {arr.ndim} dimensions")


def partition(arr, low: int, high: int) -> int:
    """Lomuto partition of ``arr[low:high + 1]`` around ``arr[high]``, returns the pivot's final index."""
    pivot = arr[high]
    i = low - 1
    for j in range(low, high):
        if arr[j] < pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    return i + 1


def quick_sort(arr, low: int, high: int) -> None:
    # recursion depth is O(n) on already sorted input
    if low < high:
        p = partition(arr, low, high)
        quick_sort(arr, low, p - 1)
        quick_sort(arr, p + 1, high)


def sort(arr) -> None:
    """Sort ``arr`` in place into non-decreasing order."""
    _check(arr)
    logger.debug("sorting %d elements", len(arr))
    if len(arr) <= 1:
        return
    quick_sort(arr, 0, len(arr) - 1)


def sort_iterative(arr) -> None:
    """Same partitions in the same order as :func:`sort`, using an explicit stack of ranges."""
    _check(arr)
    logger.debug("sorting %d elements with an explicit stack", len(arr))
    if len(arr) <= 1:
        return
    stack = [(0, len(arr) - 1)]
    while stack:
        low, high = stack.pop()
        if low < high:
            p = partition(arr, low, high)
            stack.append((p + 1, high))
            stack.append((low, p - 1))
