from collections.abc import Callable
from typing import NamedTuple

from .lomuto import sort, sort_iterative


class SortingAlgorithm(NamedTuple):
    name: str
    func: Callable[[list], None]
    max_N: int


sorting_algorithms = [
    SortingAlgorithm("Lomuto quick sort", sort, 9),
    SortingAlgorithm("Lomuto quick sort (explicit stack)", sort_iterative, 9),
]
