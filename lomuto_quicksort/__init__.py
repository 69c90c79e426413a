from .lomuto import InvalidArgumentError, partition, quick_sort, sort, sort_iterative
from .registry import SortingAlgorithm, sorting_algorithms
