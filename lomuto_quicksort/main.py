import logging

from .Config import *
from .lomuto import sort


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL)
    arr = list(SAMPLE_ARRAY)
    print("Original array:", arr)
    sort(arr)
    print("Sorted array:", arr)


if __name__ == "__main__":
    main()
