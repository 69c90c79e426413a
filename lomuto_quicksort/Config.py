import os
from pathlib import Path

SAMPLE_ARRAY = (64, 34, 25, 12, 22, 11, 90)

MAX_SAMPLE_TIME_MS = 1000
SAMPLE_SEED = 0

STATISTICS_NS = list(range(3, 10)) + list(range(10, 100, 10)) + list(range(100, 1000, 100))
RESULT_DIR = Path("logs/statistics.csv")

LOG_LEVEL = os.environ.get("LOMUTO_QUICKSORT_LOG_LEVEL", "INFO")
