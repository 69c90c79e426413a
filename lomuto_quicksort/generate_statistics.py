import logging
from collections.abc import Generator, Sequence
from decimal import Decimal
from functools import cmp_to_key
from itertools import permutations, product
from math import factorial, log2, nan
from multiprocessing import Pool
from pathlib import Path
from random import Random
from time import thread_time
from typing import NamedTuple, Optional

import numpy as np
import pandas as pd
import plotly.express as px
from tqdm import tqdm

from .Config import *
from .registry import SortingAlgorithm, sorting_algorithms

logger = logging.getLogger(__name__)

CSV_HEADER = "name,N,input,lower bound,best,worst,avg,std,ratio"


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid sorting algorithm: `{name}` produced an unsorted output")


class IdxVal(NamedTuple):
    idx: int
    val: int


def sampler(N: int, r: Random) -> Generator[list[int], None, None]:
    arr = list(range(N))
    while True:
        r.shuffle(arr)
        yield arr


def is_identity(arr: Sequence[int]) -> bool:
    return all(i == v for i, v in enumerate(arr))


def to_displayable_int(x: int) -> str:
    return str(x) if x < 1e9 else f"{Decimal(x):.2e}"


def count_comparisons(sorting_algorithm: SortingAlgorithm, val_array: Sequence[int]) -> int:
    def cmp(x: IdxVal, y: IdxVal) -> int:
        nonlocal operation_cnt
        operation_cnt += 1
        return x.val - y.val

    key = cmp_to_key(cmp)
    operation_cnt = 0
    idx_array = [key(IdxVal(i, x)) for i, x in enumerate(val_array)]
    sorting_algorithm.func(idx_array)
    if not is_identity([x.obj.val for x in idx_array]):
        raise InvalidSortingAlgorithmError(sorting_algorithm.name)
    return operation_cnt


def get_operation_cnts(sorting_algorithm: SortingAlgorithm, N: int, seed: int = SAMPLE_SEED) -> np.ndarray:
    do_sample = N > sorting_algorithm.max_N
    operation_cnts = []
    start_time = thread_time()
    r = Random(seed)
    for val_array in sampler(N, r) if do_sample else permutations(range(N)):
        operation_cnts.append(count_comparisons(sorting_algorithm, val_array))
        if do_sample and int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS:
            break
    return np.array(operation_cnts)


def _work(args: tuple[int, int]) -> str:
    sorting_algorithm_idx, N = args
    sorting_algorithm = sorting_algorithms[sorting_algorithm_idx]
    data = get_operation_cnts(sorting_algorithm, N)
    input_total = factorial(N)
    lower_bound = log2(input_total)
    avg = data.mean()
    ratio = avg / lower_bound if lower_bound > 0 else nan
    return ",".join(
        map(
            str,
            (sorting_algorithm.name, N, to_displayable_int(input_total), lower_bound, data.min(), data.max(), avg, data.std(), ratio),
        )
    )


def generate_statistics(Ns: Optional[list[int]] = None, result_path: Path = RESULT_DIR, processes: Optional[int] = None) -> None:
    if Ns is None:
        Ns = STATISTICS_NS
    tasks = list(product(range(len(sorting_algorithms)), Ns))
    logger.info("running %d tasks over %d algorithms", len(tasks), len(sorting_algorithms))
    result_path.parent.mkdir(parents=True, exist_ok=True)
    with Pool(processes) as pool, open(result_path, "w") as f:
        f.write(CSV_HEADER + "\n")
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()
    logger.info("statistics written to %s", result_path)


def sort_result(result_path: Path = RESULT_DIR) -> None:
    df = pd.read_csv(result_path)
    df = df.sort_values(["name", "N"])
    df.to_csv(result_path, index=False)
    for name, group in df.groupby("name"):
        out = result_path.parent / f"{name}.csv"
        group.drop(columns=["name"]).to_csv(out, index=False)
        logger.info("wrote %s", out)


def plot_operation_cnts(sorting_algorithm: SortingAlgorithm, N: int, path: Path) -> None:
    data = get_operation_cnts(sorting_algorithm, N)
    fig = px.histogram(x=data, title=f"{sorting_algorithm.name}, N={N}", labels={"x": "Comparison Count"}, text_auto=True)
    fig.layout.update(showlegend=False)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(path)
    logger.info("histogram written to %s", path)


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL)
    generate_statistics()
    sort_result()


if __name__ == "__main__":
    main()
