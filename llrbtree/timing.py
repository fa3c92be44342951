"""Measuring tree insert, search and remove times at growing sizes."""

from __future__ import annotations

import random
import string
import time
from collections.abc import Callable, Iterable
from contextlib import ExitStack
from os import PathLike
from pathlib import Path
from typing import TextIO

from llrbtree.tree import Tree

CHARSET = string.ascii_lowercase + string.ascii_uppercase + string.digits
VALUE_LENGTH = 9
DEFAULT_SIZES = tuple(range(10_000, 250_001, 25_000))
DEFAULT_REPEATS = 100
DEFAULT_BATCH = 1000
HEADER = "Elements\tTime(us)\n"
RESULT_FILES = ("insert_times.txt", "search_times.txt", "remove_times.txt")

_DEFAULT_RNG = random.Random()


def random_key(max_key: int, rng: random.Random | None = None) -> int:
    """Return a key between 1 and max_key inclusive."""
    rng = _DEFAULT_RNG if rng is None else rng
    return rng.randrange(max_key) + 1


def random_value(rng: random.Random | None = None) -> str:
    """Return a random alphanumeric string of nine characters."""
    rng = _DEFAULT_RNG if rng is None else rng
    return "".join(rng.choice(CHARSET) for _ in range(VALUE_LENGTH))


def generate_tree(n: int, rng: random.Random | None = None) -> Tree:
    """Build a tree from n + 1 random insertions with keys up to 2 * n."""
    tree = Tree()
    for _ in range(n + 1):
        tree.insert(random_key(n * 2, rng), random_value(rng))
    return tree


def _measure(
    out: TextIO,
    sizes: Iterable[int] | None,
    repeats: int,
    trial: Callable[[int], float],
) -> None:
    for size in DEFAULT_SIZES if sizes is None else sizes:
        total = sum(trial(size) for _ in range(repeats))
        out.write(f"{size}\t{total / repeats:.6f}\n")


def time_insert(
    out: TextIO,
    rng: random.Random | None = None,
    sizes: Iterable[int] | None = None,
    repeats: int = DEFAULT_REPEATS,
    batch: int = DEFAULT_BATCH,
) -> None:
    """Write the mean time of inserting a batch into trees of each size."""

    def trial(size: int) -> float:
        tree = generate_tree(size, rng)
        pairs = [(random_key(size * 2, rng), random_value(rng)) for _ in range(batch)]
        start = time.process_time()
        for key, value in pairs:
            tree.insert(key, value)
        return time.process_time() - start

    _measure(out, sizes, repeats, trial)


def time_search(
    out: TextIO,
    rng: random.Random | None = None,
    sizes: Iterable[int] | None = None,
    repeats: int = DEFAULT_REPEATS,
    batch: int = DEFAULT_BATCH,
) -> None:
    """Write the mean time of searching a batch of present keys."""

    def trial(size: int) -> float:
        tree = generate_tree(size, rng)
        keys = []
        for _ in range(batch):
            key = random_key(size * 2, rng)
            tree.insert(key, random_value(rng))
            keys.append(key)
        start = time.process_time()
        for key in keys:
            tree.search(key)
        return time.process_time() - start

    _measure(out, sizes, repeats, trial)


def time_remove(
    out: TextIO,
    rng: random.Random | None = None,
    sizes: Iterable[int] | None = None,
    repeats: int = DEFAULT_REPEATS,
    batch: int = DEFAULT_BATCH,
) -> None:
    """Write the mean time of removing a batch of inserted keys."""

    def trial(size: int) -> float:
        tree = generate_tree(size, rng)
        keys = []
        for _ in range(batch):
            key = random_key((size + batch) * 2, rng)
            tree.insert(key, random_value(rng))
            keys.append(key)
        start = time.process_time()
        for key in keys:
            tree.delete(key)
        return time.process_time() - start

    _measure(out, sizes, repeats, trial)


def run_timing(
    directory: str | PathLike[str] = ".",
    rng: random.Random | None = None,
    sizes: Iterable[int] | None = None,
    repeats: int = DEFAULT_REPEATS,
    batch: int = DEFAULT_BATCH,
) -> list[Path]:
    """Run all three measurements, one result file each; return the paths."""
    rng = random.Random() if rng is None else rng
    size_list = list(DEFAULT_SIZES if sizes is None else sizes)
    paths = [Path(directory) / name for name in RESULT_FILES]
    with ExitStack() as stack:
        files = [stack.enter_context(open(p, "w", encoding="utf-8")) for p in paths]
        for handle in files:
            handle.write(HEADER)
        for measure, handle in zip((time_insert, time_search, time_remove), files):
            measure(handle, rng, size_list, repeats, batch)
    return paths