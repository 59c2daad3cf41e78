#!/usr/bin/env python3
"""Time how long it takes to parse every data file under a directory."""

from __future__ import annotations

import argparse
import cProfile
from dataclasses import dataclass
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from cwdata.io import read_text
from cwdata.parser import parse_result


@dataclass(frozen=True, slots=True)
class ParseRun:
    seconds: float
    entries: int
    failed: tuple[Path, ...]


def parse_all(files: list[Path], *, desc: str, quiet: bool) -> ParseRun:
    entries = 0
    failed: list[Path] = []
    start = time.perf_counter()
    for path in tqdm(files, desc=desc, unit="file", disable=quiet):
        result = parse_result(read_text(path))
        if result.table is None:
            failed.append(path)
        else:
            entries += len(result.table)
    return ParseRun(time.perf_counter() - start, entries, tuple(failed))


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("root", type=Path, help="Directory searched for *.txt files")
    parser.add_argument("--runs", type=int, default=3, help="Number of timed runs")
    parser.add_argument("--quiet", action="store_true", help="Hide progress bars")
    parser.add_argument("--profile", action="store_true", help="Print the 25 slowest functions")
    args = parser.parse_args()

    files = sorted(path for path in args.root.rglob("*.txt") if path.is_file())
    if not files:
        raise SystemExit(f"No .txt files found under {args.root}")

    profiler = cProfile.Profile() if args.profile else None
    if profiler is not None:
        profiler.enable()
    runs = [parse_all(files, desc=f"run {n + 1}", quiet=args.quiet) for n in range(max(args.runs, 1))]
    if profiler is not None:
        profiler.disable()
        pstats.Stats(profiler).sort_stats("cumulative").print_stats(25)

    seconds = [run.seconds for run in runs]
    last = runs[-1]
    print(f"{len(files)} files, {last.entries} top-level entries, {len(last.failed)} failed")
    for path in last.failed:
        print(f"  failed: {path}")
    print(f"best {min(seconds):.4f}s  median {statistics.median(seconds):.4f}s  worst {max(seconds):.4f}s")
    print(f"{len(files) / statistics.mean(seconds):.1f} files/s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
