#!/usr/bin/env python3
"""Quick perf benchmark for wrapping text files."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from linewrap import WrapOptions, run_wrap_stream


def _collect_text_files(root: Path) -> list[Path]:
    if root.is_file():
        return [root]
    files = sorted([*root.rglob("*.txt"), *root.rglob("*.md")])
    return [path for path in files if path.is_file()]


def _run_once(
    files: list[Path],
    options: WrapOptions,
    *,
    chunk_size: int,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_bytes = 0
    total_lines = 0
    total_splits = 0
    iterator = (
        tqdm(files, desc=label, unit="file")
        if show_progress
        else files
    )
    for path in iterator:
        with path.open("rb") as handle:
            result = run_wrap_stream(handle, options, chunk_size=chunk_size)
        total_bytes += path.stat().st_size
        total_lines += len(result.lines)
        total_splits += len(result.diagnostics)
    duration = time.perf_counter() - start
    return duration, total_bytes, total_lines, total_splits


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark wrapping throughput")
    parser.add_argument("root", type=Path, help="Text file or directory of .txt/.md files")
    parser.add_argument("--width", type=int, default=79, help="Column width (default: 79)")
    parser.add_argument("--chunk-size", type=int, default=64 * 1024, help="Bytes per read")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.exists():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_text_files(root)
    if not files:
        raise SystemExit(f"No .txt/.md files found under {root}")

    options = WrapOptions(column_width=args.width)
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                files,
                options,
                chunk_size=args.chunk_size,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        bytes_count = 0
        lines_count = 0
        splits_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, bytes_count, lines_count, splits_count = _run_once(
                files,
                options,
                chunk_size=args.chunk_size,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, bytes_count, lines_count, splits_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, bytes_count, lines_count, splits_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, bytes_count, lines_count, splits_count = _benchmark()

    best = min(timings)
    worst = max(timings)
    mean = statistics.mean(timings)
    median = statistics.median(timings)

    print(f"Dataset: {root}")
    print(f"Files: {len(files)}")
    print(f"Bytes: {bytes_count}")
    print(f"Lines: {lines_count}")
    print(f"Hard splits: {splits_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {best:.4f}s")
    print(f"Median: {median:.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {worst:.4f}s")
    print(f"MB/s (mean):    {bytes_count / mean / 1_000_000:.2f}")
    print(f"Lines/s (mean): {lines_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
