#!/usr/bin/env python3
"""Quick perf benchmark for formatting and balance checking."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from cqlpy.format import FormatOptions, run_format
from cqlpy.lint import check_balance


def _collect_cql_files(root: Path) -> list[Path]:
    return sorted(path for path in root.rglob("*.cql") if path.is_file())


def _run_once(
    sources: list[str],
    options: FormatOptions,
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_lines = 0
    total_changed = 0
    total_issues = 0
    iterator = tqdm(sources, desc=label, unit="file") if show_progress else sources
    for source in iterator:
        result = run_format(source, options)
        total_lines += source.count("\n") + 1
        total_changed += int(result.changed)
        total_issues += len(check_balance(source))
    duration = time.perf_counter() - start
    return duration, total_lines, total_changed, total_issues


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark CQL formatting throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for .cql files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument("--indent-size", type=int, default=2, help="Formatter indent size")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument("--profile", action="store_true", help="Run cProfile and print top hotspots")
    parser.add_argument("--profile-top", type=int, default=30, help="Number of cProfile rows to print")
    parser.add_argument("--profile-sort", type=str, default="tottime", help="cProfile sort key")
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_cql_files(root)
    if not files:
        raise SystemExit(f"No .cql files found under {root}")
    sources = [path.read_text(encoding="utf-8") for path in files]
    options = FormatOptions(indent_size=args.indent_size)
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(sources, options, label=f"warmup {warmup_idx + 1}", show_progress=show_progress)

        timings: list[float] = []
        lines = changed = issues = 0
        for run_idx in range(max(args.runs, 1)):
            duration, lines, changed, issues = _run_once(
                sources,
                options,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, lines, changed, issues

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, lines, changed, issues = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        pstats.Stats(profiler, stream=stream).sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, lines, changed, issues = _benchmark()

    mean = statistics.mean(timings)
    print(f"Files: {len(files)}")
    print(f"Lines: {lines}")
    print(f"Would reformat: {changed}")
    print(f"Balance issues: {issues}")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Lines/s (mean): {lines / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
