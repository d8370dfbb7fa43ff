"""
benchmarks.py - Performance Benchmarking Suite for Geometry Algorithms

Provides the timing harness that wraps the pure geometry routines with a
wall clock and optional memory sampling, plus the persistence layer that turns
the collected measurements into JSON, CSV and a Markdown report.

Scenarios:

    1. Closest pair          - O(n^2) brute force vs O(n log n) divide & conquer
    2. Convex hull           - Graham scan on random, circular, clustered sets
    3. Segment intersection  - Exhaustive O(n^2) pairwise scan
    4. K-d tree              - Build cost and batched nearest-neighbour queries
    5. Nearest-neighbour     - Linear scan vs this k-d tree vs scipy.spatial.KDTree

Every benchmark appends a BenchmarkResult to the runner so a sweep over data
sizes can be aggregated into a single table.  The geometry functions
themselves never perform I/O; everything that touches the clock, tracemalloc
or the filesystem lives here.
"""

from __future__ import annotations

import json
import logging
import os
import statistics
import time
import tracemalloc
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from scipy.spatial import KDTree as ScipyKDTree

from core.constants import (
    BRUTE_FORCE_MAX_POINTS,
    DEFAULT_RUNS,
    DEFAULT_SEED,
    KDTREE_QUERY_COUNT,
    REPORT_MARKDOWN,
    RESULTS_CSV,
    RESULTS_JSON,
    SEGMENT_MAX_COUNT,
)
from core.point import Point
from generation.data_generator import PointGenerator
from geometry.closest_pair import closest_pair_brute_force, closest_pair_divide_conquer
from geometry.convex_hull import convex_hull_graham_scan
from geometry.kdtree import KdTree
from geometry.segments import LineSegment, find_intersecting_segments

logger = logging.getLogger(__name__)


CLOSEST_PAIR_ALGORITHMS: Dict[str, Tuple[str, Callable]] = {
    "brute_force": ("Closest Pair (Brute Force)", closest_pair_brute_force),
    "divide_conquer": ("Closest Pair (Divide & Conquer)", closest_pair_divide_conquer),
}


# ---------------------------------------------------------------------------
# Result record
# ---------------------------------------------------------------------------

@dataclass
class BenchmarkResult:
    """One timed measurement.

    Attributes
    ----------
    algorithm_name : str
    data_size : int
        Number of points (or segments) in the input.
    execution_time : float
        Mean wall-clock time per run in seconds.
    min_time, max_time : float
        Fastest and slowest run in seconds.
    num_runs : int
    memory_used : int or None
        Peak traced allocation in bytes during one extra profiled run.
    dataset : str
        Name of the input distribution.
    """
    algorithm_name: str
    data_size: int
    execution_time: float
    min_time: float
    max_time: float
    num_runs: int
    memory_used: Optional[int] = None
    dataset: str = "random"

    @property
    def execution_time_ms(self) -> float:
        return self.execution_time * 1000.0


# ---------------------------------------------------------------------------
# Benchmark utility class
# ---------------------------------------------------------------------------

class Benchmark:
    """
    General-purpose measurement helpers.

    Provides timing (wall-clock), memory profiling (via tracemalloc), and
    side-by-side comparison of implementations.  All methods return plain
    dicts or DataFrames so callers can serialise or aggregate them.
    """

    @staticmethod
    def time_function(func: Callable, *args, num_runs: int = 100, **kwargs) -> Dict[str, float]:
        """
        Time *func* over *num_runs* invocations and return descriptive statistics.

        Returns
        -------
        dict with keys: min, max, mean, median, std, total, num_runs
            All times are in **seconds**.

        Raises
        ------
        ValueError
            If *num_runs* is less than 1.
        """
        if num_runs < 1:
            raise ValueError(f"num_runs must be >= 1, got {num_runs}")

        times: List[float] = []
        for _ in range(num_runs):
            t0 = time.perf_counter()
            func(*args, **kwargs)
            t1 = time.perf_counter()
            times.append(t1 - t0)

        return {
            "min": min(times),
            "max": max(times),
            "mean": statistics.mean(times),
            "median": statistics.median(times),
            "std": statistics.stdev(times) if len(times) > 1 else 0.0,
            "total": sum(times),
            "num_runs": num_runs,
        }

    @staticmethod
    def memory_profile(func: Callable, *args, **kwargs) -> Dict[str, Any]:
        """
        Measure peak traced memory for a single call of *func*.

        Returns
        -------
        dict with keys: peak_bytes, peak_kb, peak_mb, current_bytes
        """
        tracemalloc.start()
        tracemalloc.reset_peak()
        try:
            func(*args, **kwargs)
            current, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        return {
            "peak_bytes": peak,
            "peak_kb": peak / 1024,
            "peak_mb": peak / (1024 * 1024),
            "current_bytes": current,
        }

    @staticmethod
    def compare(
        funcs: Dict[str, Callable],
        num_runs: int = 10,
    ) -> pd.DataFrame:
        """
        Time several zero-argument callables and put their statistics side
        by side, one column per label.

        An extra 'speedup' row gives each column's mean time relative to the
        first column (values above 1 are faster than the baseline).
        """
        stats = {label: Benchmark.time_function(func, num_runs=num_runs)
                 for label, func in funcs.items()}
        df = pd.DataFrame(stats)
        baseline = df.iloc[:, 0]["mean"]
        df.loc["speedup"] = [
            baseline / df[col]["mean"] if df[col]["mean"] > 0 else float("nan")
            for col in df.columns
        ]
        return df


# ---------------------------------------------------------------------------
# Geometry benchmark runner
# ---------------------------------------------------------------------------

class GeometryBenchmark:
    """
    Stateful runner that times the geometry algorithms and collects results.

    Parameters
    ----------
    num_runs : int
        Timed repetitions per measurement.
    brute_force_max_points : int
        Inputs larger than this skip the O(n^2) closest-pair baseline.
    segment_max_count : int
        Upper bound on the number of segments fed to the pairwise scan.
    kdtree_queries : int
        Query points per k-d tree measurement.
    seed : int
        Seed for the internal PointGenerator; ignored when *generator* is given.
    profile_memory : bool
        Run each measurement once more under tracemalloc.
    generator : PointGenerator, optional
        Source of benchmark data.
    """

    def __init__(
        self,
        num_runs: int = DEFAULT_RUNS,
        brute_force_max_points: int = BRUTE_FORCE_MAX_POINTS,
        segment_max_count: int = SEGMENT_MAX_COUNT,
        kdtree_queries: int = KDTREE_QUERY_COUNT,
        seed: int = DEFAULT_SEED,
        profile_memory: bool = True,
        generator: Optional[PointGenerator] = None,
    ):
        if num_runs < 1:
            raise ValueError(f"num_runs must be >= 1, got {num_runs}")
        self.num_runs = num_runs
        self.brute_force_max_points = brute_force_max_points
        self.segment_max_count = segment_max_count
        self.kdtree_queries = kdtree_queries
        self.profile_memory = profile_memory
        self.generator = generator if generator is not None else PointGenerator(seed)
        self._results: List[BenchmarkResult] = []

    @property
    def results(self) -> List[BenchmarkResult]:
        return list(self._results)

    # ---- Core measurement -----------------------------------------------

    def measure(self, algorithm_name: str, data_size: int, func: Callable, *args,
                dataset: str = "random") -> BenchmarkResult:
        """Time ``func(*args)`` and record the result."""
        logger.info("  Testing %s (%s, n=%d)...", algorithm_name, dataset, data_size)
        stats = Benchmark.time_function(func, *args, num_runs=self.num_runs)

        memory_used = None
        if self.profile_memory:
            memory_used = Benchmark.memory_profile(func, *args)["peak_bytes"]

        result = BenchmarkResult(
            algorithm_name=algorithm_name,
            data_size=data_size,
            execution_time=stats["mean"],
            min_time=stats["min"],
            max_time=stats["max"],
            num_runs=self.num_runs,
            memory_used=memory_used,
            dataset=dataset,
        )
        self._results.append(result)
        logger.info("    %s: %.2fms", algorithm_name, result.execution_time_ms)
        return result

    # ---- Benchmark scenarios --------------------------------------------

    def benchmark_closest_pair(self, algorithm: str, points: Sequence[Point],
                               dataset: str = "random") -> Optional[BenchmarkResult]:
        """
        Scenario 1 -- Closest pair of points.

        Returns ``None`` when the brute-force baseline is skipped because the
        input exceeds ``brute_force_max_points``.

        Raises
        ------
        ValueError
            For an algorithm name other than 'brute_force' or 'divide_conquer'.
        """
        if algorithm not in CLOSEST_PAIR_ALGORITHMS:
            raise ValueError(
                f"Unknown closest pair algorithm: {algorithm!r} "
                f"(expected one of {sorted(CLOSEST_PAIR_ALGORITHMS)})"
            )
        if algorithm == "brute_force" and len(points) > self.brute_force_max_points:
            logger.info("  Skipping brute force closest pair for n=%d (cap %d)",
                        len(points), self.brute_force_max_points)
            return None

        name, func = CLOSEST_PAIR_ALGORITHMS[algorithm]
        return self.measure(name, len(points), func, points, dataset=dataset)

    def benchmark_convex_hull(self, points: Sequence[Point],
                              dataset: str = "random") -> BenchmarkResult:
        """Scenario 2 -- Graham scan convex hull."""
        return self.measure("Convex Hull (Graham Scan)", len(points),
                            convex_hull_graham_scan, points, dataset=dataset)

    def benchmark_segment_intersection(self, segments: Sequence[LineSegment]) -> BenchmarkResult:
        """Scenario 3 -- Exhaustive pairwise segment intersection."""
        return self.measure("Segment Intersection", len(segments),
                            find_intersecting_segments, segments, dataset="segments")

    def benchmark_kdtree(self, points: Sequence[Point], queries: Sequence[Point],
                         dataset: str = "random") -> Tuple[BenchmarkResult, BenchmarkResult]:
        """
        Scenario 4 -- K-d tree build and batched nearest-neighbour queries.

        Returns
        -------
        (build_result, query_result)
        """
        build = self.measure("KdTree Build", len(points), KdTree.build, points,
                             dataset=dataset)

        tree = KdTree.build(points)

        def query_all() -> List[Optional[Point]]:
            return [tree.nearest_neighbor(q) for q in queries]

        query = self.measure(f"KdTree Query (x{len(queries)})", len(points), query_all,
                             dataset=dataset)
        return build, query

    def benchmark_nearest_neighbor_baselines(self, points: Sequence[Point],
                                             queries: Sequence[Point]) -> pd.DataFrame:
        """
        Scenario 5 -- Nearest-neighbour lookup: linear scan vs k-d trees.

        The linear scan is O(n) per query; both trees are O(log n) on average.
        scipy's compiled KDTree bounds what a pure-Python tree can reach.
        """
        tree = KdTree.build(points)
        coords = np.array([p.as_tuple() for p in points], dtype=np.float64)
        query_coords = np.array([q.as_tuple() for q in queries], dtype=np.float64)
        scipy_tree = ScipyKDTree(coords)

        def linear_scan() -> List[Point]:
            return [min(points, key=q.distance_squared_to) for q in queries]

        def kdtree_search() -> List[Optional[Point]]:
            return [tree.nearest_neighbor(q) for q in queries]

        def scipy_search() -> np.ndarray:
            _, idx = scipy_tree.query(query_coords)
            return idx

        cmp = Benchmark.compare(
            {"linear_O(n)": linear_scan, "kdtree_O(logn)": kdtree_search,
             "scipy_kdtree": scipy_search},
            num_runs=self.num_runs,
        )
        for label in cmp.columns:
            self._results.append(BenchmarkResult(
                algorithm_name=f"Nearest Neighbor ({label})",
                data_size=len(points),
                execution_time=float(cmp[label]["mean"]),
                min_time=float(cmp[label]["min"]),
                max_time=float(cmp[label]["max"]),
                num_runs=self.num_runs,
                dataset="random",
            ))
        logger.info("Nearest neighbour comparison (n=%d):\n%s", len(points), cmp.to_string())
        return cmp

    # ---- Orchestration ---------------------------------------------------

    def run_geometry_suite(self, size: int) -> List[BenchmarkResult]:
        """Run every scenario for one data size and return the new results."""
        start = len(self._results)
        logger.info("=" * 60)
        logger.info("  Geometry benchmarks, data size %d", size)
        logger.info("=" * 60)

        datasets = self.generator.datasets(size)
        for name, points in datasets.items():
            self.benchmark_closest_pair("divide_conquer", points, dataset=name)
            self.benchmark_closest_pair("brute_force", points, dataset=name)
            self.benchmark_convex_hull(points, dataset=name)

        random_points = datasets["random"]
        queries = self.generator.random_points(self.kdtree_queries)
        self.benchmark_kdtree(random_points, queries)
        if size <= self.brute_force_max_points:
            self.benchmark_nearest_neighbor_baselines(random_points, queries)

        segments = self.generator.random_segments(min(size, self.segment_max_count))
        self.benchmark_segment_intersection(segments)

        return self._results[start:]

    def run_all_benchmarks(self, sizes: Sequence[int],
                           output_dir: Optional[str] = None) -> pd.DataFrame:
        """
        Sweep every scenario across *sizes* and optionally persist results.

        Parameters
        ----------
        sizes : sequence of int
        output_dir : str, optional
            When given, results.json, results.csv and report.md are written
            there.

        Returns
        -------
        pd.DataFrame
            One row per recorded measurement.
        """
        for size in sizes:
            self.run_geometry_suite(size)

        if output_dir is not None:
            self.save_all(output_dir)
        return self.results_frame()

    # ---- Reporting -------------------------------------------------------

    def results_frame(self) -> pd.DataFrame:
        return results_to_frame(self._results)

    def fastest(self) -> Optional[BenchmarkResult]:
        if not self._results:
            return None
        return min(self._results, key=lambda r: r.execution_time)

    def display_results(self) -> None:
        """Log the results grouped by algorithm plus the best performer."""
        if not self._results:
            logger.warning("No benchmark results available")
            return

        df = self.results_frame()
        logger.info("=== Benchmark Results ===")
        for algorithm, group in df.groupby("algorithm_name", sort=False):
            logger.info("--- %s ---", algorithm)
            for _, row in group.iterrows():
                memory = ""
                if pd.notna(row["memory_mb"]):
                    memory = f", Memory usage: {row['memory_mb']:.2f}MB"
                logger.info("Dataset: %s, Data size: %d, Execution time: %.2fms%s",
                            row["dataset"], row["data_size"], row["execution_time_ms"], memory)

        best = self.fastest()
        logger.info("Best Performance: %s (%.2fms)", best.algorithm_name, best.execution_time_ms)

    def save_results_json(self, path: str) -> None:
        save_results_json(self._results, path)

    def save_results_csv(self, path: str) -> None:
        save_results_csv(self._results, path)

    def save_all(self, output_dir: str) -> Dict[str, str]:
        """Write JSON, CSV and Markdown outputs into *output_dir*."""
        os.makedirs(output_dir, exist_ok=True)
        paths = {
            "json": os.path.join(output_dir, RESULTS_JSON),
            "csv": os.path.join(output_dir, RESULTS_CSV),
        }
        self.save_results_json(paths["json"])
        self.save_results_csv(paths["csv"])
        generate_report(output_dir)
        paths["report"] = os.path.join(output_dir, REPORT_MARKDOWN)
        return paths


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------

def results_to_frame(results: Sequence[BenchmarkResult]) -> pd.DataFrame:
    """Tabulate results with millisecond and megabyte convenience columns."""
    columns = list(BenchmarkResult.__dataclass_fields__)
    df = pd.DataFrame([asdict(r) for r in results], columns=columns)
    df["execution_time_ms"] = df["execution_time"] * 1000.0
    df["memory_mb"] = pd.to_numeric(df["memory_used"], errors="coerce") / (1024 * 1024)
    return df


def save_results_json(results: Sequence[BenchmarkResult], path: str) -> None:
    with open(path, "w") as fh:
        json.dump([asdict(r) for r in results], fh, indent=2)
    logger.info("Results saved to %s (%d records)", path, len(results))


def save_results_csv(results: Sequence[BenchmarkResult], path: str) -> None:
    results_to_frame(results).to_csv(path, index=False)
    logger.info("Results saved to %s (%d records)", path, len(results))


def load_results_json(path: str) -> List[BenchmarkResult]:
    """Read results written by :func:`save_results_json`.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"{path} not found -- run the benchmarks first.")
    with open(path, "r") as fh:
        records = json.load(fh)
    return [BenchmarkResult(**record) for record in records]


def generate_report(output_dir: str) -> str:
    """
    Generate a Markdown report from ``output_dir/results.json``.

    Returns
    -------
    str
        The Markdown text (also written to ``output_dir/report.md``).

    Raises
    ------
    FileNotFoundError
        If the results file has not been written yet.
    """
    results = load_results_json(os.path.join(output_dir, RESULTS_JSON))
    df = results_to_frame(results)

    lines = [
        "# Geometry Benchmark Report",
        "",
        "## Results",
        "",
        "| Algorithm | Dataset | Size | Mean (ms) | Min (ms) | Max (ms) | Peak memory (MB) |",
        "|-----------|---------|-----:|----------:|---------:|---------:|-----------------:|",
    ]
    for _, row in df.iterrows():
        memory = f"{row['memory_mb']:.3f}" if pd.notna(row["memory_mb"]) else "N/A"
        lines.append(
            f"| {row['algorithm_name']} | {row['dataset']} | {row['data_size']} | "
            f"{row['execution_time_ms']:.3f} | {row['min_time'] * 1000.0:.3f} | "
            f"{row['max_time'] * 1000.0:.3f} | {memory} |"
        )

    if results:
        best = min(results, key=lambda r: r.execution_time)
        lines += [
            "",
            "## Best Performance",
            "",
            f"{best.algorithm_name} on {best.dataset} (n={best.data_size}): "
            f"{best.execution_time_ms:.3f}ms",
        ]

    lines += ["", "---", "*Report generated by benchmarks.py*"]

    report = "\n".join(lines)
    report_path = os.path.join(output_dir, REPORT_MARKDOWN)
    with open(report_path, "w") as fh:
        fh.write(report)
    logger.info("Report written to %s", report_path)
    return report
