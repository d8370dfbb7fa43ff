#!/usr/bin/env python3
"""
===============================================================================
ALGORITHM BENCHMARK SUITE - MAIN ENTRY POINT
===============================================================================
Times the planar geometry algorithms (closest pair, convex hull, segment
intersection, k-d tree nearest neighbour) on generated point sets and writes
the results as JSON, CSV and a Markdown report.

USAGE:
    python main.py                       # Geometry benchmark, 10000 points
    python main.py --points 5000         # Geometry benchmark, 5000 points
    python main.py --all                 # Size sweep over every scenario
    python main.py --all --small         # Size sweep with small data sizes
    python main.py --report              # Rebuild report.md from results.json

OUTPUTS:
    output/benchmarks/results.json   - One record per measurement
    output/benchmarks/results.csv    - Same records, tabular
    output/benchmarks/report.md      - Markdown summary
    output/benchmarks/benchmark.log  - Run log

DEPENDENCIES:
    numpy, scipy, pandas, pyyaml
    Install: pip install -e .
===============================================================================
"""

import sys
import os
import argparse
import copy
import time
import logging
from pathlib import Path
from datetime import datetime
from typing import Any, Dict, Optional

import yaml

# ---------------------------------------------------------------------------
# Path setup: ensure all project modules are importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.constants import (
    BENCHMARK_SIZES, BRUTE_FORCE_MAX_POINTS, CIRCLE_RADIUS, CLUSTER_COUNT,
    CLUSTER_RADIUS, COORDINATE_RANGE, DEFAULT_POINT_COUNT, DEFAULT_RUNS,
    DEFAULT_SEED, KDTREE_QUERY_COUNT, LOG_FILE, LOG_FORMAT, OUTPUT_DIRECTORY,
    SEGMENT_MAX_COUNT, SMALL_BENCHMARK_SIZES,
)
from generation.data_generator import PointGenerator
from performance.benchmarks import GeometryBenchmark, generate_report

logger = logging.getLogger('ALGO_BENCH')

DEFAULT_CONFIG_PATH = PROJECT_ROOT.parent / 'config' / 'benchmark_config.yaml'

DEFAULT_CONFIG: Dict[str, Any] = {
    'benchmark': {
        'points': DEFAULT_POINT_COUNT,
        'sizes': list(BENCHMARK_SIZES),
        'small_sizes': list(SMALL_BENCHMARK_SIZES),
        'runs': DEFAULT_RUNS,
        'brute_force_max_points': BRUTE_FORCE_MAX_POINTS,
        'segment_max_count': SEGMENT_MAX_COUNT,
        'kdtree_queries': KDTREE_QUERY_COUNT,
        'profile_memory': True,
    },
    'data': {
        'seed': DEFAULT_SEED,
        'coordinate_range': COORDINATE_RANGE,
        'circle_radius': CIRCLE_RADIUS,
        'clusters': {'count': CLUSTER_COUNT, 'radius': CLUSTER_RADIUS},
    },
    'output': {
        'directory': OUTPUT_DIRECTORY,
        'log_level': 'INFO',
    },
}


def _merge(base: dict, override: dict, path: str = '') -> dict:
    """Recursively overlay *override* onto a copy of *base*."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if key not in base:
            logger.warning("Unknown configuration key: %s%s", path, key)
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value, f"{path}{key}.")
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> dict:
    """
    Load benchmark configuration from a YAML file merged over the defaults.

    Args:
        config_path: Path to YAML config. Defaults to config/benchmark_config.yaml;
            when that default file is absent the built-in defaults are used.

    Returns:
        Dictionary of benchmark configuration parameters

    Raises:
        FileNotFoundError: If an explicitly given config_path does not exist.
    """
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.warning("No config file at %s, using built-in defaults",
                           DEFAULT_CONFIG_PATH)
            return copy.deepcopy(DEFAULT_CONFIG)
        config_path = str(DEFAULT_CONFIG_PATH)

    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.info("Loading configuration from: %s", config_path)
    with open(config_path, 'r') as f:
        loaded = yaml.safe_load(f) or {}
    return _merge(DEFAULT_CONFIG, loaded)


def setup_logging(output_dir: str, level: str = 'INFO') -> None:
    """Log to stdout and to output_dir/benchmark.log."""
    os.makedirs(output_dir, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(os.path.join(output_dir, LOG_FILE), mode='w'),
        ],
        force=True,
    )


def build_runner(config: dict, runs: Optional[int] = None,
                 seed: Optional[int] = None) -> GeometryBenchmark:
    """Create a GeometryBenchmark from the configuration and CLI overrides."""
    bench_cfg = config['benchmark']
    data_cfg = config['data']
    generator = PointGenerator(
        seed=seed if seed is not None else data_cfg['seed'],
        coordinate_range=data_cfg['coordinate_range'],
        circle_radius=data_cfg['circle_radius'],
        cluster_count=data_cfg['clusters']['count'],
        cluster_radius=data_cfg['clusters']['radius'],
    )
    logger.info("Random seed: %s", generator.seed)
    return GeometryBenchmark(
        num_runs=runs if runs is not None else bench_cfg['runs'],
        brute_force_max_points=bench_cfg['brute_force_max_points'],
        segment_max_count=bench_cfg['segment_max_count'],
        kdtree_queries=bench_cfg['kdtree_queries'],
        profile_memory=bench_cfg['profile_memory'],
        generator=generator,
    )


def run_geometry_benchmark(runner: GeometryBenchmark, points: int, output_dir: str) -> None:
    """Benchmark every geometry scenario for a single point count."""
    logger.info("Running geometry benchmark...")
    logger.info("Number of points: %d", points)
    runner.run_geometry_suite(points)
    runner.display_results()
    runner.save_all(output_dir)


def run_comprehensive_benchmark(runner: GeometryBenchmark, config: dict,
                                small: bool, output_dir: str) -> None:
    """Sweep every scenario across the configured data sizes."""
    logger.info("=" * 60)
    logger.info("COMPREHENSIVE BENCHMARK")
    logger.info("=" * 60)
    sizes = config['benchmark']['small_sizes' if small else 'sizes']
    logger.info("Data sizes: %s", sizes)
    runner.run_all_benchmarks(sizes, output_dir=output_dir)
    runner.display_results()


def main(argv=None) -> int:
    """
    Main entry point. Parses command line arguments and runs
    the requested benchmark mode.
    """
    parser = argparse.ArgumentParser(
        description='Geometry algorithm benchmark suite',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                      Geometry benchmark (default size)
  python main.py --points 5000        Geometry benchmark with 5000 points
  python main.py --all                Size sweep
  python main.py --all --small        Size sweep, small sizes
  python main.py --report             Regenerate report.md
        """
    )

    parser.add_argument('--config', type=str, default=None,
                        help='Path to benchmark config YAML')
    parser.add_argument('--geometry', action='store_true',
                        help='Run the geometry benchmark (default mode)')
    parser.add_argument('--points', type=int, default=None,
                        help='Number of points for the geometry benchmark')
    parser.add_argument('--all', action='store_true',
                        help='Run the comprehensive size sweep')
    parser.add_argument('--small', action='store_true',
                        help='Use small data sizes with --all')
    parser.add_argument('--runs', type=int, default=None,
                        help='Timed runs per measurement')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed (default: from config, 42)')
    parser.add_argument('--output', type=str, default=None,
                        help='Output directory for results')
    parser.add_argument('--report', action='store_true',
                        help='Regenerate report.md from an existing results.json')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except FileNotFoundError as exc:
        logging.basicConfig(level=logging.ERROR, format=LOG_FORMAT)
        logger.error("%s", exc)
        return 1

    output_dir = args.output or config['output']['directory']
    level = 'DEBUG' if args.verbose else config['output']['log_level']
    setup_logging(output_dir, level)

    print("=" * 70)
    print("  ALGORITHM BENCHMARK SUITE - PLANAR GEOMETRY")
    print("=" * 70)
    print(f"  Start time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("=" * 70)

    start = time.time()
    try:
        if args.report:
            generate_report(output_dir)
        else:
            runner = build_runner(config, runs=args.runs, seed=args.seed)
            if args.all:
                run_comprehensive_benchmark(runner, config, args.small, output_dir)
            else:
                points = args.points if args.points is not None else config['benchmark']['points']
                run_geometry_benchmark(runner, points, output_dir)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    total_time = time.time() - start
    print("\n" + "=" * 70)
    print("  BENCHMARK COMPLETE")
    print(f"  Total wall time: {total_time:.1f} seconds")
    print(f"  Outputs saved to: {output_dir}")
    print("=" * 70)

    for root, dirs, files in os.walk(output_dir):
        for f in files:
            rel_path = os.path.relpath(os.path.join(root, f), output_dir)
            print(f"    {rel_path}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
