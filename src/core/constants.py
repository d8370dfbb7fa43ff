"""
===============================================================================
ALGORITHM BENCHMARK SUITE - Constants and Defaults
===============================================================================
Central repository for the numeric defaults used by the data generators, the
benchmark harness and the command-line entry point. Values here are the
fallbacks merged underneath config/benchmark_config.yaml.
===============================================================================
"""

import numpy as np


# =============================================================================
# MATHEMATICAL CONSTANTS
# =============================================================================
TWO_PI = 2.0 * np.pi

# =============================================================================
# DATA GENERATION
# =============================================================================
DEFAULT_SEED = 42
COORDINATE_RANGE = 1000.0              # random points lie in [-R, R]^2
CLUSTER_CENTER_RANGE = 500.0           # cluster centres lie in [-R, R]^2
CIRCLE_RADIUS = 50.0
CLUSTER_COUNT = 5
CLUSTER_RADIUS = 10.0
SEGMENT_MAX_LENGTH = 100.0

# =============================================================================
# BENCHMARK HARNESS
# =============================================================================
DEFAULT_POINT_COUNT = 10_000
DEFAULT_RUNS = 3
BENCHMARK_SIZES = [1000, 5000, 10_000, 50_000, 100_000]
SMALL_BENCHMARK_SIZES = [100, 500, 1000, 5000]
BRUTE_FORCE_MAX_POINTS = 2000          # O(n^2) baselines are skipped above this
SEGMENT_MAX_COUNT = 2000               # O(n^2) segment scan cap
KDTREE_QUERY_COUNT = 200

# =============================================================================
# OUTPUT
# =============================================================================
OUTPUT_DIRECTORY = "output/benchmarks"
RESULTS_JSON = "results.json"
RESULTS_CSV = "results.csv"
REPORT_MARKDOWN = "report.md"
LOG_FILE = "benchmark.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
