"""
performance - Timing, Memory Profiling and Result Persistence

Wraps the pure geometry algorithms with a wall clock (time.perf_counter) and
tracemalloc-based memory sampling, compares implementations side by side, and
persists the collected measurements.

    benchmarks  - Benchmark helpers, the GeometryBenchmark runner, and the
                  JSON / CSV / Markdown writers for its results.

The geometry package never imports from here; the dependency only runs one
way, from the harness to the algorithms it measures.
"""
