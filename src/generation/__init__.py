"""
===============================================================================
ALGORITHM BENCHMARK SUITE - Data Generation
===============================================================================
Seeded point and segment generators used by the benchmark harness and the
geometry property tests.

Modules:
    data_generator  : PointGenerator (random, circular, grid, clustered
                      points and random segments)
===============================================================================
"""
