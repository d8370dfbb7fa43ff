"""
===============================================================================
ALGORITHM BENCHMARK SUITE - Core Package
===============================================================================
Primitives and defaults shared by every other package.

Modules:
    point      : Immutable planar Point with distance metrics, plus the
                 cross-product orientation helper
    constants  : Numeric defaults for generation, benchmarking and output
===============================================================================
"""
