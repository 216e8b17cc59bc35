"""Fuzz testing infrastructure for hypothesis-recurse.

This package contains:
- test_registry_oracle: State machine fuzzer comparing StrategySet handles
  against plain dict shadows
- test_mutual_recursion_fuzz: Depth bounds under randomly drawn parameters

Python 3.13+.
"""
