"""Hypothesis strategies for hypothesis-recurse property-based testing.

This package provides reusable recursive sample types and their
StrategySet builders:

- mutual: First/Second mutual recursion, Chain and Tree self-recursion

Usage:
    from tests.strategies import First, arb_first
    from tests.strategies.mutual import first_depth, FIRST_DEPTH_BOUND
"""

from .mutual import (
    FIRST_DEPTH,
    FIRST_DEPTH_BOUND,
    SECOND_DEPTH,
    SECOND_DEPTH_BOUND,
    TREE_DEPTH,
    Chain,
    First,
    Second,
    Tree,
    arb_first,
    arb_second,
    arb_tree,
    chain_builder,
    chain_length,
    first_depth,
    first_layers,
    second_depth,
    tree_depth,
)

__all__ = [
    "FIRST_DEPTH",
    "FIRST_DEPTH_BOUND",
    "SECOND_DEPTH",
    "SECOND_DEPTH_BOUND",
    "TREE_DEPTH",
    "Chain",
    "First",
    "Second",
    "Tree",
    "arb_first",
    "arb_second",
    "arb_tree",
    "chain_builder",
    "chain_length",
    "first_depth",
    "first_layers",
    "second_depth",
    "tree_depth",
]
