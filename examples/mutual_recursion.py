"""Mutual Recursion Examples for hypothesis-recurse.

This example generates values for a small expression language in which
statements hold expressions and expressions hold statement blocks:

    Stmt  = Assign(name, Expr) | Block(tuple[Stmt, ...])
    Expr  = Num(int) | Lambda(Block)

Neither strategy can be written first with ``st.recursive`` alone, because
each needs the other. StrategySet lets both builders ask for each other by
type, and mutually_recursive() bounds how deep the nesting goes.

Run this example:
    python examples/mutual_recursion.py

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hypothesis import find, given, settings
from hypothesis import strategies as st

from hypothesis_recurse import StrategySet, branch_probabilities, mutually_recursive


@dataclass(frozen=True, slots=True)
class Num:
    value: int


@dataclass(frozen=True, slots=True)
class Lambda:
    body: Block


@dataclass(frozen=True, slots=True)
class Assign:
    name: str
    value: Num | Lambda


@dataclass(frozen=True, slots=True)
class Block:
    stmts: tuple[Assign | Block, ...]


type Expr = Num | Lambda
type Stmt = Assign | Block


def arb_expr(registry: StrategySet) -> st.SearchStrategy[Expr]:
    """Numbers at the leaves; lambdas wrap a statement block."""
    return mutually_recursive(
        st.builds(Num, st.integers(-9, 9)),
        4,
        16,
        1,
        registry,
        lambda reg: reg.get(Block, arb_block).map(Lambda),
    )


def arb_block(registry: StrategySet) -> st.SearchStrategy[Block]:
    """Blocks of assignments and nested blocks."""
    assign = st.builds(
        Assign,
        st.sampled_from("xyz"),
        registry.get(Num | Lambda, arb_expr),
    )
    return mutually_recursive(
        st.lists(assign, max_size=3).map(lambda stmts: Block(tuple(stmts))),
        3,
        12,
        3,
        registry,
        lambda reg: st.lists(
            st.one_of(assign, reg.get(Block, arb_block)), min_size=1, max_size=3
        ).map(lambda stmts: Block(tuple(stmts))),
    )


def render(node: Expr | Stmt, indent: int = 0) -> str:
    pad = "  " * indent
    match node:
        case Num(value):
            return str(value)
        case Lambda(body):
            return "lambda:\n" + render(body, indent + 1)
        case Assign(name, value):
            return f"{pad}{name} = {render(value, indent)}"
        case Block(stmts):
            if not stmts:
                return f"{pad}pass"
            return "\n".join(render(stmt, indent) for stmt in stmts)
    msg = f"unexpected node {node!r}"
    raise TypeError(msg)


def example_1_calibration() -> None:
    """Show the per-layer branch probabilities for each strategy."""
    print("\nExample 1: Calibration")
    print("-" * 50)
    print("Expr  (depth=4, size=16, branch=1):", branch_probabilities(4, 16, 1))
    print("Block (depth=3, size=12, branch=3):", branch_probabilities(3, 12, 3))


def example_2_sample_programs() -> None:
    """Draw a few programs and print them."""
    print("\nExample 2: Sample Programs")
    print("-" * 50)

    samples: list[Block] = []

    @settings(max_examples=3, database=None)
    @given(StrategySet().get(Block, arb_block))
    def collect(block: Block) -> None:
        samples.append(block)

    collect()
    for i, block in enumerate(samples, 1):
        print(f"# program {i}")
        print(render(block))


def example_3_nested_lambda() -> None:
    """Search for a lambda whose body assigns another lambda."""
    print("\nExample 3: Nested Lambda")
    print("-" * 50)

    def nested(expr: Expr) -> bool:
        return isinstance(expr, Lambda) and any(
            isinstance(stmt, Assign) and isinstance(stmt.value, Lambda)
            for stmt in expr.body.stmts
        )

    found = find(
        StrategySet().get(Num | Lambda, arb_expr),
        nested,
        settings=settings(max_examples=2000, database=None),
    )
    print(render(found))


def main() -> None:
    """Run all mutual recursion examples."""
    logging.basicConfig(level=logging.WARNING)
    print("=" * 50)
    print("MUTUAL RECURSION EXAMPLES FOR HYPOTHESIS-RECURSE")
    print("=" * 50)
    example_1_calibration()
    example_2_sample_programs()
    example_3_nested_lambda()


if __name__ == "__main__":
    main()
