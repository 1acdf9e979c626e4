"""Small demonstration of tree statistics while poros are added and removed."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from porotree.poro import Poro
from porotree.tree import PoroTree


def _report(tree: PoroTree) -> None:
    print(f"Altura: {tree.height()}")
    print(f"Nodos: {tree.node_count()}")
    print(f"NodosHoja: {tree.leaf_count()}")
    print(f"Raiz: {tree.root()}")


def main(argv: Sequence[str] | None = None) -> int:
    """Build a small tree step by step and print its statistics after each step."""
    parser = argparse.ArgumentParser(
        prog="porotree-demo",
        description="Show height, node and leaf counts of a poro tree as it changes.",
    )
    parser.parse_args(argv)

    tree = PoroTree()
    p100 = Poro(1, 2, 100, "rojo")
    p50 = Poro(1, 2, 50, "rojo")
    p20 = Poro(1, 2, 20, "rojo")
    p110 = Poro(1, 2, 110, "rojo")

    _report(tree)
    for poro in (p100, p50, p20, p110):
        tree.insert(poro)
        _report(tree)
    tree.remove(p20)
    _report(tree)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())