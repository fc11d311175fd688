"""Render timing across widths and document shapes.

Run with:
    python benchmarks/benchmark_widths.py

Wide documents are mostly flat (one fits check per group that succeeds
late); narrow ones break early. Deeply nested groups show the cost of
re-measuring each subtree once per enclosing group.
"""

from __future__ import annotations

import statistics
import time

from pliegue import Doc, fold, group, nest, render, text
from pliegue.profiling import profiled_render


def flat_list(n: int) -> Doc:
    return group(nest(fold(text(f"item{i}") for i in range(n)), 2))


def nested_groups(depth: int) -> Doc:
    doc: Doc = text("leaf")
    for i in range(depth):
        doc = group(nest(fold([text(f"n{i}"), doc]), 2))
    return doc


def time_render(doc: Doc, width: int, repeat: int = 5) -> float:
    """Median wall time in milliseconds."""
    samples = []
    for _ in range(repeat):
        start = time.perf_counter()
        render(doc, width)
        samples.append((time.perf_counter() - start) * 1000)
    return statistics.median(samples)


def main() -> None:
    cases = {
        "flat list x10000": flat_list(10_000),
        "nested groups x300": nested_groups(300),
    }
    print(f"{'case':<24}{'width':>8}{'ms':>10}{'flat':>8}{'broken':>8}")
    for name, doc in cases.items():
        for width in (20, 80, 1_000_000):
            ms = time_render(doc, width)
            with profiled_render() as acc:
                render(doc, width)
            print(f"{name:<24}{width:>8}{ms:>10.2f}{acc.groups_flat:>8}{acc.groups_broken:>8}")


if __name__ == "__main__":
    main()
