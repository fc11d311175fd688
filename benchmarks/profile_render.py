"""cProfile wrapper for Pliegue rendering.

Run with:
    python -m cProfile -o profile.prof benchmarks/profile_render.py
    python -m snakeviz profile.prof

Or for direct profiling:
    python benchmarks/profile_render.py
"""

from __future__ import annotations

import cProfile
import io
import pstats
import sys


def build_corpus(rules: int = 500):
    """A stylesheet large enough to make the render loop dominate."""
    from pliegue.css import CssCompoundSelector, CssFile, CssProperty, CssRule, CssSelector

    return CssFile(tuple(
        CssRule(
            CssCompoundSelector((CssSelector(f".block-{i}", ">"), CssSelector(f".elem-{i}"))),
            (
                CssProperty("margin", ("0", "auto", f"{i}px", "auto")),
                CssProperty("font-family", ("Inter", "Helvetica", "Arial", "sans-serif")),
                CssProperty("transition", ("opacity", "150ms", "ease-in-out,", "transform", "300ms")),
            ),
        )
        for i in range(rules)
    )).to_doc()


def render_corpus(iterations: int = 10) -> None:
    """Render the corpus at a few widths, several times."""
    from pliegue import render

    doc = build_corpus()
    for _ in range(iterations):
        for width in (40, 80, 120):
            render(doc, width)


def main() -> None:
    """Run profiling and print results."""
    print("Pliegue Profiling")
    print("=" * 60)
    print(f"Python {sys.version.split()[0]}")

    iterations = 10
    print(f"\nRendering corpus {iterations}x...")

    profiler = cProfile.Profile()
    profiler.enable()

    render_corpus(iterations)

    profiler.disable()

    print("\n" + "=" * 60)
    print("TOP 20 FUNCTIONS BY CUMULATIVE TIME")
    print("=" * 60 + "\n")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(pstats.SortKey.CUMULATIVE)
    ps.print_stats(20)
    print(s.getvalue())

    print("\n" + "=" * 60)
    print("TOP 20 FUNCTIONS BY TOTAL (SELF) TIME")
    print("=" * 60 + "\n")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(pstats.SortKey.TIME)
    ps.print_stats(20)
    print(s.getvalue())


if __name__ == "__main__":
    main()
