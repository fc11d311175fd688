"""Pliegue RenderAccumulator: opt-in profiling for rendering.

This module provides accumulated metrics during rendering:
- Total render time
- Nodes visited and fits checks performed
- How many groups came out flat vs broken
- Output length

Zero overhead when disabled (get_render_accumulator() returns None).

Example:
    from pliegue import render
    from pliegue.profiling import profiled_render

    with profiled_render() as metrics:
        out = render(doc, 40)

    print(metrics.summary())
    # {"total_ms": 0.4, "render_calls": 1, "node_visits": 12, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RenderAccumulator:
    """Accumulated metrics during rendering.

    Attributes:
        start_time: Profiling start timestamp.
        render_calls: Number of render() calls recorded.
        node_visits: Nodes popped from the render work stack.
        fits_checks: Fit evaluations performed (one per group).
        groups_flat: Groups resolved to flat mode.
        groups_broken: Groups resolved to broken mode.
        output_length: Total characters produced.

    """

    start_time: float = field(default_factory=perf_counter)
    render_calls: int = 0
    node_visits: int = 0
    fits_checks: int = 0
    groups_flat: int = 0
    groups_broken: int = 0
    output_length: int = 0

    def record_group(self, flat: bool) -> None:
        """Record one group decision."""
        self.fits_checks += 1
        if flat:
            self.groups_flat += 1
        else:
            self.groups_broken += 1

    def record_render(self, node_visits: int, output_length: int) -> None:
        """Record a completed render call.

        Args:
            node_visits: Nodes processed by the renderer.
            output_length: Length of the rendered string.

        """
        self.render_calls += 1
        self.node_visits += node_visits
        self.output_length += output_length

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of render metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "render_calls": self.render_calls,
            "node_visits": self.node_visits,
            "fits_checks": self.fits_checks,
            "groups_flat": self.groups_flat,
            "groups_broken": self.groups_broken,
            "output_length": self.output_length,
        }


_accumulator: ContextVar[RenderAccumulator | None] = ContextVar(
    "render_accumulator",
    default=None,
)


def get_render_accumulator() -> RenderAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_render() -> Iterator[RenderAccumulator]:
    """Context manager for profiled rendering.

    Creates a RenderAccumulator and makes it available via
    get_render_accumulator() for the duration of the with block.

    Yields:
        RenderAccumulator that will be populated during render calls.

    """
    acc = RenderAccumulator()
    token: Token[RenderAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "RenderAccumulator",
    "get_render_accumulator",
    "profiled_render",
]
