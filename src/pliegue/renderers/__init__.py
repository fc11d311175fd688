"""Pliegue renderers.

Renderers lay documents out into strings.

Available Renderers:
- TextRenderer: Width-aware layout using a work stack and StringBuilder

Thread Safety:
All renderers keep per-call state local to each render() call.
Safe for concurrent use from multiple threads.

"""

from pliegue.renderers.protocol import DocRenderer
from pliegue.renderers.text import Mode, RenderState, TextRenderer, render, render_many

__all__ = ["DocRenderer", "Mode", "RenderState", "TextRenderer", "render", "render_many"]
