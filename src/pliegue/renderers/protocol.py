"""DocRenderer protocol: stable interface for document renderers.

Any renderer that implements ``render(doc) -> str`` conforms to this protocol.
The built-in ``TextRenderer`` is the reference implementation.

Example:
    from pliegue.renderers.protocol import DocRenderer

    def render_page(renderer: DocRenderer, doc: Doc) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from pliegue.nodes import Doc


class DocRenderer(Protocol):
    """Protocol for document renderers.

    Implementations must accept a document and return a rendered string.

    """

    def render(self, doc: Doc) -> str:
        """Render a document to a string.

        Args:
            doc: The document to render.

        Returns:
            Rendered string output.

        """
        ...
