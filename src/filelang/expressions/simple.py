"""Boundary to the generic templating ("simple") language.

filelang does not implement the templating grammar. It hands templating
text, unchanged, to a renderer supplied by the host application.
"""

from typing import Any, Protocol

from filelang.exchange import FileExchange
from filelang.expressions.types import SimpleExpression


class TemplateRenderer(Protocol):
    """Protocol for the templating engine that renders simple expressions."""

    def render(self, text: str, exchange: FileExchange) -> Any:
        """Render templating text against an exchange.

        Args:
            text: Templating text, e.g. ``${in.header.foo}``
            exchange: The exchange being routed

        Returns:
            The rendered value
        """
        ...


class SimpleLanguage:
    """Builds simple expressions bound to a renderer.

    Usage:
        language = SimpleLanguage(renderer=MyRenderer())
        expr = language.create_expression("${in.header.foo}")
    """

    def __init__(self, renderer: TemplateRenderer | None = None):
        self.renderer = renderer

    def create_expression(self, text: str) -> SimpleExpression:
        return SimpleExpression(text=text, renderer=self.renderer)
