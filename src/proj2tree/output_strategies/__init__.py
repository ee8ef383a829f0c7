"""Output formatting strategies for the generated document."""

from .markdown_strategy import MarkdownOutputStrategy

__all__ = ["MarkdownOutputStrategy"]
