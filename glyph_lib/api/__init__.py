"""API layer for text layout.

The module exports:
    TextLayoutService: Font-backed and block-font layout behind one
        configured object, with a JSON-friendly ``describe_text``.
"""

from .services import TextLayoutService

__all__ = ['TextLayoutService']
