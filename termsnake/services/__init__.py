"""
Output services for termsnake.
"""

from .renderer import (
    CellChars,
    NullRenderer,
    Renderer,
    TerminalRenderer,
    render_board,
)

__all__ = [
    'CellChars',
    'NullRenderer',
    'Renderer',
    'TerminalRenderer',
    'render_board',
]
