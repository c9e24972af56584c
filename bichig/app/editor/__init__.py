"""
Transliterate-as-you-type editing.

Pure cursor-preserving word replacement plus a small stateful session.
"""

from .applier import EditBuffer, apply_at_cursor, find_word_bounds, is_separator
from .session import EditSession
from ..utils.config import EditorMode

__all__ = [
    'EditBuffer',
    'EditSession',
    'EditorMode',
    'apply_at_cursor',
    'find_word_bounds',
    'is_separator',
]
