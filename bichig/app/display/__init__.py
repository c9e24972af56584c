"""
Display helpers for the conversion table.
"""

from .table import BoxDrawingHelper, chunk_mappings, render_table

__all__ = [
    'BoxDrawingHelper',
    'chunk_mappings',
    'render_table',
]
