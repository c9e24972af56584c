"""
Plain-text rendering of the conversion table
"""
import math
from typing import List, Optional, Sequence

from ..translit import Mapping, list_mappings

HEADERS = ("Latin", "Кирилл")


class BoxDrawingHelper:
    """Box drawing characters by style"""

    STYLES = {
        'single': {
            'tl': '┌', 'tr': '┐', 'bl': '└', 'br': '┘',
            'h': '─', 'v': '│', 't': '┬', 'b': '┴',
            'l': '├', 'r': '┤', 'x': '┼'
        },
        'double': {
            'tl': '╔', 'tr': '╗', 'bl': '╚', 'br': '╝',
            'h': '═', 'v': '║', 't': '╦', 'b': '╩',
            'l': '╠', 'r': '╣', 'x': '╬'
        },
        'rounded': {
            'tl': '╭', 'tr': '╮', 'bl': '╰', 'br': '╯',
            'h': '─', 'v': '│', 't': '┬', 'b': '┴',
            'l': '├', 'r': '┤', 'x': '┼'
        },
        'ascii': {
            'tl': '+', 'tr': '+', 'bl': '+', 'br': '+',
            'h': '-', 'v': '|', 't': '+', 'b': '+',
            'l': '+', 'r': '+', 'x': '+'
        }
    }

    @classmethod
    def chars(cls, style: str = 'single', encoding: str = 'utf-8') -> dict:
        """
        Get the character set for a style

        Args:
            style: Box style ('single', 'double', 'rounded', 'ascii')
            encoding: Target encoding; ASCII encodings force the ascii style

        Returns:
            Mapping of position name to box drawing character
        """
        if encoding.lower() in ['ascii', 'us-ascii']:
            style = 'ascii'
        return cls.STYLES.get(style, cls.STYLES['single'])


def chunk_mappings(mappings: Sequence[Mapping], columns: int = 3) -> List[List[Mapping]]:
    """
    Split mappings into side-by-side groups

    Each group holds ceil(n / columns) entries; trailing groups may be
    shorter or empty.
    """
    columns = max(1, columns)
    per_col = math.ceil(len(mappings) / columns)
    return [list(mappings[i * per_col:(i + 1) * per_col]) for i in range(columns)]


def _render_group(group: Sequence[Mapping], widths: tuple, rows: int, chars: dict) -> List[str]:
    lw, cw = widths
    h, v = chars['h'], chars['v']

    def row(left: str, right: str) -> str:
        return f"{v} {left.ljust(lw)} {v} {right.ljust(cw)} {v}"

    lines = [
        chars['tl'] + h * (lw + 2) + chars['t'] + h * (cw + 2) + chars['tr'],
        row(*HEADERS),
        chars['l'] + h * (lw + 2) + chars['x'] + h * (cw + 2) + chars['r'],
    ]
    lines.extend(row(m.latin, m.cyrillic) for m in group)
    lines.append(chars['bl'] + h * (lw + 2) + chars['b'] + h * (cw + 2) + chars['br'])

    # Pad short groups so columns line up
    blank = ' ' * len(lines[0])
    lines.extend(blank for _ in range(rows - len(group)))
    return lines


def render_table(
    columns: int = 3,
    style: str = 'single',
    encoding: str = 'utf-8',
    mappings: Optional[Sequence[Mapping]] = None,
) -> str:
    """
    Render the scheme as bordered tables placed side by side

    Args:
        columns: Number of side-by-side groups
        style: Box style
        encoding: Target encoding
        mappings: Rules to show, defaults to list_mappings()

    Returns:
        Multi-line table text
    """
    if mappings is None:
        mappings = list_mappings()

    chars = BoxDrawingHelper.chars(style, encoding)
    groups = [g for g in chunk_mappings(mappings, columns) if g]
    if not groups:
        groups = [[]]

    widths = (
        max([len(HEADERS[0])] + [len(m.latin) for m in mappings]),
        max([len(HEADERS[1])] + [len(m.cyrillic) for m in mappings]),
    )
    rows = max(len(g) for g in groups)

    rendered = [_render_group(g, widths, rows, chars) for g in groups]
    return '\n'.join('  '.join(parts).rstrip() for parts in zip(*rendered))
