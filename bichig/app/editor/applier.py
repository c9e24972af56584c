"""
Incremental, cursor-preserving transliteration of the word under edit.

The editor keeps Cyrillic text while the user types Latin keys: after
each edit only the word touching the cursor is re-transliterated, and
the cursor moves by the length change of that word.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..translit import reverse_transliterate, transliterate
from ..utils.config import EditorMode, get_loaded_config
from ..utils.logger import get_logger

logger = get_logger("editor.applier")

# Whitespace is handled by str.isspace()
SEPARATORS = frozenset('.,;!?(){}[]"\'')


@dataclass(frozen=True)
class EditBuffer:
    """
    Snapshot of an editor buffer.

    Attributes:
        text: Buffer contents
        cursor: Offset of the cursor into text
    """

    text: str = ""
    cursor: int = 0


def is_separator(char: str) -> bool:
    return char.isspace() or char in SEPARATORS


def find_word_bounds(text: str, cursor: int) -> Tuple[int, int]:
    """
    Locate the word containing or adjacent to the cursor.

    Returns:
        (start, end) with end exclusive; start == end when no word
        touches the cursor
    """
    start = cursor
    while start > 0 and not is_separator(text[start - 1]):
        start -= 1

    end = cursor
    while end < len(text) and not is_separator(text[end]):
        end += 1

    return start, end


def _transform(word: str, mode: EditorMode) -> str:
    forwarded = transliterate(word)
    # Nothing Latin left to convert: leave finished words alone in every mode
    if mode == EditorMode.FORWARD or forwarded == word:
        return forwarded
    return transliterate(reverse_transliterate(word))


def apply_at_cursor(
    text: str, cursor: int, mode: Optional[EditorMode] = None
) -> EditBuffer:
    """
    Re-transliterate the word at the cursor.

    Args:
        text: Current buffer text
        cursor: Cursor offset, clamped into [0, len(text)]
        mode: ROUNDTRIP normalizes mixed Latin/Cyrillic words, FORWARD only
            transliterates; defaults to the loaded editor mode, else ROUNDTRIP

    Returns:
        The replacement buffer; equal to the input when nothing changed
    """
    if mode is None:
        config = get_loaded_config()
        mode = config.editor.mode if config is not None else EditorMode.ROUNDTRIP

    cursor = min(max(cursor, 0), len(text))
    start, end = find_word_bounds(text, cursor)
    if start == end:
        return EditBuffer(text, cursor)

    word = text[start:end]
    new_word = _transform(word, mode)
    if new_word == word:
        return EditBuffer(text, cursor)

    new_text = text[:start] + new_word + text[end:]
    new_cursor = cursor + len(new_word) - len(word)
    new_cursor = min(max(new_cursor, start), start + len(new_word))

    logger.debug(f"Replaced {word!r} with {new_word!r} at {start}, cursor {cursor} -> {new_cursor}")
    return EditBuffer(new_text, new_cursor)
