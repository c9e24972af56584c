"""
Edit session state.

Holds the buffer of a single Cyrillic text area and feeds every edit
through apply_at_cursor. No I/O: clipboard and storage stay with the
caller.
"""

from dataclasses import dataclass, field
from typing import Optional

from .applier import EditBuffer, apply_at_cursor
from ..translit import reverse_transliterate, transliterate
from ..utils.config import EditorMode


@dataclass
class EditSession:
    """
    Stateful wrapper around an EditBuffer.

    Each edit replaces the buffer with the result of the pure applier.
    """

    buffer: EditBuffer = field(default_factory=EditBuffer)
    mode: Optional[EditorMode] = None

    @property
    def text(self) -> str:
        return self.buffer.text

    @property
    def cursor(self) -> int:
        return self.buffer.cursor

    @property
    def latin(self) -> str:
        """Canonical Latin spelling of the buffer."""
        return reverse_transliterate(self.buffer.text)

    def _insert(self, chunk: str) -> None:
        text, cursor = self.buffer.text, self.buffer.cursor
        self.buffer = EditBuffer(text[:cursor] + chunk + text[cursor:], cursor + len(chunk))

    def type(self, keys: str) -> EditBuffer:
        """Insert keys one at a time, re-applying after each."""
        for key in keys:
            self._insert(key)
            self.buffer = apply_at_cursor(self.buffer.text, self.buffer.cursor, self.mode)
        return self.buffer

    def paste(self, text: str) -> EditBuffer:
        """Insert transliterated text, then normalize the word at the cursor."""
        self._insert(transliterate(text))
        self.buffer = apply_at_cursor(self.buffer.text, self.buffer.cursor, self.mode)
        return self.buffer

    def backspace(self) -> EditBuffer:
        text, cursor = self.buffer.text, self.buffer.cursor
        if cursor > 0:
            self.buffer = EditBuffer(text[:cursor - 1] + text[cursor:], cursor - 1)
        return self.buffer

    def move_cursor(self, position: int) -> EditBuffer:
        position = min(max(position, 0), len(self.buffer.text))
        self.buffer = EditBuffer(self.buffer.text, position)
        return self.buffer

    def clear(self) -> None:
        self.buffer = EditBuffer()
