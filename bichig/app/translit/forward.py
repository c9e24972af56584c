"""
Latin -> Mongolian Cyrillic transliteration.

Single left-to-right scan: multigraphs are tried longest first, then the
character on its own. Results are memoized in the process-wide cache.
"""

from dataclasses import dataclass
from typing import Optional

from .cache import get_cache
from .tables import (
    CYRILLIC_VOWELS,
    FRONT_VOWELS,
    HARMONY_MAP,
    MULTIGRAPH_KEYS,
    MULTIGRAPHS,
    SEMIVOWEL,
    SINGLE_MAP,
)
from ..utils.config import EngineConfig, get_loaded_config


@dataclass(frozen=True)
class TransliterationOptions:
    """
    Per-call transliteration options.

    Attributes:
        preserve_case: Capitalize an emitted unit when its source starts uppercase
        ascii_harmony: Map o/u to ө/ү inside tokens containing a front vowel
    """

    preserve_case: bool = True
    ascii_harmony: bool = False


DEFAULT_OPTIONS = TransliterationOptions()


def _capitalize(unit: str, source_char: str, options: TransliterationOptions) -> str:
    if options.preserve_case and source_char != source_char.lower():
        return unit[:1].upper() + unit[1:]
    return unit


def _token_has_front_vowel(lower: str, index: int) -> bool:
    """Check the whitespace-delimited token around ``index`` for a front vowel."""
    start = index
    while start > 0 and not lower[start - 1].isspace():
        start -= 1
    end = index
    while end < len(lower) and not lower[end].isspace():
        end += 1
    return any(ch in FRONT_VOWELS for ch in lower[start:end])


def _fold(text: str) -> str:
    """Lowercase char by char, keeping indices aligned with ``text``."""
    return ''.join(c if len(c.lower()) != 1 else c.lower() for c in text)


def _match_multigraph(lower: str, index: int) -> Optional[str]:
    for key in MULTIGRAPH_KEYS:
        if lower.startswith(key, index):
            return key
    return None


def _transliterate(text: str, options: TransliterationOptions) -> str:
    lower = _fold(text)
    out: list[str] = []
    prev = ""  # last emitted character
    i = 0

    while i < len(text):
        key = _match_multigraph(lower, i)
        if key is not None:
            unit = _capitalize(MULTIGRAPHS[key], text[i], options)
            out.append(unit)
            prev = unit[-1]
            i += len(key)
            continue

        src = text[i]
        ch = lower[i]

        if ch == 'i' and prev.lower() in CYRILLIC_VOWELS:
            unit = _capitalize(SEMIVOWEL, src, options)
        elif options.ascii_harmony and ch in HARMONY_MAP and _token_has_front_vowel(lower, i):
            unit = _capitalize(HARMONY_MAP[ch], src, options)
        elif ch in SINGLE_MAP:
            unit = _capitalize(SINGLE_MAP[ch], src, options)
        else:
            unit = src

        out.append(unit)
        prev = unit[-1]
        i += 1

    return ''.join(out)


def transliterate(text: str, options: Optional[TransliterationOptions] = None) -> str:
    """
    Transliterate Latin input to Mongolian Cyrillic.

    Never raises. Characters outside the scheme are copied unchanged.

    Args:
        text: Latin (or mixed) input
        options: Transliteration options, defaults to preserve_case=True

    Returns:
        The Cyrillic rendering
    """
    if not text:
        return ""

    options = options or DEFAULT_OPTIONS
    cache = get_cache()
    key = (text, options)

    cached = cache.get(key)
    if cached is not None:
        return cached

    result = _transliterate(text, options)
    cache.put(key, result)
    return result


def convert_text(text: str) -> str:
    """Convert a whole document with the loaded configuration's default options."""
    config = get_loaded_config()
    engine = config.engine if config is not None else EngineConfig()
    options = TransliterationOptions(
        preserve_case=engine.preserve_case,
        ascii_harmony=engine.ascii_harmony,
    )
    return transliterate(text, options)
