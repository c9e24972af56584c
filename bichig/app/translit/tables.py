"""Latin <-> Mongolian Cyrillic mapping tables.

The tables are the whole scheme: the transducers only scan them, they
never special-case letters beyond the ``i`` context rule and the
optional o/u harmony heuristic.
"""
import unicodedata
from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

# Multi-letter Latin sequences, matched longest first
MULTIGRAPHS = MappingProxyType({
    'shch': 'щ',
    'sch': 'щ',
    'kh': 'х',
    'ch': 'ч',
    'sh': 'ш',
    'ts': 'ц',
    'yo': 'ё',
    'yu': 'ю',
    'ya': 'я',
    'ye': 'е',
    'ph': 'ф',
    'yy': 'й',
})

SINGLE_MAP = MappingProxyType({
    'a': 'а', 'b': 'б', 'v': 'в', 'g': 'г', 'd': 'д',
    'e': 'э',  # ye/je are multigraphs
    'ë': 'ё', 'z': 'з',
    'i': 'и',  # becomes й after a vowel
    'j': 'ж', 'y': 'ы', 'k': 'к', 'l': 'л', 'm': 'м', 'n': 'н',
    'o': 'о', 'p': 'п', 'r': 'р', 's': 'с', 't': 'т', 'u': 'у',
    'f': 'ф', 'h': 'х', 'c': 'ц',
    'q': 'ө', 'w': 'ү',
    'x': 'кс',
    "'": 'ь', '`': 'ь',
    # Explicit passthroughs
    '.': '.', ',': ',', ' ': ' ',
})

# One canonical Latin spelling per Cyrillic letter. Hand-chosen so that
# the forward scheme maps each spelling back to its letter; not derived.
CYRILLIC_TO_LATIN = MappingProxyType({
    'щ': 'shch', 'ш': 'sh', 'ч': 'ch',
    'ц': 'c',  # not "ts", so a following h still makes ч
    'ё': 'yo', 'ю': 'yu', 'я': 'ya', 'е': 'ye',
    'ж': 'j', 'х': 'h',
    'а': 'a', 'б': 'b', 'в': 'v', 'г': 'g', 'д': 'd', 'э': 'e',
    'з': 'z', 'и': 'i', 'й': 'yy', 'к': 'k', 'л': 'l', 'м': 'm',
    'н': 'n', 'о': 'o', 'п': 'p', 'р': 'r', 'с': 's', 'т': 't',
    'у': 'u', 'ф': 'f',
    'ө': 'q', 'ү': 'w', 'ы': 'y', 'ь': "'",
    'q': 'q', 'w': 'w',
})

CYRILLIC_VOWELS = frozenset('аэеёоуүөыияю')

SEMIVOWEL = 'й'

# Latin letters that mark a token as front-vowel for the harmony heuristic
FRONT_VOWELS = frozenset('eiyäüö')

# o/u replacements in a front-vowel token
HARMONY_MAP = MappingProxyType({'o': 'ө', 'u': 'ү'})

EXCLUDED_FROM_DISPLAY = frozenset({' ', '.', ','})


def _scan_order(key: str) -> Tuple[int, str]:
    return (-len(key), key)


# Longest key first, then lexicographic, for deterministic matching
MULTIGRAPH_KEYS: Tuple[str, ...] = tuple(sorted(MULTIGRAPHS, key=_scan_order))


@dataclass(frozen=True)
class Mapping:
    """One Latin -> Cyrillic rule of the scheme."""

    latin: str
    cyrillic: str


def _display_order(key: str) -> Tuple[int, str, str]:
    # Accented letters sort beside their base letter (e before ë before f)
    base = ''.join(c for c in unicodedata.normalize('NFD', key) if not unicodedata.combining(c))
    return (-len(key), base, key)


def _build_display_mappings() -> Tuple[Mapping, ...]:
    pairs = [Mapping(latin, cyrillic) for latin, cyrillic in MULTIGRAPHS.items()]
    pairs.extend(
        Mapping(latin, cyrillic)
        for latin, cyrillic in SINGLE_MAP.items()
        if latin not in EXCLUDED_FROM_DISPLAY
    )
    pairs.sort(key=lambda m: _display_order(m.latin))
    return tuple(pairs)


DISPLAY_MAPPINGS: Tuple[Mapping, ...] = _build_display_mappings()


def list_mappings() -> Tuple[Mapping, ...]:
    """
    Every multigraph and single-character rule of the scheme.

    Whitespace and punctuation passthroughs are left out. Sorted by
    descending Latin length, then alphabetically with accented letters
    next to their base letter.
    """
    return DISPLAY_MAPPINGS
