"""
Latin <-> Mongolian Cyrillic transliteration engine
"""

from .cache import MAX_CACHE_SIZE, ResultCache, get_cache, reset_cache
from .forward import TransliterationOptions, convert_text, transliterate
from .reverse import reverse_transliterate
from .tables import Mapping, list_mappings

__all__ = [
    'MAX_CACHE_SIZE',
    'Mapping',
    'ResultCache',
    'TransliterationOptions',
    'convert_text',
    'get_cache',
    'list_mappings',
    'reset_cache',
    'reverse_transliterate',
    'transliterate',
]
