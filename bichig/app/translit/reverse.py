"""Best-effort Mongolian Cyrillic -> Latin transliteration.

One character at a time, no lookahead. Picks the canonical Latin
spelling for each letter so that forward(reverse(text)) stays stable
while a word is being edited; it does not recover every spelling the
forward direction accepts.
"""

from .tables import CYRILLIC_TO_LATIN


def reverse_transliterate(text: str) -> str:
    """Convert Cyrillic text back to its canonical Latin spelling.

    Characters without an inverse (Latin, digits, punctuation) pass
    through unchanged.
    """
    result = []
    for char in text:
        lower = char.lower()
        latin = CYRILLIC_TO_LATIN.get(lower)
        if latin is None:
            result.append(char)
        elif char != lower:
            result.append(latin[:1].upper() + latin[1:])
        else:
            result.append(latin)
    return ''.join(result)
