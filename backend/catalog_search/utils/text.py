"""
Text normalization helpers
"""
import re
import unicodedata
from typing import Optional

# Combining Diacritical Marks block
_DIACRITICS_PATTERN = re.compile(r'[\u0300-\u036f]')
_NON_ALPHANUMERIC_PATTERN = re.compile(r'[^a-z0-9]')


def normalize_text(text: Optional[str]) -> str:
    """
    Reduce text to its canonical comparable form.

    Lowercases, decomposes accented characters (NFD) and drops the combining
    marks, then removes everything that is not an ASCII letter or digit.

    Examples:
        >>> normalize_text("Añádir")
        'anadir'
        >>> normalize_text("A man, a plan, a canal: Panama")
        'amanaplanacanalpanama'
    """
    if not text:
        return ''

    decomposed = unicodedata.normalize('NFD', text.lower())
    without_marks = _DIACRITICS_PATTERN.sub('', decomposed)
    return _NON_ALPHANUMERIC_PATTERN.sub('', without_marks)
