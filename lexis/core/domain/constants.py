# lexis/core/domain/constants.py
"""
Shared constants for language models and grouping.

Language *codes* are the ISO strings that appear on inflections and
features ('lat', 'grc', ...). Language *ids* identify the model that
handles a family of codes ('lat' and 'la' are both Latin).
"""

from enum import Enum


class LanguageId(str, Enum):
    """Source language handled by a language model."""
    LATIN = "latin"
    GREEK = "greek"
    ARABIC = "arabic"


class TextDirection(str, Enum):
    LTR = "ltr"
    RTL = "rtl"


class BaseUnit(str, Enum):
    """Unit a selection is split into: whole words or single characters."""
    WORD = "word"
    CHAR = "char"


# --- Language codes ---

LANG_CODE_LAT = "lat"
LANG_CODE_LA = "la"
LANG_CODE_GRC = "grc"
LANG_CODE_ARA = "ara"
LANG_CODE_AR = "ar"

# --- Part of speech values used by the grouping passes ---

POFS_VERB = "verb"
POFS_ADVERB = "adverb"

# Sort order used when a feature carries none.
DEFAULT_SORT_ORDER = 1

# Punctuation shared by the space-separated languages.
DEFAULT_PUNCTUATION = (
    ".,;:!?'\"(){}\\[\\]<>/\\"
    "\u00A0\u2010\u2011\u2012\u2013\u2014\u2015"
    "\u2018\u2019\u201C\u201D\u0387\u00B7\n\r"
)
