"""Unicode Cleaner — detect, highlight and remove invisible Unicode characters."""

from unicode_cleaner.core.cleaner import clean
from unicode_cleaner.core.highlighter import highlight
from unicode_cleaner.core.models import CharacterClass, CleanResult, HighlightResult, HighlightSpan

__version__ = "0.1.0"

__all__ = [
    "CharacterClass",
    "CleanResult",
    "HighlightResult",
    "HighlightSpan",
    "clean",
    "highlight",
    "__version__",
]
