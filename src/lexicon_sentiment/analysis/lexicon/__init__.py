"""
lexicon
=======

Package for the configured word/phrase data and its publication.

Submodules:
- word_files : Plain-text word-list loading (degrades to empty on failure).
- snapshot   : Immutable LexiconSnapshot and its construction from settings.
- store      : LexiconStore, atomic publication and refresh.
"""

from .snapshot import LexiconSnapshot, build_snapshot
from .store import LexiconNotLoadedError, LexiconStore
from .word_files import WordListFormatError, load_word_list

__all__ = [
    "LexiconSnapshot",
    "LexiconStore",
    "LexiconNotLoadedError",
    "WordListFormatError",
    "build_snapshot",
    "load_word_list",
]

__docformat__ = "google"
