
"""Word list loading"""
import logging
from typing import List, Optional
from typefall_config import CONFIG

log = logging.getLogger("typefall.dictionary")

class DictionaryError(Exception):
    """The word list could not be read or holds no usable words."""

def accept(word: str, min_len: int, max_len: int) -> bool:
    """Length within limits and plain ASCII letters only, so every word is typeable (drops "aaron's")."""
    return min_len <= len(word) <= max_len and word.isascii() and word.isalpha()

def load_dictionary(path: str, min_len: Optional[int] = None, max_len: Optional[int] = None) -> List[str]:
    """Read one word per line, trimmed and lowercased.

    Blank lines and words outside the length limits are skipped. Duplicates
    and file order are kept so repeated loads give the same list.
    """
    lo = CONFIG["MIN_WORD_LEN"] if min_len is None else min_len
    hi = CONFIG["MAX_WORD_LEN"] if max_len is None else max_len
    words = []
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            for line in f:
                word = line.strip().lower()
                if word and accept(word, lo, hi):
                    words.append(word)
    except OSError as e:
        raise DictionaryError(f"cannot read {path}: {e.strerror or e}") from e
    if not words:
        raise DictionaryError(f"{path} has no words of {lo}-{hi} letters")
    log.info("Loaded %d words from %s", len(words), path)
    return words
