"""Word-list ingestion with an emergency fallback."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from .index import DictionaryIndex, SourceType, normalize_word

log = logging.getLogger(__name__)


# Used when no word list can be read at all
EMERGENCY_WORDS = [
    'ART', 'STAR', 'START', 'TAP', 'TARDY', 'ARTIST', 'TRAY', 'RAYS', 'ARTS',
    'THE', 'AND', 'THAT', 'HAVE', 'FOR', 'NOT', 'WITH', 'YOU', 'THIS', 'BUT',
    'RATE', 'TEAR', 'RUDE', 'TORE', 'ROTE', 'DARE', 'READ', 'DEAR', 'TREAD',
    'ROUTE', 'OUTER', 'ROAD', 'TRADE', 'RUST', 'STORE', 'SORT', 'ROSE',
]

DEFAULT_SEARCH_PATHS = [
    "sowpods.json",
    "twl.json",
    "dictionary.json",
    "sowpods.txt",
    "twl06.txt",
    "dictionary.txt",
    "words.txt",
]


def guess_source(path: str | Path) -> SourceType:
    name = Path(path).name.lower()
    if "sowpods" in name:
        return "sowpods"
    if "twl" in name:
        return "twl"
    return "custom"


def read_word_list(path: str | Path) -> List[str]:
    """
    Read a word list from disk.

    `.json` files hold an array of strings; anything else is one word per
    line. Words are normalized to uppercase 3-9 letters and de-duplicated,
    keeping first occurrence order.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")

    if path.suffix.lower() == ".json":
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array of words in {path}")
        raw_words = [w for w in data if isinstance(w, str)]
    else:
        raw_words = text.splitlines()

    seen = set()
    words = []
    for raw in raw_words:
        word = normalize_word(raw)
        if word and word not in seen:
            seen.add(word)
            words.append(word)
    return words


def emergency_dictionary() -> DictionaryIndex:
    return DictionaryIndex(EMERGENCY_WORDS, source="emergency")


def load_dictionary(path: Optional[str | Path] = None) -> DictionaryIndex:
    """
    Build a DictionaryIndex from the first readable word list.

    Tries `path` if given, otherwise the default search paths. Never raises:
    an unreadable, malformed or empty source degrades to the emergency list.
    """
    search_paths: List[str | Path] = [path] if path else list(DEFAULT_SEARCH_PATHS)

    for candidate in search_paths:
        if not os.path.exists(candidate):
            if path:
                log.warning("Dictionary file not found: %s", candidate)
            continue
        try:
            words = read_word_list(candidate)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            log.warning("Could not read dictionary %s: %s", candidate, e)
            continue
        if words:
            log.info("Loaded %s words from %s", f"{len(words):,}", candidate)
            return DictionaryIndex(words, source=guess_source(candidate))
        log.warning("Dictionary %s has no usable words", candidate)

    log.warning("No dictionary available -- using built-in emergency word list.")
    return emergency_dictionary()
