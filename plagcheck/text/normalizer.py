"""Deterministic text normalization shared by all similarity algorithms.

Processing flow:
1. Normalize Unicode (NFC) and lowercase.
2. Strip markup tags and entity codes, URLs and email addresses.
3. Replace everything except letters, digits, whitespace and hyphens with spaces.
4. Collapse whitespace.
5. Tokenize into runs of letters, dropping single-character tokens.
6. Drop stop words and strip a few common English suffixes.

The suffix stripping is a rough heuristic, not a stemmer. Output is only
guaranteed to be deterministic.
"""

from __future__ import annotations

import re
import unicodedata
from itertools import groupby
from typing import ClassVar

from plagcheck.text.stopwords import STOP_WORDS


class TextNormalizer:
    """Turns raw document text into comparable lemma tokens."""

    _MARKUP_RE: ClassVar[re.Pattern[str]] = re.compile(r"<[^>]+>|&nbsp;|&amp;|&lt;|&gt;")
    _URL_RE: ClassVar[re.Pattern[str]] = re.compile(r"https?://\S+|www\.\S+")
    _EMAIL_RE: ClassVar[re.Pattern[str]] = re.compile(r"\S+@\S+\.\S+")
    # \w also matches "_", which is not a letter or digit
    _DISALLOWED_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^\w\s\-]|_")
    _WHITESPACE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\s+")

    _SUFFIXES: ClassVar[tuple[str, ...]] = ("ing", "ed", "s")
    _MIN_STEM_LENGTH: ClassVar[int] = 3

    def __init__(self, stop_words: frozenset[str] = STOP_WORDS) -> None:
        self._stop_words = stop_words

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def preprocess(self, text: str) -> str:
        """Lowercase *text* and reduce it to letters, digits, hyphens and single spaces."""
        if not text or text.isspace():
            return ""

        text = unicodedata.normalize("NFC", text).lower()
        text = self._MARKUP_RE.sub(" ", text)
        text = self._URL_RE.sub(" ", text)
        text = self._EMAIL_RE.sub(" ", text)
        text = self._DISALLOWED_RE.sub(" ", text)
        return self._WHITESPACE_RE.sub(" ", text).strip()

    def tokenize(self, text: str) -> list[str]:
        """Split normalized text on non-letters, dropping one-character tokens."""
        if not text:
            return []
        # Any non-letter splits, including numeric signs such as "²" and "½"
        runs = ("".join(chars) for is_letter, chars in groupby(text, str.isalpha) if is_letter)
        return [token for token in runs if len(token) > 1]

    def filter_stopwords_and_stem(self, tokens: list[str]) -> list[str]:
        """Drop stop words and strip one trailing suffix from each remaining token."""
        lemmas: list[str] = []
        for token in tokens:
            if token.lower() in self._stop_words:
                continue
            lemmas.append(self._strip_suffix(token))
        return lemmas

    def lemmatize(self, text: str) -> list[str]:
        """Run the full pipeline on raw text."""
        return self.filter_stopwords_and_stem(self.tokenize(self.preprocess(text)))

    # ------------------------------------------------------------------
    # Suffix stripping
    # ------------------------------------------------------------------

    def _strip_suffix(self, token: str) -> str:
        for suffix in self._SUFFIXES:
            if not token.endswith(suffix):
                continue
            # "ss" is not a plural ending: class, process
            if suffix == "s" and token.endswith("ss"):
                return token
            stem = token[: -len(suffix)]
            if len(stem) >= self._MIN_STEM_LENGTH:
                return stem
            return token
        return token
