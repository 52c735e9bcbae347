"""TF-IDF vector space model over a small local corpus."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

import numpy as np


class TfIdfVectorizer:
    """Fits a vocabulary and IDF table, then maps token lists to dense vectors.

    Usage::

        vectorizer = TfIdfVectorizer()
        vectorizer.fit([tokens_a, tokens_b])
        score = TfIdfVectorizer.cosine_similarity(
            vectorizer.transform(tokens_a), vectorizer.transform(tokens_b)
        )
    """

    def __init__(self) -> None:
        self._vocabulary: dict[str, int] = {}
        self._idf: np.ndarray = np.zeros(0, dtype=np.float64)
        self._document_count = 0

    @property
    def vocabulary(self) -> dict[str, int]:
        return dict(self._vocabulary)

    @property
    def document_count(self) -> int:
        return self._document_count

    def fit(self, corpus: Sequence[Sequence[str]]) -> TfIdfVectorizer:
        """Learn the vocabulary (first-seen order) and IDF weights from *corpus*.

        IDF is ``ln(N / (df + 1)) + 1``. Refitting discards the previous state.
        """
        vocabulary: dict[str, int] = {}
        document_frequency: Counter[str] = Counter()
        for tokens in corpus:
            for token in tokens:
                if token not in vocabulary:
                    vocabulary[token] = len(vocabulary)
            document_frequency.update(set(tokens))

        self._vocabulary = vocabulary
        self._document_count = len(corpus)
        self._idf = np.zeros(len(vocabulary), dtype=np.float64)
        for term, index in vocabulary.items():
            self._idf[index] = (
                math.log(self._document_count / (document_frequency[term] + 1)) + 1
            )
        return self

    def idf(self, term: str) -> float:
        """IDF weight of *term*, or 0.0 when it is not in the vocabulary."""
        index = self._vocabulary.get(term)
        return 0.0 if index is None else float(self._idf[index])

    def transform(self, tokens: Sequence[str]) -> np.ndarray:
        """Map *tokens* to a TF-IDF vector; unknown tokens are ignored."""
        vector = np.zeros(len(self._vocabulary), dtype=np.float64)
        total = len(tokens)
        if total == 0:
            return vector

        for term, count in Counter(tokens).items():
            index = self._vocabulary.get(term)
            if index is None:
                continue
            vector[index] = (count / total) * self._idf[index]
        return vector

    @staticmethod
    def cosine_similarity(vector_a: np.ndarray, vector_b: np.ndarray) -> float:
        """Cosine of the angle between two vectors; 0.0 when either has zero norm."""
        if vector_a.size == 0 or vector_b.size == 0:
            return 0.0
        norm_a = float(np.linalg.norm(vector_a))
        norm_b = float(np.linalg.norm(vector_b))
        if norm_a == 0.0 or norm_b == 0.0:
            return 0.0
        return float(np.dot(vector_a, vector_b)) / (norm_a * norm_b)
