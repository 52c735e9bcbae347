from collections.abc import Sequence

from plagcheck.similarity.base import BaseSimilarityAlgorithm
from plagcheck.similarity.models import AlgorithmType
from plagcheck.text.normalizer import TextNormalizer

DEFAULT_NGRAM_SIZE = 3


def jaccard_similarity(set_a: set[str], set_b: set[str]) -> float:
    """|A & B| / |A | B|, or 0.0 when both sets are empty."""
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)


class NGramSimilarityAlgorithm(BaseSimilarityAlgorithm):
    """Jaccard similarity between the word n-gram sets of two documents."""

    algorithm_type = AlgorithmType.NGRAM

    def __init__(
        self,
        normalizer: TextNormalizer | None = None,
        ngram_size: int = DEFAULT_NGRAM_SIZE,
    ) -> None:
        super().__init__(normalizer)
        self._ngram_size = ngram_size if ngram_size > 0 else DEFAULT_NGRAM_SIZE

    @property
    def ngram_size(self) -> int:
        return self._ngram_size

    def generate_ngrams(self, tokens: Sequence[str]) -> set[str]:
        """Space-joined contiguous windows of ``ngram_size`` tokens.

        Documents shorter than the window yield a single n-gram of all tokens.
        """
        n = self._ngram_size
        if len(tokens) < n:
            return {" ".join(tokens)}
        return {" ".join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)}

    def _compare(self, lemmas_a: list[str], lemmas_b: list[str]) -> float:
        if not lemmas_a and not lemmas_b:
            return 1.0
        if not lemmas_a or not lemmas_b:
            return 0.0
        return jaccard_similarity(self.generate_ngrams(lemmas_a), self.generate_ngrams(lemmas_b))
