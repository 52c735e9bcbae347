from abc import ABC, abstractmethod
from typing import ClassVar

from plagcheck.similarity.exceptions import SimilarityComputationError, SimilarityError
from plagcheck.similarity.models import AlgorithmType
from plagcheck.text.normalizer import TextNormalizer


def clamp_score(score: float) -> float:
    """Clamp *score* into [0, 1]."""
    return min(max(score, 0.0), 1.0)


class BaseSimilarityAlgorithm(ABC):
    """Contract for all similarity algorithms.

    Each algorithm normalizes both raw texts itself and scores the resulting
    lemma sequences. Scores are always clamped to [0, 1].
    """

    algorithm_type: ClassVar[AlgorithmType]

    def __init__(self, normalizer: TextNormalizer | None = None) -> None:
        self._normalizer = normalizer if normalizer is not None else TextNormalizer()

    def calculate_similarity(self, text_a: str, text_b: str) -> float:
        """Score the similarity of two raw texts.

        Raises:
            SimilarityComputationError: on any unexpected failure.
        """
        try:
            lemmas_a = self._normalizer.lemmatize(text_a or "")
            lemmas_b = self._normalizer.lemmatize(text_b or "")
            return clamp_score(self._compare(lemmas_a, lemmas_b))
        except SimilarityError:
            raise
        except Exception as exc:
            raise SimilarityComputationError(
                f"{self.algorithm_type} similarity failed: {exc}"
            ) from exc

    @abstractmethod
    def _compare(self, lemmas_a: list[str], lemmas_b: list[str]) -> float:
        """Score two lemma sequences; the result is clamped by the caller."""
