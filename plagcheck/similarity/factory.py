from plagcheck.similarity.base import BaseSimilarityAlgorithm
from plagcheck.similarity.cosine import CosineSimilarityAlgorithm
from plagcheck.similarity.exceptions import UnknownAlgorithmError
from plagcheck.similarity.lcs import LongestCommonSubsequenceAlgorithm
from plagcheck.similarity.models import AlgorithmType
from plagcheck.similarity.ngram import DEFAULT_NGRAM_SIZE, NGramSimilarityAlgorithm
from plagcheck.text.normalizer import TextNormalizer

AlgorithmId = AlgorithmType | str


class AlgorithmFactory:
    """Creates similarity algorithms from the closed set of algorithm types."""

    ALGORITHMS: dict[AlgorithmType, type[BaseSimilarityAlgorithm]] = {
        AlgorithmType.COSINE_SIMILARITY: CosineSimilarityAlgorithm,
        AlgorithmType.LONGEST_COMMON_SUBSEQUENCE: LongestCommonSubsequenceAlgorithm,
        AlgorithmType.NGRAM: NGramSimilarityAlgorithm,
    }

    def __init__(
        self,
        normalizer: TextNormalizer | None = None,
        ngram_size: int = DEFAULT_NGRAM_SIZE,
    ) -> None:
        self._normalizer = normalizer if normalizer is not None else TextNormalizer()
        self._ngram_size = ngram_size

    @classmethod
    def resolve(cls, algorithm: AlgorithmId) -> AlgorithmType:
        """Map an AlgorithmType or its name (case-insensitive) to an AlgorithmType.

        Raises:
            UnknownAlgorithmError: if the identifier is not supported.
        """
        if isinstance(algorithm, AlgorithmType):
            return algorithm
        if isinstance(algorithm, str):
            wanted = algorithm.strip().lower()
            for algorithm_type in cls.ALGORITHMS:
                if wanted in (algorithm_type.value.lower(), algorithm_type.name.lower()):
                    return algorithm_type
        raise UnknownAlgorithmError(
            f"Unknown algorithm '{algorithm}'. "
            f"Choose from: {[t.value for t in cls.ALGORITHMS]}"
        )

    def create(self, algorithm: AlgorithmId) -> BaseSimilarityAlgorithm:
        algorithm_type = self.resolve(algorithm)
        if algorithm_type is AlgorithmType.NGRAM:
            return NGramSimilarityAlgorithm(self._normalizer, ngram_size=self._ngram_size)
        return self.ALGORITHMS[algorithm_type](self._normalizer)

    def create_all(self) -> list[BaseSimilarityAlgorithm]:
        return [self.create(algorithm_type) for algorithm_type in self.ALGORITHMS]
