import pytest

from plagcheck.similarity.cosine import CosineSimilarityAlgorithm
from plagcheck.similarity.exceptions import UnknownAlgorithmError
from plagcheck.similarity.factory import AlgorithmFactory
from plagcheck.similarity.lcs import LongestCommonSubsequenceAlgorithm
from plagcheck.similarity.models import AlgorithmType
from plagcheck.similarity.ngram import NGramSimilarityAlgorithm


class TestAlgorithmFactory:
    @pytest.mark.parametrize(
        ("algorithm_type", "expected_cls"),
        [
            (AlgorithmType.COSINE_SIMILARITY, CosineSimilarityAlgorithm),
            (AlgorithmType.LONGEST_COMMON_SUBSEQUENCE, LongestCommonSubsequenceAlgorithm),
            (AlgorithmType.NGRAM, NGramSimilarityAlgorithm),
        ],
    )
    def test_creates_algorithm_for_type(
        self, algorithm_type: AlgorithmType, expected_cls: type
    ) -> None:
        algorithm = AlgorithmFactory().create(algorithm_type)
        assert isinstance(algorithm, expected_cls)
        assert algorithm.algorithm_type is algorithm_type

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("CosineSimilarity", AlgorithmType.COSINE_SIMILARITY),
            ("ngram", AlgorithmType.NGRAM),
            ("  LongestCommonSubsequence ", AlgorithmType.LONGEST_COMMON_SUBSEQUENCE),
            ("longest_common_subsequence", AlgorithmType.LONGEST_COMMON_SUBSEQUENCE),
        ],
    )
    def test_resolves_names_case_insensitively(self, name: str, expected: AlgorithmType) -> None:
        assert AlgorithmFactory.resolve(name) is expected

    def test_raises_for_unknown_name(self) -> None:
        with pytest.raises(UnknownAlgorithmError, match="Unknown algorithm 'Levenshtein'"):
            AlgorithmFactory().create("Levenshtein")

    def test_unknown_algorithm_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            AlgorithmFactory.resolve(42)  # type: ignore[arg-type]

    def test_passes_ngram_size(self) -> None:
        algorithm = AlgorithmFactory(ngram_size=5).create(AlgorithmType.NGRAM)
        assert isinstance(algorithm, NGramSimilarityAlgorithm)
        assert algorithm.ngram_size == 5

    def test_create_all_returns_every_algorithm_in_order(self) -> None:
        algorithms = AlgorithmFactory().create_all()
        assert [a.algorithm_type for a in algorithms] == list(AlgorithmType)
