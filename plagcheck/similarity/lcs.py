from collections import Counter
from collections.abc import Sequence

from plagcheck.similarity.base import BaseSimilarityAlgorithm
from plagcheck.similarity.models import AlgorithmType


def lcs_length(sequence_a: Sequence[str], sequence_b: Sequence[str]) -> int:
    """Length of the longest common subsequence of two token sequences.

    Standard O(len(a) * len(b)) dynamic program, keeping only the previous row.
    """
    if not sequence_a or not sequence_b:
        return 0

    previous = [0] * (len(sequence_b) + 1)
    for token_a in sequence_a:
        current = [0] * (len(sequence_b) + 1)
        for j, token_b in enumerate(sequence_b, start=1):
            if token_a == token_b:
                current[j] = previous[j - 1] + 1
            else:
                current[j] = max(previous[j], current[j - 1])
        previous = current
    return previous[-1]


class LongestCommonSubsequenceAlgorithm(BaseSimilarityAlgorithm):
    """LCS length divided by the average length of the two lemma sequences."""

    algorithm_type = AlgorithmType.LONGEST_COMMON_SUBSEQUENCE

    def _compare(self, lemmas_a: list[str], lemmas_b: list[str]) -> float:
        if not lemmas_a and not lemmas_b:
            return 1.0
        if not lemmas_a or not lemmas_b:
            return 0.0

        # Same lemmas in any order count as a full match
        if len(lemmas_a) == len(lemmas_b) and Counter(lemmas_a) == Counter(lemmas_b):
            return 1.0

        average_length = (len(lemmas_a) + len(lemmas_b)) / 2.0
        return lcs_length(lemmas_a, lemmas_b) / average_length
