from enum import Enum


class AlgorithmType(str, Enum):
    """Closed set of similarity algorithms the detector can run."""

    COSINE_SIMILARITY = "CosineSimilarity"
    LONGEST_COMMON_SUBSEQUENCE = "LongestCommonSubsequence"
    NGRAM = "NGram"

    def __str__(self) -> str:
        return self.value
