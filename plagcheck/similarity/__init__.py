from plagcheck.similarity.base import BaseSimilarityAlgorithm
from plagcheck.similarity.cosine import CosineSimilarityAlgorithm
from plagcheck.similarity.factory import AlgorithmFactory
from plagcheck.similarity.lcs import LongestCommonSubsequenceAlgorithm
from plagcheck.similarity.models import AlgorithmType
from plagcheck.similarity.ngram import NGramSimilarityAlgorithm
from plagcheck.similarity.tfidf import TfIdfVectorizer

__all__ = [
    "AlgorithmFactory",
    "AlgorithmType",
    "BaseSimilarityAlgorithm",
    "CosineSimilarityAlgorithm",
    "LongestCommonSubsequenceAlgorithm",
    "NGramSimilarityAlgorithm",
    "TfIdfVectorizer",
]
