from plagcheck.similarity.base import BaseSimilarityAlgorithm
from plagcheck.similarity.models import AlgorithmType
from plagcheck.similarity.tfidf import TfIdfVectorizer


class CosineSimilarityAlgorithm(BaseSimilarityAlgorithm):
    """TF-IDF cosine similarity with a vocabulary fitted on the pair alone.

    Each call fits a fresh vectorizer on exactly the two documents, so scores
    are relative to the pair and not to the whole corpus.
    """

    algorithm_type = AlgorithmType.COSINE_SIMILARITY

    def _compare(self, lemmas_a: list[str], lemmas_b: list[str]) -> float:
        # An empty side is no evidence of similarity, even if both are empty
        if not lemmas_a or not lemmas_b:
            return 0.0

        vectorizer = TfIdfVectorizer().fit([lemmas_a, lemmas_b])
        return TfIdfVectorizer.cosine_similarity(
            vectorizer.transform(lemmas_a),
            vectorizer.transform(lemmas_b),
        )
