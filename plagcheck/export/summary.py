from dataclasses import dataclass

from plagcheck.analysis.models import AnalysisResult, PairKey
from plagcheck.similarity.models import AlgorithmType


@dataclass
class PairSummary:
    """All algorithm scores for one document pair."""

    document_a_name: str
    document_b_name: str
    scores: dict[AlgorithmType, float]

    @property
    def max_score(self) -> float:
        return max(self.scores.values())

    @property
    def avg_score(self) -> float:
        return sum(self.scores.values()) / len(self.scores)

    def is_flagged(self, threshold: float) -> bool:
        return self.max_score >= threshold


def summarize_pairs(result: AnalysisResult) -> list[PairSummary]:
    """Group comparisons by document pair, highest maximum score first."""
    grouped: dict[PairKey, PairSummary] = {}
    for comparison in result.comparisons:
        summary = grouped.get(comparison.pair)
        if summary is None:
            summary = PairSummary(
                document_a_name=comparison.document_a_name,
                document_b_name=comparison.document_b_name,
                scores={},
            )
            grouped[comparison.pair] = summary
        summary.scores[comparison.algorithm] = comparison.similarity_score
    # sorted() is stable, so ties keep pair-enumeration order
    return sorted(grouped.values(), key=lambda s: s.max_score, reverse=True)
