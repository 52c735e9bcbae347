from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping

from plagcheck.similarity.base import clamp_score
from plagcheck.similarity.models import AlgorithmType

PairKey = tuple[uuid.UUID, uuid.UUID]


@dataclass(frozen=True)
class Document:
    """A loaded document: display name and raw text."""

    name: str
    text: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class ProcessedDocument:
    """A document together with its normalized text and lemma tokens."""

    id: uuid.UUID
    name: str
    text: str
    normalized_text: str = ""
    tokens: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "original_text": self.text,
            "processed_text": self.normalized_text,
            "tokens": list(self.tokens),
        }


@dataclass(frozen=True)
class ComparisonResult:
    """Score of one algorithm for one ordered document pair."""

    document_a_id: uuid.UUID
    document_b_id: uuid.UUID
    document_a_name: str
    document_b_name: str
    similarity_score: float
    algorithm: AlgorithmType

    def __post_init__(self) -> None:
        object.__setattr__(self, "similarity_score", clamp_score(float(self.similarity_score)))

    @property
    def pair(self) -> PairKey:
        return (self.document_a_id, self.document_b_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "document_a_id": str(self.document_a_id),
            "document_b_id": str(self.document_b_id),
            "document_a_name": self.document_a_name,
            "document_b_name": self.document_b_name,
            "similarity_score": self.similarity_score,
            "algorithm_used": self.algorithm.value,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Immutable outcome of one analysis run.

    ``documents`` keeps load order. Lookups are by ordered pair exactly as
    produced during enumeration; the reverse pair is not indexed.
    """

    documents: tuple[ProcessedDocument, ...]
    comparisons: tuple[ComparisonResult, ...]
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    _index: Mapping[PairKey, tuple[ComparisonResult, ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "documents", tuple(self.documents))
        object.__setattr__(self, "comparisons", tuple(self.comparisons))

        index: dict[PairKey, list[ComparisonResult]] = {}
        for comparison in self.comparisons:
            index.setdefault(comparison.pair, []).append(comparison)
        object.__setattr__(
            self,
            "_index",
            MappingProxyType({pair: tuple(results) for pair, results in index.items()}),
        )

    def get_comparisons(self, id_a: uuid.UUID, id_b: uuid.UUID) -> tuple[ComparisonResult, ...]:
        """Stored results for the ordered pair, in algorithm-selection order."""
        return self._index.get((id_a, id_b), ())

    def get_similarity(
        self,
        id_a: uuid.UUID,
        id_b: uuid.UUID,
        algorithm: AlgorithmType | None = None,
    ) -> float:
        """Score for the ordered pair, or 0.0 when no score was stored.

        Without *algorithm* the maximum score across algorithms is returned.
        """
        comparisons = self.get_comparisons(id_a, id_b)
        if algorithm is not None:
            comparisons = tuple(c for c in comparisons if c.algorithm == algorithm)
        if not comparisons:
            return 0.0
        return max(c.similarity_score for c in comparisons)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "timestamp": self.created_at.isoformat(),
            "documents": [document.to_dict() for document in self.documents],
            "comparison_results": [comparison.to_dict() for comparison in self.comparisons],
        }
