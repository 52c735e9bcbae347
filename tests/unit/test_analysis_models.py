import dataclasses
import uuid
from datetime import datetime

import pytest

from plagcheck.analysis.models import AnalysisResult, ComparisonResult, Document, ProcessedDocument
from plagcheck.similarity.models import AlgorithmType


def _make_processed(name: str) -> ProcessedDocument:
    return ProcessedDocument(id=uuid.uuid4(), name=name, text=f"{name} text")


def _make_comparison(
    doc_a: ProcessedDocument,
    doc_b: ProcessedDocument,
    score: float,
    algorithm: AlgorithmType = AlgorithmType.COSINE_SIMILARITY,
) -> ComparisonResult:
    return ComparisonResult(
        document_a_id=doc_a.id,
        document_b_id=doc_b.id,
        document_a_name=doc_a.name,
        document_b_name=doc_b.name,
        similarity_score=score,
        algorithm=algorithm,
    )


class TestDocument:
    def test_generates_unique_ids(self) -> None:
        assert Document("a.txt", "x").id != Document("a.txt", "x").id

    def test_is_immutable(self) -> None:
        document = Document("a.txt", "x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            document.text = "changed"  # type: ignore[misc]


class TestComparisonResult:
    @pytest.mark.parametrize(("raw", "expected"), [(1.5, 1.0), (-0.2, 0.0), (0.42, 0.42)])
    def test_clamps_score(self, raw: float, expected: float) -> None:
        doc_a, doc_b = _make_processed("a"), _make_processed("b")
        assert _make_comparison(doc_a, doc_b, raw).similarity_score == expected

    def test_to_dict(self) -> None:
        doc_a, doc_b = _make_processed("a"), _make_processed("b")
        payload = _make_comparison(doc_a, doc_b, 0.5, AlgorithmType.NGRAM).to_dict()
        assert payload == {
            "document_a_id": str(doc_a.id),
            "document_b_id": str(doc_b.id),
            "document_a_name": "a",
            "document_b_name": "b",
            "similarity_score": 0.5,
            "algorithm_used": "NGram",
        }


class TestAnalysisResultLookup:
    def test_returns_stored_score(self) -> None:
        doc_a, doc_b = _make_processed("a"), _make_processed("b")
        result = AnalysisResult(
            documents=(doc_a, doc_b), comparisons=(_make_comparison(doc_a, doc_b, 0.7),)
        )
        assert result.get_similarity(doc_a.id, doc_b.id) == 0.7

    def test_reverse_pair_returns_zero(self) -> None:
        doc_a, doc_b = _make_processed("a"), _make_processed("b")
        result = AnalysisResult(
            documents=(doc_a, doc_b), comparisons=(_make_comparison(doc_a, doc_b, 0.7),)
        )
        assert result.get_similarity(doc_b.id, doc_a.id) == 0.0

    def test_self_pair_returns_zero(self) -> None:
        doc_a, doc_b = _make_processed("a"), _make_processed("b")
        result = AnalysisResult(
            documents=(doc_a, doc_b), comparisons=(_make_comparison(doc_a, doc_b, 0.7),)
        )
        assert result.get_similarity(doc_a.id, doc_a.id) == 0.0

    def test_unknown_ids_return_zero(self) -> None:
        result = AnalysisResult(documents=(), comparisons=())
        assert result.get_similarity(uuid.uuid4(), uuid.uuid4()) == 0.0

    def test_without_algorithm_returns_maximum(self) -> None:
        doc_a, doc_b = _make_processed("a"), _make_processed("b")
        result = AnalysisResult(
            documents=(doc_a, doc_b),
            comparisons=(
                _make_comparison(doc_a, doc_b, 0.2, AlgorithmType.COSINE_SIMILARITY),
                _make_comparison(doc_a, doc_b, 0.9, AlgorithmType.NGRAM),
            ),
        )
        assert result.get_similarity(doc_a.id, doc_b.id) == 0.9
        assert result.get_similarity(doc_a.id, doc_b.id, AlgorithmType.COSINE_SIMILARITY) == 0.2
        assert (
            result.get_similarity(doc_a.id, doc_b.id, AlgorithmType.LONGEST_COMMON_SUBSEQUENCE)
            == 0.0
        )

    def test_get_comparisons_keeps_order(self) -> None:
        doc_a, doc_b = _make_processed("a"), _make_processed("b")
        first = _make_comparison(doc_a, doc_b, 0.2, AlgorithmType.NGRAM)
        second = _make_comparison(doc_a, doc_b, 0.3, AlgorithmType.COSINE_SIMILARITY)
        result = AnalysisResult(documents=(doc_a, doc_b), comparisons=(first, second))
        assert result.get_comparisons(doc_a.id, doc_b.id) == (first, second)
        assert result.get_comparisons(doc_b.id, doc_a.id) == ()


class TestAnalysisResultShape:
    def test_generates_id_and_timestamp(self) -> None:
        result = AnalysisResult(documents=(), comparisons=())
        assert isinstance(result.id, uuid.UUID)
        assert isinstance(result.created_at, datetime)
        assert result.created_at.tzinfo is not None

    def test_converts_lists_to_tuples(self) -> None:
        doc_a = _make_processed("a")
        result = AnalysisResult(documents=[doc_a], comparisons=[])  # type: ignore[arg-type]
        assert result.documents == (doc_a,)
        assert result.comparisons == ()

    def test_is_immutable(self) -> None:
        result = AnalysisResult(documents=(), comparisons=())
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.comparisons = ()  # type: ignore[misc]

    def test_to_dict(self) -> None:
        doc_a, doc_b = _make_processed("a"), _make_processed("b")
        comparison = _make_comparison(doc_a, doc_b, 0.5)
        result = AnalysisResult(documents=(doc_a, doc_b), comparisons=(comparison,))

        payload = result.to_dict()

        assert payload["id"] == str(result.id)
        assert payload["timestamp"] == result.created_at.isoformat()
        assert [d["name"] for d in payload["documents"]] == ["a", "b"]
        assert payload["comparison_results"] == [comparison.to_dict()]
