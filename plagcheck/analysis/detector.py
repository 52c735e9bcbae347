from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor

from plagcheck.analysis.exceptions import InvalidInputError
from plagcheck.analysis.models import AnalysisResult, ComparisonResult, Document, ProcessedDocument
from plagcheck.config.settings import Settings
from plagcheck.logging.logger import Log
from plagcheck.similarity.base import BaseSimilarityAlgorithm
from plagcheck.similarity.factory import AlgorithmFactory, AlgorithmId
from plagcheck.similarity.models import AlgorithmType
from plagcheck.text.normalizer import TextNormalizer

ProgressSink = Callable[[float], None]
DocumentPair = tuple[ProcessedDocument, ProcessedDocument]


class _ProgressTracker:
    """Counts finished comparisons and reports the completed fraction."""

    def __init__(self, total: int, sink: ProgressSink | None) -> None:
        self._total = total
        self._sink = sink
        self._completed = 0
        self._lock = threading.Lock()

    def advance(self) -> None:
        # Reporting under the lock keeps reported fractions monotonic across workers
        with self._lock:
            self._completed += 1
            if self._sink is not None and self._total > 0:
                self._sink(self._completed / self._total)

    def finish(self) -> None:
        if self._sink is not None and self._total == 0:
            self._sink(1.0)


class PlagiarismDetector:
    """Compares every unordered pair of documents with each selected algorithm.

    Pipeline: validate -> preprocess -> create algorithms -> score pairs -> assemble.
    The detector keeps no state between runs.
    """

    def __init__(
        self,
        normalizer: TextNormalizer | None = None,
        algorithm_factory: AlgorithmFactory | None = None,
        max_workers: int = 1,
    ) -> None:
        self._normalizer = normalizer if normalizer is not None else TextNormalizer()
        self._algorithm_factory = (
            algorithm_factory
            if algorithm_factory is not None
            else AlgorithmFactory(normalizer=self._normalizer)
        )
        self._max_workers = max(1, max_workers)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def analyze(
        self,
        documents: Iterable[Document] | None,
        algorithms: Iterable[AlgorithmId] | None,
        progress: ProgressSink | None = None,
    ) -> AnalysisResult:
        """Run every selected algorithm over every document pair.

        Raises:
            InvalidInputError: if documents or algorithms are missing.
            UnknownAlgorithmError: if an algorithm identifier is not supported.
        """
        processed, scorers, pairs = self._prepare(documents, algorithms)
        tracker = _ProgressTracker(len(pairs) * len(scorers), progress)

        if self._max_workers > 1 and len(pairs) > 1:
            comparisons = self._compare_parallel(pairs, scorers, tracker)
        else:
            comparisons = [
                comparison
                for doc_a, doc_b in pairs
                for comparison in self._compare_pair(doc_a, doc_b, scorers, tracker)
            ]
        tracker.finish()
        return self._assemble(processed, comparisons)

    async def analyze_async(
        self,
        documents: Iterable[Document] | None,
        algorithms: Iterable[AlgorithmId] | None,
        progress: ProgressSink | None = None,
    ) -> AnalysisResult:
        """Like :meth:`analyze`, scoring one pair at a time off the event loop.

        Cancelling the task takes effect between pairs and raises
        ``asyncio.CancelledError`` instead of returning a partial result.
        """
        processed, scorers, pairs = self._prepare(documents, algorithms)
        tracker = _ProgressTracker(len(pairs) * len(scorers), progress)

        comparisons: list[ComparisonResult] = []
        for doc_a, doc_b in pairs:
            running = asyncio.ensure_future(
                asyncio.to_thread(self._compare_pair, doc_a, doc_b, scorers, tracker)
            )
            try:
                comparisons.extend(await asyncio.shield(running))
            except asyncio.CancelledError:
                # The worker thread cannot be interrupted; let the pair finish first
                await running
                raise
        tracker.finish()
        return self._assemble(processed, comparisons)

    # ------------------------------------------------------------------
    # Preparation
    # ------------------------------------------------------------------

    def _prepare(
        self,
        documents: Iterable[Document] | None,
        algorithms: Iterable[AlgorithmId] | None,
    ) -> tuple[list[ProcessedDocument], list[BaseSimilarityAlgorithm], list[DocumentPair]]:
        document_list, algorithm_types = self._validate(documents, algorithms)
        Log.info(
            f"Starting plagiarism analysis for {len(document_list)} documents "
            f"with {len(algorithm_types)} algorithms"
        )
        # Algorithms are built before any scoring so unknown ids fail fast
        scorers = [self._algorithm_factory.create(t) for t in algorithm_types]
        processed = self._process_documents(document_list)
        return processed, scorers, list(self._enumerate_pairs(processed))

    def _validate(
        self,
        documents: Iterable[Document] | None,
        algorithms: Iterable[AlgorithmId] | None,
    ) -> tuple[list[Document], list[AlgorithmType]]:
        if documents is None:
            raise InvalidInputError("documents must not be None")
        if algorithms is None:
            raise InvalidInputError("algorithms must not be None")

        document_list = list(documents)
        if any(document is None for document in document_list):
            raise InvalidInputError("documents must not contain None")

        algorithm_list = list(algorithms)
        if any(algorithm is None for algorithm in algorithm_list):
            raise InvalidInputError("algorithms must not contain None")

        # Repeated selections run once, in first-seen order
        algorithm_types = list(dict.fromkeys(AlgorithmFactory.resolve(a) for a in algorithm_list))
        return document_list, algorithm_types

    def _process_documents(self, documents: list[Document]) -> list[ProcessedDocument]:
        processed: list[ProcessedDocument] = []
        for document in documents:
            normalized_text = self._normalizer.preprocess(document.text or "")
            tokens = self._normalizer.filter_stopwords_and_stem(
                self._normalizer.tokenize(normalized_text)
            )
            processed.append(
                ProcessedDocument(
                    id=document.id,
                    name=document.name,
                    text=document.text,
                    normalized_text=normalized_text,
                    tokens=tuple(tokens),
                )
            )
            Log.debug(
                f"Processed document {document.name}: "
                f"{len(document.text or '')} chars, {len(tokens)} tokens"
            )
        return processed

    @staticmethod
    def _enumerate_pairs(documents: list[ProcessedDocument]) -> Iterator[DocumentPair]:
        for i in range(len(documents)):
            for j in range(i + 1, len(documents)):
                yield documents[i], documents[j]

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def _compare_pair(
        self,
        doc_a: ProcessedDocument,
        doc_b: ProcessedDocument,
        scorers: list[BaseSimilarityAlgorithm],
        tracker: _ProgressTracker,
    ) -> list[ComparisonResult]:
        Log.debug(f"Comparing {doc_a.name} vs {doc_b.name}")
        results: list[ComparisonResult] = []
        for scorer in scorers:
            try:
                # Algorithms normalize the original text themselves
                score = scorer.calculate_similarity(doc_a.text or "", doc_b.text or "")
                results.append(
                    ComparisonResult(
                        document_a_id=doc_a.id,
                        document_b_id=doc_b.id,
                        document_a_name=doc_a.name,
                        document_b_name=doc_b.name,
                        similarity_score=score,
                        algorithm=scorer.algorithm_type,
                    )
                )
                Log.debug(f"{scorer.algorithm_type}: {doc_a.name} vs {doc_b.name} = {score:.2%}")
            except Exception:
                Log.exception(
                    f"{scorer.algorithm_type} failed comparing {doc_a.name} vs {doc_b.name}"
                )
            finally:
                tracker.advance()
        return results

    def _compare_parallel(
        self,
        pairs: list[DocumentPair],
        scorers: list[BaseSimilarityAlgorithm],
        tracker: _ProgressTracker,
    ) -> list[ComparisonResult]:
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            # map() yields in submission order, which keeps the canonical pair order
            per_pair = executor.map(
                lambda pair: self._compare_pair(pair[0], pair[1], scorers, tracker),
                pairs,
            )
            return [comparison for results in per_pair for comparison in results]

    def _assemble(
        self,
        processed: list[ProcessedDocument],
        comparisons: list[ComparisonResult],
    ) -> AnalysisResult:
        result = AnalysisResult(documents=tuple(processed), comparisons=tuple(comparisons))
        Log.info(f"Analysis completed. Generated {len(comparisons)} comparisons")
        return result


def build_detector(settings: Settings) -> PlagiarismDetector:
    """Build a PlagiarismDetector configured from application settings."""
    normalizer = TextNormalizer()
    algorithm_factory = AlgorithmFactory(normalizer=normalizer, ngram_size=settings.ngram_size)
    return PlagiarismDetector(
        normalizer=normalizer,
        algorithm_factory=algorithm_factory,
        max_workers=settings.max_workers,
    )
