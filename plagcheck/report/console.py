from typing import TextIO

from tqdm import tqdm

from plagcheck.analysis.models import AnalysisResult
from plagcheck.export.summary import PairSummary, summarize_pairs


def _shorten(name: str, width: int) -> str:
    return name if len(name) <= width else name[: width - 3] + "..."


def _format_table(header: list[str], rows: list[list[str]]) -> list[str]:
    widths = [max(len(row[i]) for row in [header, *rows]) for i in range(len(header))]

    def _line(cells: list[str]) -> str:
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    separator = "-+-".join("-" * width for width in widths)
    return [_line(header), separator, *(_line(row) for row in rows)]


class ConsoleReport:
    """Renders an analysis result as plain text for the terminal."""

    def __init__(self, max_matrix_documents: int = 15) -> None:
        self._max_matrix_documents = max_matrix_documents

    def render(self, result: AnalysisResult, threshold: float, show_matrix: bool = True) -> str:
        lines = self._render_header(result, threshold)
        lines.append("")

        flagged = [pair for pair in summarize_pairs(result) if pair.is_flagged(threshold)]
        if flagged:
            lines.extend(self._render_flagged(flagged))
        else:
            lines.append("No potential plagiarism detected")

        if show_matrix and 1 < len(result.documents) <= self._max_matrix_documents:
            lines.append("")
            lines.extend(self._render_matrix(result))
        return "\n".join(lines)

    def _render_header(self, result: AnalysisResult, threshold: float) -> list[str]:
        return [
            "=== ANALYSIS RESULTS ===",
            f"Analysis ID:          {result.id}",
            f"Timestamp:            {result.created_at:%Y-%m-%d %H:%M:%S}",
            f"Documents analyzed:   {len(result.documents)}",
            f"Comparisons made:     {len(result.comparisons)}",
            f"Similarity threshold: {threshold:.0%}",
        ]

    def _render_flagged(self, pairs: list[PairSummary]) -> list[str]:
        rows = [
            [
                pair.document_a_name,
                pair.document_b_name,
                f"{pair.max_score:.0%}",
                f"{pair.avg_score:.0%}",
                ", ".join(f"{a.value}: {s:.0%}" for a, s in pair.scores.items()),
            ]
            for pair in pairs
        ]
        header = ["Document A", "Document B", "Max Similarity", "Avg Similarity", "Algorithms Used"]
        return ["=== POTENTIAL PLAGIARISM DETECTED ===", *_format_table(header, rows)]

    def _render_matrix(self, result: AnalysisResult) -> list[str]:
        documents = sorted(result.documents, key=lambda d: d.name)
        header = ["Document", *(_shorten(d.name, 15) for d in documents)]
        rows: list[list[str]] = []
        for doc_a in documents:
            row = [_shorten(doc_a.name, 20)]
            for doc_b in documents:
                if doc_a.id == doc_b.id:
                    row.append("--")
                    continue
                # Pairs are stored in one direction only
                score = max(
                    result.get_similarity(doc_a.id, doc_b.id),
                    result.get_similarity(doc_b.id, doc_a.id),
                )
                row.append(f"{score:.0%}")
            rows.append(row)
        return ["=== SIMILARITY MATRIX (maximum similarity) ===", *_format_table(header, rows)]


class ProgressPrinter:
    """Progress sink that drives a tqdm bar measured in whole percent."""

    def __init__(self, stream: TextIO | None = None, label: str = "Analyzing documents") -> None:
        self._bar = tqdm(total=100, desc=label, unit="%", file=stream)
        self._last_percent = 0

    def __call__(self, fraction: float) -> None:
        percent = min(int(fraction * 100), 100)
        if percent <= self._last_percent:
            return
        self._bar.update(percent - self._last_percent)
        self._last_percent = percent
        if percent == 100:
            self.close()

    def close(self) -> None:
        """Close the bar; safe to call more than once."""
        self._bar.close()
