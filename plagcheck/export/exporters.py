import csv
import json
from abc import ABC, abstractmethod
from pathlib import Path

from plagcheck.analysis.models import AnalysisResult
from plagcheck.export.summary import summarize_pairs

FLAGGED_STATUS = "POTENTIAL_PLAGIARISM"
OK_STATUS = "OK"


class BaseExporter(ABC):
    """Contract for all result exporters."""

    extension: str = ""

    @abstractmethod
    def export(self, result: AnalysisResult, path: Path, threshold: float) -> None:
        """Write *result* to *path*, creating parent directories as needed."""


class JsonExporter(BaseExporter):
    """Writes the full analysis result as indented JSON."""

    extension = "json"

    def export(self, result: AnalysisResult, path: Path, threshold: float) -> None:
        """Write every comparison; *threshold* does not filter the JSON payload."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(result.to_dict(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class CsvExporter(BaseExporter):
    """Writes one row per document pair with its maximum and average scores."""

    extension = "csv"

    HEADER = [
        "Document A",
        "Document B",
        "Max Similarity",
        "Average Similarity",
        "Algorithms",
        "Status",
    ]

    def export(self, result: AnalysisResult, path: Path, threshold: float) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle)
            writer.writerow(self.HEADER)
            for pair in summarize_pairs(result):
                algorithms = ";".join(
                    f"{algorithm.value}:{score:.2%}" for algorithm, score in pair.scores.items()
                )
                writer.writerow(
                    [
                        pair.document_a_name,
                        pair.document_b_name,
                        f"{pair.max_score:.2%}",
                        f"{pair.avg_score:.2%}",
                        algorithms,
                        FLAGGED_STATUS if pair.is_flagged(threshold) else OK_STATUS,
                    ]
                )


class ExporterFactory:
    """Creates the exporter for an output format."""

    EXPORTERS: dict[str, type[BaseExporter]] = {
        "json": JsonExporter,
        "csv": CsvExporter,
    }

    @classmethod
    def create(cls, export_format: str) -> BaseExporter:
        fmt = export_format.lower()
        exporter_cls = cls.EXPORTERS.get(fmt)
        if exporter_cls is None:
            raise ValueError(
                f"Unknown export format '{fmt}'. Choose from: {list(cls.EXPORTERS)}"
            )
        return exporter_cls()
