import argparse
import sys
from datetime import datetime
from pathlib import Path

from plagcheck.analysis.detector import build_detector
from plagcheck.config.settings import Settings
from plagcheck.export.exporters import ExporterFactory
from plagcheck.loading.document_loader import DocumentLoader
from plagcheck.loading.factory import ExtractorFactory
from plagcheck.logging.logger import Log
from plagcheck.report.console import ConsoleReport, ProgressPrinter
from plagcheck.similarity.exceptions import UnknownAlgorithmError
from plagcheck.similarity.factory import AlgorithmFactory
from plagcheck.similarity.models import AlgorithmType


def parse_args(argv: list[str] | None, settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="plagcheck",
        description="Detect textual overlap between every pair of documents in a directory.",
    )
    parser.add_argument(
        "-i", "--input", default=settings.input_directory,
        help="directory with .txt, .md and .pdf documents (default: %(default)s)",
    )
    parser.add_argument(
        "-a", "--algorithms", default="all",
        help="comma-separated list of CosineSimilarity, LongestCommonSubsequence, NGram, "
        "or 'all' (default: %(default)s)",
    )
    parser.add_argument(
        "-o", "--output", default=settings.output_file,
        help="output file (default: results_YYYYMMDD_HHMMSS.<format>)",
    )
    parser.add_argument(
        "-t", "--threshold", type=float, default=settings.similarity_threshold,
        help="similarity threshold for flagging pairs, 0-1 (default: %(default)s)",
    )
    parser.add_argument(
        "--format", dest="export_format", choices=["json", "csv"],
        default=settings.export_format, type=str.lower,
    )
    parser.add_argument(
        "--no-matrix", dest="show_matrix", action="store_false", default=settings.show_matrix,
        help="don't display the similarity matrix",
    )
    parser.add_argument(
        "--no-progress", dest="show_progress", action="store_false",
        default=settings.show_progress, help="don't display analysis progress",
    )
    return parser.parse_args(argv)


def select_algorithms(names: str) -> list[AlgorithmType]:
    """Resolve a comma-separated list; unknown names are skipped, none left means all."""
    requested = [name.strip() for name in names.split(",") if name.strip()]
    if any(name.lower() == "all" for name in requested):
        return list(AlgorithmType)

    algorithms: list[AlgorithmType] = []
    for name in requested:
        try:
            algorithms.append(AlgorithmFactory.resolve(name))
        except UnknownAlgorithmError:
            Log.warning(f"Unknown algorithm type: {name}. Skipping.")
    return algorithms or list(AlgorithmType)


def default_output_path(export_format: str) -> Path:
    return Path(f"results_{datetime.now():%Y%m%d_%H%M%S}.{export_format}")


def main(argv: list[str] | None = None) -> int:
    """Entry point: load documents -> analyze -> report -> export."""
    try:
        settings = Settings()
        Log.configure(settings.log_level)
    except ValueError as exc:
        # pydantic's ValidationError is a ValueError
        Log.configure("INFO")
        Log.error(f"Invalid configuration: {exc}")
        return 1

    args = parse_args(argv, settings)
    threshold = min(max(args.threshold, 0.0), 1.0)

    try:
        loader = DocumentLoader(ExtractorFactory.create(settings))
        documents = loader.load_directory(Path(args.input))
        if not documents:
            Log.error(f"No documents found in directory: {args.input}")
            print(f"Error: No documents found in '{args.input}'", file=sys.stderr)
            return 1
        Log.info(f"Loaded {len(documents)} documents")

        detector = build_detector(settings)
        progress = ProgressPrinter() if args.show_progress else None
        try:
            result = detector.analyze(documents, select_algorithms(args.algorithms), progress)
        finally:
            if progress is not None:
                progress.close()

        report = ConsoleReport(max_matrix_documents=settings.max_matrix_documents)
        print(report.render(result, threshold, show_matrix=args.show_matrix))

        exporter = ExporterFactory.create(args.export_format)
        output = Path(args.output) if args.output else default_output_path(exporter.extension)
        exporter.export(result, output, threshold)
        Log.info(f"Results saved to: {output.resolve()}")
        return 0
    except Exception as exc:
        Log.exception(f"An error occurred during analysis: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
