from plagcheck.analysis.detector import PlagiarismDetector, build_detector
from plagcheck.analysis.models import AnalysisResult, ComparisonResult, Document, ProcessedDocument

__all__ = [
    "AnalysisResult",
    "ComparisonResult",
    "Document",
    "PlagiarismDetector",
    "ProcessedDocument",
    "build_detector",
]
