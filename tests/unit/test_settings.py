import pytest
from pydantic import ValidationError

from plagcheck.config.settings import Settings


class TestSettingsDefaults:
    def test_default_log_level(self) -> None:
        assert Settings().log_level == "INFO"

    def test_ignores_unrelated_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "prod")
        assert not hasattr(Settings(), "app_env")

    def test_default_algorithm_options(self) -> None:
        s = Settings()
        assert s.ngram_size == 3
        assert s.similarity_threshold == 0.3
        assert s.max_workers == 1

    def test_default_pdf_engine(self) -> None:
        assert Settings().pdf_engine == "pdfplumber"


class TestSettingsFromEnvironment:
    def test_reads_values_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NGRAM_SIZE", "5")
        monkeypatch.setenv("PDF_ENGINE", "pymupdf")
        s = Settings()
        assert s.ngram_size == 5
        assert s.pdf_engine == "pymupdf"

    def test_rejects_non_integer_ngram_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NGRAM_SIZE", "three")
        with pytest.raises(ValidationError):
            Settings()


class TestSettingsValidation:
    @pytest.mark.parametrize(("raw", "expected"), [(1.7, 1.0), (-0.5, 0.0), (0.45, 0.45)])
    def test_threshold_is_clamped(self, raw: float, expected: float) -> None:
        assert Settings(similarity_threshold=raw).similarity_threshold == expected

    def test_export_format_is_lowercased(self) -> None:
        assert Settings(export_format="CSV").export_format == "csv"

    def test_rejects_unknown_export_format(self) -> None:
        with pytest.raises(ValidationError, match="Unknown export format"):
            Settings(export_format="xml")
