from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    ngram_size: int = 3
    similarity_threshold: float = 0.3
    max_workers: int = 1

    pdf_engine: str = "pdfplumber"

    input_directory: str = "sample-data"
    output_file: str = ""
    export_format: str = "json"
    show_matrix: bool = True
    show_progress: bool = True
    max_matrix_documents: int = 15

    @field_validator("similarity_threshold")
    @classmethod
    def _clamp_threshold(cls, value: float) -> float:
        return min(max(value, 0.0), 1.0)

    @field_validator("export_format")
    @classmethod
    def _check_export_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in ("json", "csv"):
            raise ValueError(f"Unknown export format '{value}'. Choose from: ['json', 'csv']")
        return fmt
