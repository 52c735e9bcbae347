from pathlib import Path

import pytest

CORPUS = {
    "essay_original.txt": (
        "Photosynthesis converts light energy into chemical energy stored in glucose. "
        "Plants absorb carbon dioxide and release oxygen during the process."
    ),
    "essay_copied.txt": (
        "Photosynthesis converts light energy into chemical energy stored in glucose. "
        "Plants absorb carbon dioxide and release oxygen in this process."
    ),
    "notes.md": "Medieval castles were built with thick stone walls and deep moats.",
    "ignored.docx": "not a supported format",
}


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "documents"
    directory.mkdir()
    for name, text in CORPUS.items():
        (directory / name).write_text(text, encoding="utf-8")
    return directory


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # Keeps a developer .env out of Settings()
    monkeypatch.chdir(tmp_path)
