from collections.abc import Callable
from pathlib import Path

import pytest

from lenny_corpus.models.episode import Episode
from lenny_corpus.utils.config import CONFIG_FILE, config


@pytest.fixture(autouse=True, scope="session")
def clean_config() -> None:
    """Reset config to the packaged defaults and drop validators for tests."""
    config.validators.clear()
    config.load_file(CONFIG_FILE)


@pytest.fixture(name="corpus_path")
def mock_corpus_path(tmp_path: Path) -> Path:
    corpus_path = tmp_path / "episodes"
    corpus_path.mkdir()
    return corpus_path


@pytest.fixture(name="make_episode_folder")
def mock_make_episode_folder(corpus_path: Path) -> Callable[..., Path]:
    def _make_episode_folder(name: str, transcript: str | None = None) -> Path:
        folder = corpus_path / name
        folder.mkdir()
        if transcript is not None:
            (folder / "transcript.md").write_text(transcript, encoding="utf-8")
        return folder

    return _make_episode_folder


@pytest.fixture(name="episode")
def mock_episode() -> Episode:
    return Episode(
        guest="Elena Verna",
        content="Lenny (00:00:05): Welcome.\nElena Verna (00:01:10): Growth loops beat funnels.",
        path="/fake/elena-verna/transcript.md",
    )
