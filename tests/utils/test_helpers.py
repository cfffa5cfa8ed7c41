from pathlib import Path
from unittest.mock import MagicMock

import pytest

from lenny_corpus.utils import helpers


def test_count_subdirectories(tmp_path: Path):
    (tmp_path / "one").mkdir()
    (tmp_path / "two").mkdir()
    (tmp_path / "file.md").write_text("")

    assert helpers.count_subdirectories(tmp_path) == 2


def test_run_main_safely():
    func = MagicMock()

    helpers.run_main_safely(func, 1, key="value")

    func.assert_called_once_with(1, key="value")


def test_run_main_safely_reraises():
    func = MagicMock(side_effect=ValueError("boom"))

    with pytest.raises(ValueError, match="boom"):
        helpers.run_main_safely(func)
