import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), "src"))

TEST_DATA_DIR = Path(__file__).parent / "test_data" / "input"


@pytest.fixture
def data_dir() -> Path:
    """Directory holding the sample XYZ files."""
    return TEST_DATA_DIR


@pytest.fixture
def xyz_dir(tmp_path):
    """Temporary directory with one valid and one malformed XYZ file."""
    (tmp_path / "water.xyz").write_text(
        "3\nwater\nO 0.0 0.0 0.0\nH 0.96 0.0 0.0\nH -0.24 0.93 0.0\n"
    )
    (tmp_path / "broken.xyz").write_text("2\nbroken\nO 0.0 0.0 0.0\n")
    (tmp_path / "notes.txt").write_text("not a structure\n")
    return tmp_path
