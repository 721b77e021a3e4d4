import logging

import pytest

from xyzmol.presentation.cli import inspect_xyz, validate_xyz
from xyzmol.presentation.cli.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put back the root logger configuration changed by the CLI."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestInspectCLI:
    """Tests for xyz-inspect."""

    def test_valid_file(self, data_dir, capsys):
        code = inspect_xyz.main([str(data_dir / "water_dimer.xyz")])

        out = capsys.readouterr().out
        assert code == 0
        assert "Comment: water dimer" in out
        assert "Atoms: 6" in out
        assert "O" in out and "H" in out

    def test_malformed_file(self, data_dir, capsys):
        code = inspect_xyz.main([str(data_dir / "truncated.xyz")])

        assert code == 1
        assert "atom count mismatch" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        code = inspect_xyz.main([str(tmp_path / "nope.xyz")])

        assert code == 1
        assert "nope.xyz" in capsys.readouterr().err


class TestValidateCLI:
    """Tests for xyz-validate."""

    def test_directory_with_failure(self, xyz_dir, capsys):
        code = validate_xyz.main(["--quiet", str(xyz_dir)])

        out = capsys.readouterr().out
        assert code == 1
        assert "broken.xyz" in out
        assert "1/2 files valid" in out

    def test_all_valid(self, data_dir, capsys):
        code = validate_xyz.main(["--quiet", str(data_dir / "water_dimer.xyz")])

        assert code == 0
        assert "1/1 files valid" in capsys.readouterr().out

    def test_no_files(self, tmp_path, capsys):
        code = validate_xyz.main([str(tmp_path)])

        assert code == 1
        assert "No XYZ files found" in capsys.readouterr().err

    def test_collect_files(self, xyz_dir):
        sub = xyz_dir / "sub"
        sub.mkdir()
        (sub / "methane.xyz").write_text("1\nc\nC 0 0 0\n")

        files = validate_xyz.collect_files([str(xyz_dir)])

        assert [f.rsplit("/", 1)[-1] for f in files] == [
            "broken.xyz",
            "methane.xyz",
            "water.xyz",
        ]


class TestLogging:
    """Tests for CLI logging setup."""

    def test_levels(self):
        assert setup_logging(verbose=True).level == logging.DEBUG
        assert setup_logging(quiet=True).level == logging.ERROR
        assert setup_logging().level == logging.WARNING

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging(log_file=str(log_file))

        logging.getLogger("xyzmol.test").warning("hello")
        for handler in logger.handlers:
            handler.flush()

        assert "WARNING - hello" in log_file.read_text()
        for handler in logger.handlers:
            handler.close()
