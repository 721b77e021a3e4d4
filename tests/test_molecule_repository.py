import logging

import pytest

from xyzmol.core.domain.errors import AtomCountMismatchError
from xyzmol.core.domain.implementations.xyz_parser import XYZParser
from xyzmol.core.domain.models import Atom
from xyzmol.infrastructure.repositories.molecule_repository import MoleculeRepository


class TestMoleculeRepository:
    """Tests for the directory-backed molecule repository."""

    def test_get(self, xyz_dir):
        repository = MoleculeRepository(str(xyz_dir))

        molecule = repository.get("water")

        assert molecule.comment == "water"
        assert molecule.atoms[1] == Atom("H", 0.96, 0.0, 0.0)

    def test_get_missing(self, xyz_dir):
        assert MoleculeRepository(str(xyz_dir)).get("benzene") is None

    def test_get_malformed_raises(self, xyz_dir):
        repository = MoleculeRepository(str(xyz_dir))

        with pytest.raises(AtomCountMismatchError):
            repository.get("broken")

    def test_get_is_cached(self, xyz_dir):
        repository = MoleculeRepository(str(xyz_dir))
        first = repository.get("water")

        (xyz_dir / "water.xyz").write_text("0\nreplaced\n")

        assert repository.get("water") is first
        repository.clear_cache()
        assert repository.get("water").comment == "replaced"

    def test_ids(self, xyz_dir):
        assert MoleculeRepository(str(xyz_dir)).ids() == ["broken", "water"]

    def test_list_skips_malformed(self, xyz_dir, caplog):
        repository = MoleculeRepository(str(xyz_dir))

        with caplog.at_level(logging.WARNING):
            molecules = repository.list()

        assert list(molecules) == ["water"]
        assert "broken.xyz" in caplog.text

    def test_list_skips_unreadable(self, xyz_dir, caplog):
        """Test that a file that cannot be read does not abort the listing."""
        (xyz_dir / "broken.xyz").write_text("0\nempty\n")

        class LockedFileParser(XYZParser):
            def parse(self, stream):
                if stream.name.endswith("broken.xyz"):
                    raise PermissionError(13, "Permission denied", stream.name)
                return super().parse(stream)

        repository = MoleculeRepository(str(xyz_dir), parser=LockedFileParser())

        with caplog.at_level(logging.WARNING):
            molecules = repository.list()

        assert list(molecules) == ["water"]
        assert "Permission denied" in caplog.text

    def test_write_operations_unsupported(self, xyz_dir):
        repository = MoleculeRepository(str(xyz_dir))
        molecule = repository.get("water")

        with pytest.raises(NotImplementedError):
            repository.create("copy", molecule)
        with pytest.raises(NotImplementedError):
            repository.update("water", molecule)
        with pytest.raises(NotImplementedError):
            repository.delete("water")

    def test_sample_data(self, data_dir):
        repository = MoleculeRepository(str(data_dir))

        assert len(repository.get("water_dimer").atoms) == 6
        assert list(repository.list()) == ["water_dimer"]
