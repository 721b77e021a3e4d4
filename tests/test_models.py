import dataclasses

import numpy as np
import pytest

from xyzmol.core.domain.models import Atom, Molecule, element_style
from xyzmol.core.domain.models.element_style import DEFAULT_COLOR, RADIUS_SCALE


class TestAtom:
    """Tests for the Atom value type."""

    def test_structural_equality(self):
        assert Atom("O", 0.0, 1.0, 2.0) == Atom("O", 0.0, 1.0, 2.0)
        assert Atom("O", 0.0, 1.0, 2.0) != Atom("H", 0.0, 1.0, 2.0)

    def test_immutable(self):
        atom = Atom("O", 0.0, 1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            atom.x = 5.0

    def test_coordinates(self):
        assert Atom("C", 1.0, 2.0, 3.0).coordinates == (1.0, 2.0, 3.0)


class TestMolecule:
    """Tests for the Molecule value type."""

    @pytest.fixture
    def water(self):
        return Molecule(
            atoms=[
                Atom("O", 0.0, 0.0, 0.0),
                Atom("H", 0.96, 0.0, 0.0),
                Atom("H", -0.24, 0.93, 0.0),
            ],
            comment="water",
        )

    def test_atoms_stored_as_tuple(self, water):
        assert isinstance(water.atoms, tuple)
        assert len(water) == 3

    def test_immutable(self, water):
        with pytest.raises(dataclasses.FrozenInstanceError):
            water.comment = "ice"

    def test_get_coordinates(self, water):
        coords = water.get_coordinates()

        assert coords.shape == (3, 3)
        assert coords.dtype == np.float64
        np.testing.assert_allclose(coords[1], [0.96, 0.0, 0.0])

    def test_center(self, water):
        np.testing.assert_allclose(water.center(), [0.24, 0.31, 0.0])

    def test_empty_molecule(self):
        empty = Molecule(atoms=(), comment="")

        assert empty.get_coordinates().shape == (0, 3)
        np.testing.assert_array_equal(empty.center(), [0.0, 0.0, 0.0])
        assert empty.element_counts() == {}

    def test_element_counts_in_file_order(self, water):
        counts = water.element_counts()

        assert counts == {"O": 1, "H": 2}
        assert list(counts) == ["O", "H"]


class TestElementStyle:
    """Tests for element display properties."""

    def test_known_element(self):
        style = element_style("O")

        assert style.color == (1.0, 0.2, 0.2)
        assert style.radius == pytest.approx(1.52 * RADIUS_SCALE)

    def test_case_insensitive(self):
        assert element_style("cl") == element_style("Cl") == element_style("CL")

    def test_two_letter_element(self):
        assert element_style("Fe").radius == pytest.approx(2.00 * RADIUS_SCALE)

    def test_unknown_label_falls_back(self):
        style = element_style("X1")

        assert style.color == DEFAULT_COLOR
        assert style.radius == pytest.approx(1.50 * RADIUS_SCALE)
