#!/usr/bin/env python3
# src/xyzmol/core/domain/models/molecule.py

"""
Domain model representing a molecule parsed from an XYZ file.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from .atom import Atom


@dataclass(frozen=True)
class Molecule:
    """Ordered atoms plus the free-form comment line of the source file.

    Atom order follows the file; the index of an atom is its identity for
    downstream consumers.
    """

    atoms: Tuple[Atom, ...]
    comment: str

    def __post_init__(self):
        """Store atoms as a tuple so the molecule stays immutable."""
        object.__setattr__(self, "atoms", tuple(self.atoms))

    def __len__(self) -> int:
        return len(self.atoms)

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        if not self.atoms:
            return np.empty((0, 3), dtype=np.float64)
        return np.array([atom.coordinates for atom in self.atoms], dtype=np.float64)

    def center(self) -> np.ndarray:
        """Geometric center of the atoms; the origin for an empty molecule."""
        if not self.atoms:
            return np.zeros(3, dtype=np.float64)
        return self.get_coordinates().mean(axis=0)

    def element_counts(self) -> Dict[str, int]:
        """Number of atoms per element label, in order of first appearance."""
        return dict(Counter(atom.element for atom in self.atoms))
