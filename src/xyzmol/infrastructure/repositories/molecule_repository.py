# src/xyzmol/infrastructure/repositories/molecule_repository.py
"""Repository implementation for molecules stored as XYZ files."""

from typing import Dict, List, Optional
import logging
import os

from ...core.interfaces.repository import Repository
from ...core.domain.errors import ParseError
from ...core.domain.interfaces.structure_parser import StructureParser
from ...core.domain.implementations.xyz_parser import XYZParser
from ...core.domain.models.molecule import Molecule

logger = logging.getLogger(__name__)

XYZ_EXTENSION = ".xyz"


class MoleculeRepository(Repository[Molecule]):
    """Read-only repository over a directory of XYZ files."""

    def __init__(self, data_dir: str, parser: Optional[StructureParser] = None):
        """
        Initialize repository with data directory.

        Args:
            data_dir: Directory containing .xyz files
            parser: Parser used to read files, XYZParser by default
        """
        self._data_dir = data_dir
        self._parser = parser or XYZParser()
        self._cache: Dict[str, Molecule] = {}

    def path_for(self, id: str) -> str:
        """File path backing a molecule ID."""
        return os.path.join(self._data_dir, f"{id}{XYZ_EXTENSION}")

    def get(self, id: str) -> Optional[Molecule]:
        """
        Retrieve a molecule by ID.

        Args:
            id: File name without the .xyz extension

        Returns:
            Parsed molecule, or None if no such file exists

        Raises:
            ParseError: If the file exists but is malformed
        """
        if id in self._cache:
            return self._cache[id]

        file_path = self.path_for(id)
        if not os.path.exists(file_path):
            return None

        with open(file_path, "rb") as f:
            molecule = self._parser.parse(f)
        logger.info(f"Loaded {id}: {len(molecule.atoms)} atoms")

        self._cache[id] = molecule
        return molecule

    def ids(self) -> List[str]:
        """List IDs of all XYZ files in the data directory."""
        return sorted(
            os.path.splitext(file_name)[0]
            for file_name in os.listdir(self._data_dir)
            if file_name.endswith(XYZ_EXTENSION)
            and os.path.isfile(os.path.join(self._data_dir, file_name))
        )

    def list(self) -> Dict[str, Molecule]:
        """
        Load all parseable molecules in the data directory.

        Returns:
            Dictionary mapping molecule IDs to molecules; malformed or unreadable
            files are logged and left out
        """
        molecules = {}
        for id in self.ids():
            try:
                molecule = self.get(id)
            except (ParseError, OSError) as e:
                logger.warning(f"Skipping {self.path_for(id)}: {e}")
                continue
            if molecule is not None:
                molecules[id] = molecule
        return molecules

    def clear_cache(self) -> None:
        """Forget previously loaded molecules."""
        self._cache.clear()
