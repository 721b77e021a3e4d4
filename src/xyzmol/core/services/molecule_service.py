"""Service for loading, validating and summarizing XYZ molecules."""

from typing import Iterable, List, Optional
import logging

from tqdm.auto import tqdm

from .base_service import BaseService
from ..domain.errors import ParseError
from ..domain.interfaces.structure_parser import StructureParser
from ..domain.implementations.xyz_parser import XYZParser
from ..domain.models.element_style import element_style
from ..domain.models.molecule import Molecule
from ..domain.models.molecule_summary import MoleculeSummary
from ..domain.models.validation_report import ValidationReport
from ..interfaces.repository import Repository

logger = logging.getLogger(__name__)


class MoleculeService(BaseService[Molecule]):
    """Service for working with molecules stored in XYZ files."""

    def __init__(
        self,
        repository: Optional[Repository[Molecule]] = None,
        parser: Optional[StructureParser] = None,
    ):
        """Initialize service with optional repository and parser."""
        super().__init__(repository)
        self._parser = parser or XYZParser()

    def load(self, path: str) -> Molecule:
        """
        Open and parse a single XYZ file.

        Args:
            path: Path of the file to read

        Returns:
            Parsed molecule

        Raises:
            ParseError: If the file contents are malformed
            OSError: If the file cannot be read
        """
        with open(path, "rb") as f:
            molecule = self._parser.parse(f)
        logger.info(f"Loaded {len(molecule.atoms)} atoms from {path}")
        return molecule

    def validate_files(
        self,
        paths: Iterable[str],
        fail_fast: bool = False,
        show_progress: bool = False,
    ) -> List[ValidationReport]:
        """
        Parse every file and report the outcome of each.

        Args:
            paths: Files to validate
            fail_fast: Stop after the first failing file
            show_progress: Display a progress bar

        Returns:
            One ValidationReport per processed file, in input order
        """
        paths = list(paths)
        reports = []
        for path in tqdm(paths, desc="Validating", disable=not show_progress):
            try:
                report = ValidationReport(path=path, molecule=self.load(path))
            except (ParseError, OSError) as e:
                logger.warning(f"{path}: {e}")
                report = ValidationReport(path=path, error=e)
            reports.append(report)
            if fail_fast and not report.ok:
                break

        failed = sum(1 for r in reports if not r.ok)
        logger.info(f"Validated {len(reports)} files, {failed} failed")
        return reports

    @staticmethod
    def summarize(molecule: Molecule) -> MoleculeSummary:
        """
        Collect what a viewer needs to display a molecule.

        Args:
            molecule: Parsed molecule

        Returns:
            MoleculeSummary with composition, center and element styles
        """
        counts = molecule.element_counts()
        center = molecule.center()
        return MoleculeSummary(
            comment=molecule.comment,
            num_atoms=len(molecule.atoms),
            element_counts=counts,
            center=(float(center[0]), float(center[1]), float(center[2])),
            styles={element: element_style(element) for element in counts},
        )
