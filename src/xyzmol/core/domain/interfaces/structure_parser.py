"""Interface for molecular structure parsers."""

import io
from abc import ABC, abstractmethod
from typing import BinaryIO, TextIO, Union

from ..models.molecule import Molecule


class StructureParser(ABC):
    """Abstract base class for structure file parsers."""

    @abstractmethod
    def parse(self, stream: Union[BinaryIO, TextIO]) -> Molecule:
        """
        Parse a structure from an already opened stream.

        Args:
            stream: Readable binary or text stream

        Returns:
            Molecule built from the stream contents

        Raises:
            ParseError: If the contents are malformed
        """
        pass

    def parse_str(self, content: str) -> Molecule:
        """Parse a structure held in memory."""
        return self.parse(io.StringIO(content))
