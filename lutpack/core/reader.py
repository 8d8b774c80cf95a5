"""Netlist readers - turn netlist files into LUT instances.

Readers are the input layer of the packing pipeline. Netlist files are decoded
as latin-1 so every byte maps to one character and names are written back
unchanged.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from lutpack.netlist.extractor import (
    DEFAULT_CELL_PREFIX,
    DEFAULT_EXCLUDED_CELLS,
    extract_instances,
)
from lutpack.netlist.instance import LutInstance
from lutpack.utils.exceptions import InvalidFileType

NETLIST_ENCODING = "latin-1"


class Reader(ABC):
    """Abstract base for netlist input parsers.

    Follows strategy pattern - allows switching between input formats
    without changing the rest of the pipeline.
    """

    @abstractmethod
    def read(self, path: Path) -> list[LutInstance]:
        """Parse input file and return its LUT instances.

        Parameters
        ----------
        path : Path
            Path to the netlist file

        Returns
        -------
        list[LutInstance]
            Instances in discovery order
        """
        ...


class VerilogReader(Reader):
    """Gate-level Verilog netlist reader.

    Parameters
    ----------
    cell_prefix : str, optional
        Prefix of LUT cell names.
    excluded_cells : Iterable[str], optional
        Cell names that match the prefix but are not LUTs.
    """

    def __init__(
        self,
        cell_prefix: str = DEFAULT_CELL_PREFIX,
        excluded_cells: Iterable[str] = DEFAULT_EXCLUDED_CELLS,
    ) -> None:
        self.cell_prefix = cell_prefix
        self.excluded_cells = tuple(excluded_cells)

    def read(self, path: Path) -> list[LutInstance]:
        """Parse a Verilog netlist.

        Parameters
        ----------
        path : Path
            Path to a ``.v`` netlist

        Returns
        -------
        list[LutInstance]
            Instances in discovery order

        Raises
        ------
        OSError
            If the file cannot be read.
        """
        text = path.read_text(encoding=NETLIST_ENCODING)
        return extract_instances(text, self.cell_prefix, self.excluded_cells)


def create_reader(path: Path, **kwargs) -> Reader:
    """Create appropriate reader based on file extension.

    Parameters
    ----------
    path : Path
        Path to the netlist file
    **kwargs
        Passed to the reader constructor.

    Returns
    -------
    Reader
        Appropriate reader instance

    Raises
    ------
    InvalidFileType
        If no reader handles the file extension.
    """
    if path.suffix == ".v":
        return VerilogReader(**kwargs)
    raise InvalidFileType(f"Unsupported netlist file type: {path.suffix}")
