"""LUT instance extraction from gate-level Verilog.

This is a best-effort scanner, not a validating parser. It walks the text once
from left to right, picks out instantiations of LUT cells and reads their
``.I<n>(net)`` port bindings. Anything it does not understand is skipped.
"""

from collections.abc import Iterable

from loguru import logger

from lutpack.netlist.comments import strip_comments
from lutpack.netlist.instance import LutInstance
from lutpack.netlist.scanner import Scanner

DEFAULT_CELL_PREFIX = "GTP_LUT"
DEFAULT_EXCLUDED_CELLS = ("GTP_LUT6CARRY",)


def is_lut_cell(
    cell: str,
    prefix: str = DEFAULT_CELL_PREFIX,
    excluded: Iterable[str] = DEFAULT_EXCLUDED_CELLS,
) -> bool:
    """Check whether a cell name is ``<prefix><digits>`` and not excluded.

    Parameters
    ----------
    cell : str
        Cell (module) name of an instantiation.
    prefix : str, optional
        Required literal prefix. Default is ``GTP_LUT``.
    excluded : Iterable[str], optional
        Names rejected even if they match. Default is ``GTP_LUT6CARRY``.

    Returns
    -------
    bool
        True for names such as ``GTP_LUT6``; False for ``GTP_LUT``,
        ``GTP_LUTX`` or ``GTP_LUT6CARRY``.
    """
    if cell in excluded or not cell.startswith(prefix):
        return False
    suffix = cell[len(prefix) :]
    return suffix != "" and all(c in "0123456789" for c in suffix)


def is_input_port(port: str) -> bool:
    """Check whether a port name is ``I`` followed by one or more digits."""
    return len(port) >= 2 and port[0] == "I" and all(c in "0123456789" for c in port[1:])


def _read_port_list(scanner: Scanner, lut: LutInstance) -> bool:
    """Read a port connection list, recording input nets on ``lut``.

    The cursor must be just past the opening parenthesis.

    Returns
    -------
    bool
        True if the closing parenthesis was found, False if the text ended first.
    """
    depth = 1
    while not scanner.at_end:
        scanner.skip_spaces()
        c = scanner.peek()
        if c == ")":
            scanner.advance()
            depth -= 1
            if depth == 0:
                return True
            continue
        if c == "(":
            scanner.advance()
            depth += 1
            continue
        if c != ".":
            scanner.advance()
            continue

        scanner.advance()
        port = scanner.parse_identifier()
        if port is None:
            continue
        scanner.skip_spaces()
        if scanner.peek() != "(":
            continue
        scanner.advance()

        start = scanner.pos
        closed = scanner.skip_until(")") == ")"
        net = scanner.text[start : scanner.pos]
        if closed:
            scanner.advance()

        if is_input_port(port):
            lut.add_input(net)
    return False


def extract_instances(
    text: str,
    cell_prefix: str = DEFAULT_CELL_PREFIX,
    excluded_cells: Iterable[str] = DEFAULT_EXCLUDED_CELLS,
) -> list[LutInstance]:
    """Extract LUT instances from netlist text.

    Parameters
    ----------
    text : str
        Full netlist text; comments are stripped here.
    cell_prefix : str, optional
        Cell name prefix passed to :func:`is_lut_cell`.
    excluded_cells : Iterable[str], optional
        Cell names passed to :func:`is_lut_cell` as exclusions.

    Returns
    -------
    list[LutInstance]
        Instances in the order they appear in the text. Malformed
        instantiations are dropped silently.
    """
    excluded = frozenset(excluded_cells)
    scanner = Scanner(strip_comments(text))
    luts: list[LutInstance] = []

    while not scanner.at_end:
        cell = scanner.parse_identifier()
        if cell is None:
            scanner.advance()
            continue

        if not is_lut_cell(cell, cell_prefix, excluded):
            continue

        name = scanner.parse_identifier()
        if name is None:
            continue

        scanner.skip_spaces()
        if scanner.peek() != "(":
            continue
        scanner.advance()

        lut = LutInstance(name)
        if not _read_port_list(scanner, lut):
            logger.debug(f"Port list of {name} is not closed, instance dropped")
            break

        # resynchronise at the end of the statement
        if scanner.skip_until(";\n") == ";":
            scanner.advance()

        luts.append(lut)

    logger.debug(f"Extracted {len(luts)} LUT instances")
    return luts
