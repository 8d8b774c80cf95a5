"""Packing result report.

The report has the pair count on the first line followed by one
``<first> <second>`` line per pair.
"""

from collections.abc import Sequence
from pathlib import Path

from lutpack.core.reader import NETLIST_ENCODING
from lutpack.netlist.instance import LutPair

OUTPUT_SUFFIX = "_syn.res"


def format_report(pairs: Sequence[LutPair]) -> str:
    lines = [str(len(pairs))]
    lines.extend(f"{p.first.name} {p.second.name}" for p in pairs)
    return "\n".join(lines) + "\n"


def write_report(path: Path, pairs: Sequence[LutPair]) -> None:
    """Write the report for ``pairs`` to ``path``.

    Raises
    ------
    OSError
        If the file cannot be written.
    """
    with open(path, "w", encoding=NETLIST_ENCODING, newline="\n") as f:
        f.write(format_report(pairs))


def output_path_for(source: Path, index: int, output_dir: Path | None = None) -> Path:
    """Return ``design_<index>_syn.res`` in ``output_dir`` or next to ``source``."""
    directory = output_dir if output_dir is not None else source.parent
    return directory / f"design_{index}{OUTPUT_SUFFIX}"
