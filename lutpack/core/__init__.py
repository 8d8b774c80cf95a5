"""Core packing pipeline.

- Reader: parses netlist files -> LUT instances
- Report: formats and writes pair listings
- Driver: finds designs and runs the pipeline per design

Example Pipeline
----------------
::

    from pathlib import Path
    from lutpack.core import create_reader, format_report
    from lutpack.pairing import pair_instances

    path = Path("design_1.v")
    instances = create_reader(path).read(path)
    pairs = pair_instances(instances)
    print(format_report(pairs))
"""

from lutpack.core.driver import (
    PackResult,
    discover_designs,
    match_design_file,
    run_design,
    run_designs,
    select_designs,
)
from lutpack.core.reader import Reader, VerilogReader, create_reader
from lutpack.core.report import format_report, output_path_for, write_report

__all__ = [
    "Reader",
    "VerilogReader",
    "create_reader",
    "format_report",
    "write_report",
    "output_path_for",
    "PackResult",
    "match_design_file",
    "discover_designs",
    "select_designs",
    "run_design",
    "run_designs",
]
