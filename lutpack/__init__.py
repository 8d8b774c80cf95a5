"""LUT pair packing for synthesized netlists.

lutpack scans gate-level Verilog for ``GTP_LUT<n>`` instances, collects the
nets on their ``I<n>`` inputs and greedily packs them two by two so that each
pair uses at most six distinct inputs.

Processing Pipeline
-------------------
1. **Netlist**: strip comments and extract LUT instances
2. **Pairing**: first-fit greedy pairing under the input limit
3. **Core**: read design files, write ``design_<n>_syn.res`` reports

Quick Start
-----------
::

    from lutpack import extract_instances, pair_instances, format_report

    luts = extract_instances(open("design_1.v").read())
    print(format_report(pair_instances(luts)))
"""

from lutpack.core import (
    PackResult,
    Reader,
    VerilogReader,
    create_reader,
    format_report,
    run_design,
    run_designs,
)
from lutpack.netlist import LutInstance, LutPair, extract_instances, strip_comments
from lutpack.pairing import fits_together, pair_instances

__all__ = [
    # Netlist
    "strip_comments",
    "extract_instances",
    "LutInstance",
    "LutPair",
    # Pairing
    "fits_together",
    "pair_instances",
    # Core pipeline
    "Reader",
    "VerilogReader",
    "create_reader",
    "format_report",
    "PackResult",
    "run_design",
    "run_designs",
]
