"""Netlist scanning.

Components:
- comments: comment stripping with offsets preserved
- scanner: identifier and whitespace primitives over a text cursor
- instance: LutInstance and LutPair data model
- extractor: LUT instance extraction
"""

from lutpack.netlist.comments import strip_comments
from lutpack.netlist.extractor import extract_instances, is_input_port, is_lut_cell
from lutpack.netlist.instance import LutInstance, LutPair
from lutpack.netlist.scanner import Scanner

__all__ = [
    "strip_comments",
    "Scanner",
    "LutInstance",
    "LutPair",
    "extract_instances",
    "is_lut_cell",
    "is_input_port",
]
