"""Per-design packing driver.

Finds ``design_<n>.v`` netlists, runs read -> extract -> pair -> report for
each of them and logs a one-line summary per design. Designs are independent,
so with more than one job they are processed in a process pool.
"""

import os
import re
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from lutpack.core.reader import create_reader
from lutpack.core.report import output_path_for, write_report
from lutpack.netlist.extractor import DEFAULT_CELL_PREFIX, DEFAULT_EXCLUDED_CELLS
from lutpack.netlist.instance import LutInstance, LutPair
from lutpack.pairing import DEFAULT_MAX_INPUTS, pair_instances
from lutpack.utils.exceptions import CommandError
from lutpack.utils.processpool import DillProcessPoolExecutor

DESIGN_FILE = re.compile(r"design_(\d+)\.v")


@dataclass
class PackResult:
    """
    Outcome of packing one design.

    Attributes
    ----------
    source : Path
        Input netlist.
    output : Path
        Report file path.
    instances : list[LutInstance]
        All extracted LUT instances, paired or not.
    pairs : list[LutPair]
        Pairs in emission order.
    elapsed : float
        Wall time for the whole design in seconds.
    written : bool
        False if the report could not be written.
    """

    source: Path
    output: Path
    instances: list[LutInstance] = field(default_factory=list)
    pairs: list[LutPair] = field(default_factory=list)
    elapsed: float = 0.0
    written: bool = False

    @property
    def lut_count(self) -> int:
        return len(self.instances)

    @property
    def pair_count(self) -> int:
        return len(self.pairs)

    def summary(self) -> str:
        return (
            f"{self.source}: LUTs={self.lut_count} pairs={self.pair_count} "
            f"time={self.elapsed:.3f} s -> {self.output}"
        )


def match_design_file(path: Path) -> int | None:
    """Return the numeric index of a ``design_<digits>.v`` file name, else None."""
    m = DESIGN_FILE.fullmatch(path.name)
    if m is None:
        return None
    return int(m.group(1))


def discover_designs(directory: Path) -> list[tuple[int, Path]]:
    """Find all design netlists in a directory.

    Parameters
    ----------
    directory : Path
        Directory to search (not recursive).

    Returns
    -------
    list[tuple[int, Path]]
        ``(index, path)`` tuples sorted by index.

    Raises
    ------
    CommandError
        If ``directory`` is not a directory.
    """
    if not directory.is_dir():
        raise CommandError(f"Cannot open directory {directory}")

    designs = []
    for p in directory.iterdir():
        idx = match_design_file(p)
        if idx is not None and p.is_file():
            designs.append((idx, p))
    designs.sort(key=lambda d: (d[0], d[1].name))
    logger.debug(f"Found {len(designs)} designs in {directory}")
    return designs


def select_designs(files: Iterable[Path]) -> list[tuple[int, Path]]:
    """Keep the design netlists among explicitly given files, in the given order."""
    designs = []
    for p in files:
        idx = match_design_file(p)
        if idx is None:
            logger.warning(f"Skipping (not design_*.v): {p}")
            continue
        designs.append((idx, p))
    return designs


def run_design(
    path: Path,
    index: int,
    output_dir: Path | None = None,
    max_inputs: int = DEFAULT_MAX_INPUTS,
    cell_prefix: str = DEFAULT_CELL_PREFIX,
    excluded_cells: Sequence[str] = DEFAULT_EXCLUDED_CELLS,
) -> PackResult:
    """Pack one design and write its report.

    Parameters
    ----------
    path : Path
        Netlist to read.
    index : int
        Design index used to name the report.
    output_dir : Path | None, optional
        Report directory. Default is the netlist's directory.
    max_inputs : int, optional
        Union limit for a pair.
    cell_prefix : str, optional
        LUT cell name prefix.
    excluded_cells : Sequence[str], optional
        Cell names that are never LUTs.

    Returns
    -------
    PackResult
        The packing result. ``written`` is False when the report could not be
        written.

    Raises
    ------
    OSError
        If the netlist cannot be read.
    """
    start = time.perf_counter()
    reader = create_reader(path, cell_prefix=cell_prefix, excluded_cells=excluded_cells)
    instances = reader.read(path)
    pairs = pair_instances(instances, max_inputs)

    result = PackResult(path, output_path_for(path, index, output_dir), instances, pairs)
    try:
        write_report(result.output, pairs)
        result.written = True
    except OSError as e:
        logger.error(f"Failed to write {result.output}: {e}")
    result.elapsed = time.perf_counter() - start
    return result


def _resolve_jobs(jobs: int) -> int:
    if jobs != -1:
        return jobs
    if c := os.cpu_count():
        return c
    logger.warning("Unable to determine CPU count, defaulting to 4")
    return 4


def run_designs(
    designs: Sequence[tuple[int, Path]],
    jobs: int = 1,
    output_dir: Path | None = None,
    max_inputs: int = DEFAULT_MAX_INPUTS,
    cell_prefix: str = DEFAULT_CELL_PREFIX,
    excluded_cells: Sequence[str] = DEFAULT_EXCLUDED_CELLS,
) -> list[PackResult]:
    """Pack several designs, sequentially or in a process pool.

    Parameters
    ----------
    designs : Sequence[tuple[int, Path]]
        ``(index, path)`` tuples as returned by :func:`discover_designs`.
    jobs : int, optional
        Number of worker processes; -1 uses one per CPU. Default is 1.
    output_dir, max_inputs, cell_prefix, excluded_cells
        Passed to :func:`run_design`.

    Returns
    -------
    list[PackResult]
        Results in the order of ``designs``. Designs whose netlist could not be
        read are logged and left out.
    """
    jobs = _resolve_jobs(jobs)
    options = {
        "output_dir": output_dir,
        "max_inputs": max_inputs,
        "cell_prefix": cell_prefix,
        "excluded_cells": tuple(excluded_cells),
    }

    results: list[PackResult] = []
    if jobs <= 1 or len(designs) <= 1:
        for idx, path in designs:
            try:
                results.append(run_design(path, idx, **options))
            except OSError as e:
                logger.error(f"Failed to read {path}: {e}")
                continue
            logger.info(results[-1].summary())
        return results

    logger.debug(f"Packing {len(designs)} designs with {jobs} jobs")
    with DillProcessPoolExecutor(max_workers=jobs) as executor:
        futures = [(path, executor.submit(run_design, path, idx, **options)) for idx, path in designs]
        for path, future in futures:
            try:
                results.append(future.result())
            except OSError as e:
                logger.error(f"Failed to read {path}: {e}")
                continue
            logger.info(results[-1].summary())
    return results
