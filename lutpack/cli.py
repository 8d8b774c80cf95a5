# Copyright 2021 University of Manchester
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0
"""lutpack command-line interface.

Packs the LUTs of every ``design_<n>.v`` netlist into pairs and writes one
``design_<n>_syn.res`` report per design.
"""

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from pydantic import ValidationError

from lutpack.core.driver import discover_designs, run_designs, select_designs
from lutpack.utils.exceptions import CommandError
from lutpack.utils.settings import init_context

HELP = """
Scans synthesized Verilog netlists for GTP_LUT<n> instances (GTP_LUT6CARRY
excluded), collects the nets connected to their I<n> ports and greedily packs
them into pairs that use at most --max-inputs distinct nets.

Without FILES, every design_<n>.v in --dir is packed in index order. For each
design a report design_<n>_syn.res is written:

    <pair count>
    <instance> <instance>    (one line per pair)

Settings can also be given as LUTPACK_* environment variables or in an .env
file (LUTPACK_MAX_INPUTS, LUTPACK_MAX_JOBS, LUTPACK_OUTPUT_DIR,
LUTPACK_CELL_PREFIX, LUTPACK_EXCLUDED_CELLS).
"""

app = typer.Typer(help=HELP, add_completion=False)


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure the loguru sink for command line use.

    Parameters
    ----------
    verbose : bool
        Log debug messages.
    debug : bool
        Log debug messages with source locations and full tracebacks.
    """
    logger.remove()
    if debug:
        log_format = (
            "<level>{level:}</level> | "
            "<cyan>[{time:DD-MM-YYYY HH:mm:ss}]</cyan> | "
            "<cyan>[{name}:{function}:{line}]</cyan> - "
            "<level>{message}</level>"
        )
    else:
        log_format = "<level>{level:}</level> | <level>{message}</level>"
    logger.add(
        sys.stderr,
        format=log_format,
        level="DEBUG" if verbose or debug else "INFO",
        backtrace=debug,
        diagnose=debug,
    )


@app.command()
def pack(
    files: Annotated[
        list[Path] | None,
        typer.Argument(help="Design netlists to pack (design_<n>.v)."),
    ] = None,
    directory: Annotated[
        Path,
        typer.Option("--dir", "-d", help="Directory searched for design_<n>.v when no FILES are given."),
    ] = Path(),
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for the reports. Defaults to the directory of each netlist.",
        ),
    ] = None,
    jobs: Annotated[
        int | None,
        typer.Option("--jobs", "-j", help="Number of designs packed in parallel (-1 for CPU count)."),
    ] = None,
    max_inputs: Annotated[
        int | None,
        typer.Option("--max-inputs", help="Largest number of distinct inputs in a pair (default 6)."),
    ] = None,
    env_file: Annotated[
        Path | None,
        typer.Option("--env-file", help="Read LUTPACK_* settings from this .env file."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show detailed log information.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Enable debug logging.")] = False,
) -> None:
    """Pack LUT instances of design netlists into pairs."""
    setup_logger(verbose, debug)

    try:
        settings = init_context(env_file, max_inputs=max_inputs, max_jobs=jobs, output_dir=output_dir)
    except ValidationError as e:
        logger.error(f"Invalid settings: {e}")
        raise typer.Exit(1) from None

    try:
        designs = select_designs(files) if files else discover_designs(directory)
    except CommandError as e:
        logger.opt(exception=e if debug else None).error(str(e))
        raise typer.Exit(1) from None

    if not designs:
        logger.warning("No design_<n>.v netlists to pack")
        return

    if settings.output_dir is not None:
        settings.output_dir.mkdir(parents=True, exist_ok=True)

    run_designs(
        designs,
        jobs=settings.max_jobs,
        output_dir=settings.output_dir,
        max_inputs=settings.max_inputs,
        cell_prefix=settings.cell_prefix,
        excluded_cells=settings.excluded_cells,
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
