"""Shared fixtures for lutpack tests."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger

from lutpack.utils.settings import reset_context

EXAMPLE_NETLIST = """\
GTP_LUT6 u1 ( .I0(a), .I1(b), .I2(c), .Z(x) );
GTP_LUT6 u2 ( .I0(c), .I1(d), .Z(y) );
GTP_LUT6 u3 ( .I0(m), .I1(n), .I2(o), .I3(p), .I4(q), .I5(r), .Z(z) );
"""


@pytest.fixture
def caplog(caplog: pytest.LogCaptureFixture) -> Generator[pytest.LogCaptureFixture]:
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(
        caplog.handler,
        format="{message}",
        level=0,
        filter=lambda record: record["level"].no >= caplog.handler.level,
        enqueue=False,
    )
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Isolate tests from LUTPACK_* variables and the settings singleton."""
    for key in list(os.environ.keys()):
        if key.upper().startswith("LUTPACK_"):
            monkeypatch.delenv(key, raising=False)
    reset_context()
    yield
    reset_context()


@pytest.fixture
def example_netlist() -> str:
    return EXAMPLE_NETLIST


@pytest.fixture
def design_dir(tmp_path: Path) -> Path:
    """A directory holding design_1.v with the example netlist and an unrelated file."""
    designs = tmp_path / "designs"
    designs.mkdir()
    (designs / "design_1.v").write_text(EXAMPLE_NETLIST)
    (designs / "notes.txt").write_text("GTP_LUT6 u9 ( .I0(a) );\n")
    return designs
