"""Tests for LUT instance extraction."""

import pytest

from lutpack.netlist.extractor import extract_instances, is_input_port, is_lut_cell


@pytest.mark.parametrize(
    ("cell", "expected"),
    [
        ("GTP_LUT6", True),
        ("GTP_LUT4", True),
        ("GTP_LUT12", True),
        ("GTP_LUT6CARRY", False),
        ("GTP_LUTX", False),
        ("GTP_LUT", False),
        ("GTP_LUT6D", False),
        ("XGTP_LUT6", False),
        ("GTP_DFF", False),
    ],
)
def test_is_lut_cell(cell: str, expected: bool) -> None:
    assert is_lut_cell(cell) is expected


def test_is_lut_cell_custom_prefix() -> None:
    assert is_lut_cell("LUT4", prefix="LUT", excluded=())
    assert not is_lut_cell("LUT4", prefix="LUT", excluded=("LUT4",))


@pytest.mark.parametrize(
    ("port", "expected"),
    [
        ("I0", True),
        ("I15", True),
        ("I", False),
        ("Z", False),
        ("ISO3", False),
        ("i0", False),
        ("ID", False),
    ],
)
def test_is_input_port(port: str, expected: bool) -> None:
    assert is_input_port(port) is expected


def test_example_netlist(example_netlist: str) -> None:
    luts = extract_instances(example_netlist)
    assert [(lut.name, lut.inputs) for lut in luts] == [
        ("u1", ["a", "b", "c"]),
        ("u2", ["c", "d"]),
        ("u3", ["m", "n", "o", "p", "q", "r"]),
    ]
    assert not any(lut.consumed for lut in luts)


def test_commented_instance_ignored() -> None:
    text = "// GTP_LUT6 fake ( .I0(z) );\n/* GTP_LUT6 fake2 ( .I0(z) ); */\nGTP_LUT6 u1 ( .I0(a) );\n"
    luts = extract_instances(text)
    assert [lut.name for lut in luts] == ["u1"]
    assert luts[0].inputs == ["a"]


def test_escaped_instance_name() -> None:
    luts = extract_instances("GTP_LUT6 \\my.inst ( .I0(n1), .Z(z) );")
    assert len(luts) == 1
    assert luts[0].name == "\\my.inst"
    assert luts[0].inputs == ["n1"]


def test_nets_trimmed_and_deduplicated() -> None:
    luts = extract_instances("GTP_LUT4 u1 ( .I0( a ), .I1(a), .I2(b\n), .I3(a) );")
    assert luts[0].inputs == ["a", "b"]


def test_bit_selects_compared_as_text() -> None:
    luts = extract_instances("GTP_LUT4 u1 ( .I0(bus[3]), .I1(bus[ 3]), .I2(bus[3]) );")
    assert luts[0].inputs == ["bus[3]", "bus[ 3]"]


def test_only_input_ports_recorded() -> None:
    text = "GTP_LUT6 u1 ( .Z(x), .I(n0), .ISO3(n1), .I0(a) );\nGTP_LUT6 u2 ( .I0(b) );"
    luts = extract_instances(text)
    assert [(lut.name, lut.inputs) for lut in luts] == [("u1", ["a"]), ("u2", ["b"])]


def test_empty_connection_not_recorded() -> None:
    luts = extract_instances("GTP_LUT6 u1 ( .I0(), .I1(  ), .I2(a) );")
    assert luts[0].inputs == ["a"]


def test_multiline_instantiation() -> None:
    text = """
    GTP_LUT6 u1 (
        . I0 ( a ),
        .I1(\\b[0] ),
        .Z(x)
    );
    """
    luts = extract_instances(text)
    assert luts[0].name == "u1"
    assert luts[0].inputs == ["a", "\\b[0]"]


def test_other_cells_ignored() -> None:
    text = """
    GTP_DFF r1 ( .D(a), .Q(b) );
    GTP_LUT6CARRY c1 ( .I0(a), .I1(b) );
    GTP_LUT5 u1 ( .I0(a), .I1(b) );
    """
    luts = extract_instances(text)
    assert [lut.name for lut in luts] == ["u1"]


def test_excluded_cells_configurable() -> None:
    text = "GTP_LUT5 u1 ( .I0(a) );\nGTP_LUT6 u2 ( .I0(b) );"
    luts = extract_instances(text, excluded_cells=("GTP_LUT5",))
    assert [lut.name for lut in luts] == ["u2"]


def test_nested_parentheses_tracked() -> None:
    luts = extract_instances("GTP_LUT6 u1 ( (.I0(a)) , .I1(b) ); GTP_LUT6 u2 ( .I0(c) );")
    assert [(lut.name, lut.inputs) for lut in luts] == [("u1", ["a", "b"]), ("u2", ["c"])]


@pytest.mark.parametrize(
    "text",
    [
        "GTP_LUT6 ( .I0(a) );",
        "GTP_LUT6 u1 ;",
        "GTP_LUT6 u1 .I0(a);",
        "GTP_LUT6 u1 ( .I0(a), .I1(b)",
        "GTP_LUT6",
    ],
    ids=["missing_name", "missing_port_list", "missing_paren", "truncated_port_list", "cell_only"],
)
def test_malformed_instantiation_dropped(text: str) -> None:
    assert extract_instances(text) == []


def test_scanning_recovers_after_malformed_instance() -> None:
    text = "GTP_LUT6 u0 ;\nassign x = y & z;\nGTP_LUT6 u1 ( .I0(a) );"
    luts = extract_instances(text)
    assert [lut.name for lut in luts] == ["u1"]


def test_statement_resync_on_same_line() -> None:
    text = "GTP_LUT6 u1 ( .I0(a) ) junk GTP_LUT6 u9 ( .I0(q) ); GTP_LUT6 u2 ( .I0(b) );"
    luts = extract_instances(text)
    assert [lut.name for lut in luts] == ["u1", "u2"]


def test_inputs_never_contain_duplicates() -> None:
    text = "\n".join(f"GTP_LUT6 u{i} ( .I0(n{i % 3}), .I1(n{i % 2}), .I2(n{i % 3}) );" for i in range(20))
    for lut in extract_instances(text):
        assert len(lut.inputs) == len(set(lut.inputs))
