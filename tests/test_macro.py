from __future__ import annotations

import allure
import pytest

from sac_bridge.errors import InvalidArgumentError
from sac_bridge.macro import build_macro, command_lines, write_macro

pytestmark = [
    allure.epic("SAC Runs"),
    allure.feature("Macro Rendering"),
]


def test_filter_round_trip_macro_matches_sac_layout() -> None:
    text = build_macro(["bp bu co 0.05 0.2 n 2 p 2"], ["s0001"], want_output=True)

    assert text == "r s0001\nbp bu co 0.05 0.2 n 2 p 2\nw s0001\nsc touch sac_complete\nquit\n"


def test_macro_without_inputs_has_no_read_or_write_directive() -> None:
    text = build_macro("funcgen seismogram")

    assert text == "funcgen seismogram\nsc touch sac_complete\nquit\n"


def test_macro_lists_slots_in_index_order_on_read_and_write() -> None:
    slots = ["s0001", "s0002", "s0003"]

    text = build_macro(("rmean", "taper"), slots, want_output=True)

    assert text.splitlines() == [
        "r s0001 s0002 s0003",
        "rmean",
        "taper",
        "w s0001 s0002 s0003",
        "sc touch sac_complete",
        "quit",
    ]


def test_macro_reads_inputs_without_write_when_output_not_requested() -> None:
    text = build_macro("bg sgf; p1", ["s0001"])

    assert text.splitlines() == ["r s0001", "bg sgf; p1", "sc touch sac_complete", "quit"]


def test_commands_pass_through_verbatim() -> None:
    odd = "  ch kstnm 'A B'  ;  lh  "

    assert build_macro(odd).splitlines()[0] == odd


def test_empty_command_sequence_contributes_no_lines() -> None:
    assert build_macro([], ["s0001"]) == "r s0001\nsc touch sac_complete\nquit\n"


def test_custom_sentinel_name() -> None:
    assert build_macro("lh", sentinel_name="done").endswith("sc touch done\nquit\n")


@pytest.mark.parametrize("payload", [None, 42, {"cmd": "lh"}, b"lh", ["lh", 3]])
def test_command_lines_rejects_unsupported_shapes(payload: object) -> None:
    with pytest.raises(InvalidArgumentError, match="bad format for command"):
        command_lines(payload)


def test_output_without_slots_is_invalid() -> None:
    with pytest.raises(InvalidArgumentError, match="no input series"):
        build_macro("lh", [], want_output=True)


def test_write_macro_writes_text(tmp_path) -> None:
    path = write_macro(tmp_path / "run-macro", "quit\n")

    assert path.read_text("utf-8") == "quit\n"
