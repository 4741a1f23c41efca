# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

import logging

import pytest

from slimfn import ir
from slimfn import ir_makers as im
from slimfn.dialect import EVM_DIALECT
from slimfn.errors import MaskLengthMismatchError, MissingTranslationError, UnsoundSplitError
from slimfn.irkit import InternalInvariantError, SourceLocation, eq_nonlocated
from slimfn.name_dispenser import NameDispenser
from slimfn.transforms.function_splitter import split_function


def typed_u256(*names):
    return [im.typed(name, "u256") for name in names]


def test_signature_is_preserved(add_function, name_dispenser):
    params = [(p.name, p.type) for p in add_function.parameters]

    split_function(add_function, {"f": [True, True]}, {}, name_dispenser, {"f": "f"})

    assert [p.type for p in add_function.parameters] == [t for _, t in params]
    assert len(add_function.parameters) == 2
    assert len(add_function.return_variables) == 1
    assert add_function.name == "f"


def test_drop_parameter(add_function, name_dispenser):
    new_function = split_function(
        add_function,
        {"f": [True, False]},
        {},
        name_dispenser,
        {"f": "f"},
        check_references=False,
    )

    assert add_function == im.fundef(
        "f",
        typed_u256("a_1", "b_2"),
        typed_u256("r_3"),
        [im.assign("r_3", im.call("f")("a_1"))],
    )
    assert new_function == im.fundef(
        "f",
        typed_u256("a"),
        typed_u256("r"),
        [im.assign("r", im.call("add")("a", "b"))],
    )


def test_unsound_split_is_rejected(add_function, name_dispenser):
    original = add_function.copy()
    used_names = set(name_dispenser.used_names)

    with pytest.raises(UnsoundSplitError, match="'b'") as exc_info:
        split_function(add_function, {"f": [True, False]}, {}, name_dispenser, {"f": "f"})

    assert exc_info.value.info == {"function_name": "f", "names": ["b"]}
    assert add_function == original
    assert name_dispenser.used_names == used_names


def test_kept_positions():
    fun = im.fundef(
        "g_1", ["a", "b", "c"], ["x", "y"], [im.assign(["x", "y"], im.call("h")("a", "c"))]
    )
    dispenser = NameDispenser.from_ast(EVM_DIALECT, fun)

    new_function = split_function(
        fun, {"g": [True, False, True]}, {"g": [True, True]}, dispenser, {"g_1": "g"}
    )

    assert new_function.name == "g"
    assert [p.name for p in new_function.parameters] == ["a", "c"]
    assert [r.name for r in new_function.return_variables] == ["x", "y"]
    assert fun.name == "g_1"
    assert [p.name for p in fun.parameters] == ["a_1", "b_2", "c_3"]
    assert fun.body == im.block(im.assign(["x_4", "y_5"], im.call("g")("a_1", "c_3")))


def test_no_mask_entry_keeps_everything(add_function, name_dispenser):
    new_function = split_function(add_function, {}, {}, name_dispenser, {"f": "f"})

    assert [p.name for p in new_function.parameters] == ["a", "b"]
    assert [r.name for r in new_function.return_variables] == ["r"]
    assert add_function.body == im.block(im.assign("r_3", im.call("f")("a_1", "b_2")))


def test_masks_are_looked_up_by_the_new_name():
    fun = im.fundef("f_1", ["a", "b"], [], [im.call("sstore")("a", 0)])
    dispenser = NameDispenser.from_ast(EVM_DIALECT, fun)

    new_function = split_function(
        fun, {"f_1": [False, False], "f": [True, False]}, {}, dispenser, {"f_1": "f"}
    )

    assert [p.name for p in new_function.parameters] == ["a"]


def test_dropped_return_variable():
    """function f_1(a) -> x, y { x := a  y := 7 }"""
    fun = im.fundef(
        "f_1", ["a"], ["x", "y"], [im.assign("x", "a"), im.assign("y", 7)]
    )
    dispenser = NameDispenser.from_ast(EVM_DIALECT, fun)

    # `y` is written by the body, the return mask alone decides what is dropped
    new_function = split_function(
        fun, {}, {"f": [True, False]}, dispenser, {"f_1": "f"}, check_references=False
    )

    assert [r.name for r in new_function.return_variables] == ["x"]
    assert [r.name for r in fun.return_variables] == ["x_2", "y_3"]
    assert fun.body == im.block(im.assign("x_2", im.call("f")("a_1")))


def test_unsound_return_split_is_rejected():
    """function f_1(a) -> x, y { x := a  y := 7 }"""
    fun = im.fundef("f_1", ["a"], ["x", "y"], [im.assign("x", "a"), im.assign("y", 7)])
    original = fun.copy()
    dispenser = NameDispenser.from_ast(EVM_DIALECT, fun)
    used_names = set(dispenser.used_names)

    with pytest.raises(UnsoundSplitError, match="'y'") as exc_info:
        split_function(fun, {}, {"f": [True, False]}, dispenser, {"f_1": "f"})

    assert exc_info.value.info["names"] == ["y"]
    assert fun == original
    assert dispenser.used_names == used_names


def test_no_return_variables_left_gives_expression_statement():
    fun = im.fundef("f_1", ["a", "b"], ["r"], [im.call("sstore")("a", "b")])
    dispenser = NameDispenser.from_ast(EVM_DIALECT, fun)

    new_function = split_function(fun, {"f": [True, True]}, {"f": [False]}, dispenser, {"f_1": "f"})

    assert new_function.return_variables == []
    assert fun.body == im.block(im.expr_stmt(im.call("f")("a_1", "b_2")))
    assert [r.name for r in fun.return_variables] == ["r_3"]


def test_function_without_parameters():
    fun = im.fundef("f_1", [], [], [im.call("stop")()])
    dispenser = NameDispenser.from_ast(EVM_DIALECT, fun)

    new_function = split_function(fun, {}, {}, dispenser, {"f_1": "f"})

    assert new_function == im.fundef("f", [], [], [im.call("stop")()])
    assert fun == im.fundef("f_1", [], [], [im.call("f")()])


def test_missing_translation(add_function, name_dispenser):
    with pytest.raises(MissingTranslationError, match="'f'"):
        split_function(add_function, {}, {}, name_dispenser, {"g": "f"})


def test_mask_length_mismatch(add_function, name_dispenser):
    original = add_function.copy()
    used_names = set(name_dispenser.used_names)

    with pytest.raises(MaskLengthMismatchError) as exc_info:
        split_function(add_function, {"f": [True]}, {}, name_dispenser, {"f": "f"})

    assert isinstance(exc_info.value, InternalInvariantError)
    assert exc_info.value.info == {"mask_length": 1, "sequence_length": 2}
    assert add_function == original
    assert name_dispenser.used_names == used_names

    with pytest.raises(MaskLengthMismatchError):
        split_function(add_function, {}, {"f": [True, False]}, name_dispenser, {"f": "f"})

    assert name_dispenser.used_names == used_names


def test_reference_check_follows_config(add_function, name_dispenser, monkeypatch):
    monkeypatch.setattr("slimfn.config.CHECK_SPLIT_REFERENCES", False)

    new_function = split_function(
        add_function, {"f": [True, False]}, {}, name_dispenser, {"f": "f"}
    )

    assert [p.name for p in new_function.parameters] == ["a"]


def test_locations():
    loc = SourceLocation(10, 1, source="input.yul", end_line=12, end_column=2)
    body_loc = SourceLocation(10, 20, source="input.yul")
    fun = im.fundef("f_1", ["a", "b"], ["r"], [im.assign("r", "a")])
    fun.location = loc
    fun.body.location = body_loc
    fun.parameters[1].location = SourceLocation(10, 16, source="input.yul")
    dispenser = NameDispenser.from_ast(EVM_DIALECT, fun)

    new_function = split_function(fun, {"f": [True, False]}, {}, dispenser, {"f_1": "f"})

    assert eq_nonlocated(new_function, im.fundef("f", ["a"], ["r"], [im.assign("r", "a")]))
    assert eq_nonlocated(
        fun, im.fundef("f_1", ["a_1", "b_2"], ["r_3"], [im.assign("r_3", im.call("f")("a_1"))])
    )
    assert new_function.location == loc
    assert new_function.body.location == body_loc
    assert fun.location == loc
    assert fun.body.location == loc
    assert fun.parameters[1].location == SourceLocation(10, 16, source="input.yul")
    for node in fun.body.walk_values():
        if isinstance(node, ir.Node):
            assert node.location == loc


def test_debug_logging(add_function, name_dispenser, caplog):
    with caplog.at_level(logging.DEBUG, logger="slimfn.transforms.function_splitter"):
        split_function(add_function, {}, {}, name_dispenser, {"f": "f"})

    assert "Split 'f' out of 'f'" in caplog.text
