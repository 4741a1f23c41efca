# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

import pytest

from slimfn import ir
from slimfn import ir_makers as im
from slimfn.dialect import EVM_DIALECT
from slimfn.transforms.split_heuristic import was_pruned, was_pruned_function


is_builtin = EVM_DIALECT.is_builtin


def test_empty_body():
    assert was_pruned(im.block(), is_builtin)


@pytest.mark.parametrize(
    "stmt",
    [
        im.assign("x", im.call("f")("a", "b")),
        im.assign(["x", "y"], im.call("g")()),
        im.expr_stmt(im.call("f")("a", "b")),
    ],
)
def test_forwarding_to_user_function(stmt):
    assert was_pruned(im.block(stmt), is_builtin)


@pytest.mark.parametrize(
    "stmt",
    [
        im.assign("x", im.call("add")("a", "b")),
        im.expr_stmt(im.call("sstore")("a", "b")),
    ],
)
def test_forwarding_to_builtin(stmt):
    assert not was_pruned(im.block(stmt), is_builtin)


@pytest.mark.parametrize(
    "stmt",
    [
        im.assign("x", 5),
        im.assign("x", "y"),
        im.let("x", im.call("f")("a")),
        im.if_("c", im.call("f")()),
        im.block(im.call("f")()),
        ir.Leave(),
    ],
)
def test_other_single_statements(stmt):
    assert not was_pruned(im.block(stmt), is_builtin)


def test_multiple_statements():
    body = im.block(im.call("f")("a"), im.call("f")("b"))
    assert not was_pruned(body, is_builtin)

    body = im.block(im.assign("x", im.call("f")("a")), im.assign("y", im.call("g")("b")))
    assert not was_pruned(body, is_builtin)


def test_oracle_decides_builtins():
    body = im.block(im.assign("x", im.call("add")("a", "b")))

    assert was_pruned(body, lambda name: False)
    assert not was_pruned(body, lambda name: name == "add")


def test_was_pruned_function(add_function):
    assert not was_pruned_function(add_function, is_builtin)
    assert was_pruned_function(im.fundef("g", ["a"]), is_builtin)
