# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

import pytest

from slimfn import ir_makers as im
from slimfn.dialect import EVM_DIALECT
from slimfn.name_dispenser import NameDispenser


@pytest.fixture
def add_function():
    """`function f(a, b) -> r { r := add(a, b) }`"""
    return im.fundef(
        "f",
        [im.typed("a", "u256"), im.typed("b", "u256")],
        [im.typed("r", "u256")],
        [im.assign("r", im.call("add")("a", "b"))],
    )


@pytest.fixture
def name_dispenser(add_function):
    return NameDispenser.from_ast(EVM_DIALECT, add_function)
