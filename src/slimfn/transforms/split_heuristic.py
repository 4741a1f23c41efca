# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

from slimfn import ir
from slimfn.dialect import BuiltinOracle


def was_pruned(body: ir.Block, is_builtin: BuiltinOracle) -> bool:
    """
    Predicate telling whether splitting a function with the given body is not worth it.

    Follows the simple rules, a body is skipped if it is:
    - empty, or
    - a single assignment whose value is a call to a non-builtin function, or
    - a single expression statement which is a call to a non-builtin function.

    Such functions only forward to a user defined function, so inlining them
    already removes the unused arguments at the call sites without the need
    of a signature preserving wrapper.
    """
    match body.statements:
        case []:
            return True
        case [ir.Assignment(value=ir.FunctionCall(function_name=callee))] | [
            ir.ExpressionStatement(expression=ir.FunctionCall(function_name=callee))
        ]:
            return not is_builtin(callee.name)
    return False


def was_pruned_function(function: ir.FunctionDefinition, is_builtin: BuiltinOracle) -> bool:
    return was_pruned(function.body, is_builtin)
