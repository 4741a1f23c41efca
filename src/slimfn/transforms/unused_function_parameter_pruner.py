# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import logging
from typing import List, Optional

import toolz

from slimfn import ir
from slimfn.dialect import Dialect
from slimfn.name_dispenser import NameDispenser
from slimfn.transforms.function_splitter import UsageMasks, split_function
from slimfn.transforms.name_displacer import NameDisplacer
from slimfn.transforms.split_heuristic import was_pruned


LOGGER = logging.getLogger(__name__)


def _has_unused_slots(
    name: str, used_parameters: UsageMasks, used_return_variables: UsageMasks
) -> bool:
    return not all(used_parameters.get(name, ())) or not all(used_return_variables.get(name, ()))


def prune_unused_function_parameters(
    program: ir.Block,
    used_parameters: UsageMasks,
    used_return_variables: UsageMasks,
    *,
    dialect: Dialect,
    name_dispenser: Optional[NameDispenser] = None,
) -> ir.Block:
    """
    Split every top-level function with unused parameters or return variables.

    The masks are keyed by the function names in ``program`` and a `False`
    marks an unused slot. Functions without any unused slot and functions
    which only forward to a user defined function (see
    :func:`slimfn.transforms.split_heuristic.was_pruned`) are left untouched.

    For each remaining function ``f``:

    1. ``f`` and all its call sites are renamed to a fresh name, say ``f_1``,
    2. a new function ``f`` with the reduced signature takes over the body,
    3. ``f_1`` becomes a wrapper calling ``f`` and is followed by it in the program.

    A single application is performed, iterating to a fixpoint is up to the caller.
    """
    if name_dispenser is None:
        name_dispenser = NameDispenser.from_ast(dialect, program)

    names_to_free: List[str] = list(
        toolz.unique(
            str(stmt.name)
            for stmt in program.statements
            if isinstance(stmt, ir.FunctionDefinition)
            and _has_unused_slots(stmt.name, used_parameters, used_return_variables)
            and not was_pruned(stmt.body, dialect.is_builtin)
        )
    )
    if not names_to_free:
        return program

    LOGGER.info("Splitting functions with unused parameters: %s", ", ".join(names_to_free))

    displaced, translations = NameDisplacer.apply(program, names_to_free, name_dispenser)
    assert isinstance(displaced, ir.Block)
    inverse_translations = {new: old for old, new in translations.items()}

    statements: List[ir.Stmt] = []
    for stmt in displaced.statements:
        statements.append(stmt)
        if isinstance(stmt, ir.FunctionDefinition) and stmt.name in inverse_translations:
            statements.append(
                split_function(
                    stmt,
                    used_parameters,
                    used_return_variables,
                    name_dispenser,
                    inverse_translations,
                )
            )

    return ir.Block(statements=statements, location=displaced.location)
