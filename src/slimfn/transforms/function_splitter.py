# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence

from slimfn import config, ir
from slimfn.errors import MissingTranslationError, UnsoundSplitError
from slimfn.name_dispenser import NameDispenser
from slimfn.transforms.symbol_ref_utils import collect_identifier_refs
from slimfn.utils import apply_boolean_mask


LOGGER = logging.getLogger(__name__)

UsageMasks = Mapping[str, Sequence[bool]]


def _renamed(typed_name: ir.TypedName, name_dispenser: NameDispenser) -> ir.TypedName:
    return ir.TypedName(
        name=name_dispenser.new_name(typed_name.name),
        type=typed_name.type,
        location=typed_name.location,
    )


def _reduce(items: List[ir.TypedName], mask: Optional[Sequence[bool]]) -> List[ir.TypedName]:
    return list(items) if mask is None else apply_boolean_mask(items, mask)


def _check_no_dropped_refs(
    function_name: str, body: ir.Block, dropped: List[ir.TypedName]
) -> None:
    dangling = collect_identifier_refs(body, names=[v.name for v in dropped])
    if dangling:
        raise UnsoundSplitError(function_name=function_name, names=sorted(dangling))


def split_function(
    original: ir.FunctionDefinition,
    used_parameters: UsageMasks,
    used_return_variables: UsageMasks,
    name_dispenser: NameDispenser,
    inverse_translations: Mapping[str, str],
    *,
    check_references: Optional[bool] = None,
) -> ir.FunctionDefinition:
    """
    Split ``original`` into a wrapper with the same signature and a new reduced function.

    The name of the new function is the name ``original`` had before it was
    displaced, i.e. ``inverse_translations[original.name]``, which is also the
    key of both usage masks. A mask value `False` drops the parameter (or
    return variable) at that position from the new function. Functions
    without a mask entry keep all of their parameters (or return variables).

    The whole body of ``original`` moves into the new function. ``original``
    is modified in place: its parameters and return variables get fresh names
    and its body becomes a single forwarding call, for example::

        function f_1(a, b) -> r { r := add(a, 1) }

    with ``inverse_translations = {"f_1": "f"}`` and ``used_parameters = {"f": [True, False]}``
    becomes::

        function f_1(a_2, b_3) -> r_4 { r_4 := f(a_2) }

    and the returned new function is::

        function f(a) -> r { r := add(a, 1) }

    Inserting the returned function into the program is up to the caller.

    If ``check_references`` is true (default: ``config.CHECK_SPLIT_REFERENCES``),
    an :class:`UnsoundSplitError` is raised when the body references a
    parameter or return variable dropped by the masks. This and a mask length
    mismatch are detected before anything is modified, the name dispenser
    included.
    """
    if original.name not in inverse_translations:
        raise MissingTranslationError(function_name=original.name)
    if check_references is None:
        check_references = config.CHECK_SPLIT_REFERENCES

    new_name = inverse_translations[original.name]
    loc = original.location
    parameter_mask = used_parameters.get(new_name)
    return_mask = used_return_variables.get(new_name)

    # masks and references are validated before any fresh name is taken
    parameters = _reduce(original.parameters, parameter_mask)
    return_variables = _reduce(original.return_variables, return_mask)

    if check_references:
        dropped = [
            v
            for v in original.parameters + original.return_variables
            if v not in parameters and v not in return_variables
        ]
        _check_no_dropped_refs(new_name, original.body, dropped)

    renamed_parameters = [_renamed(p, name_dispenser) for p in original.parameters]
    renamed_return_variables = [_renamed(r, name_dispenser) for r in original.return_variables]
    reduced_renamed_parameters = _reduce(renamed_parameters, parameter_mask)
    reduced_renamed_return_variables = _reduce(renamed_return_variables, return_mask)

    new_function = ir.FunctionDefinition(
        name=new_name,
        parameters=parameters,
        return_variables=return_variables,
        body=ir.Block(location=loc),
        location=loc,
    )

    new_function.body, original.body = original.body, new_function.body
    original.parameters = renamed_parameters
    original.return_variables = renamed_return_variables

    call = ir.FunctionCall(
        function_name=ir.Identifier(name=new_function.name, location=loc),
        arguments=[ir.Identifier(name=p.name, location=loc) for p in reduced_renamed_parameters],
        location=loc,
    )

    # `reduced_return_variables := f(reduced_parameters)`
    if new_function.return_variables:
        original.body.statements.append(
            ir.Assignment(
                variable_names=[
                    ir.Identifier(name=r.name, location=loc) for r in reduced_renamed_return_variables
                ],
                value=call,
                location=loc,
            )
        )
    else:
        original.body.statements.append(ir.ExpressionStatement(expression=call, location=loc))

    LOGGER.debug(
        "Split '%s' out of '%s' keeping %d/%d parameters and %d/%d return variables.",
        new_function.name,
        original.name,
        len(new_function.parameters),
        len(original.parameters),
        len(new_function.return_variables),
        len(original.return_variables),
    )

    return new_function
