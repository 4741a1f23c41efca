# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

"""Small toolkit with the node, tree and visitor utilities used by the IR passes.

The internal dependencies between modules are the following (each module depends
on some of the previous ones):

  0. exceptions, type_definitions
  1. trees
  2. concepts
  3. visitors
  4. traits

"""

from __future__ import annotations

from .concepts import Node, RootNode, SourceLocation, SymbolName, eq_nonlocated, field
from .exceptions import (
    InternalInvariantError,
    IRKitError,
    IRKitValueError,
)
from .traits import PreserveLocationVisitor
from .trees import pre_walk_items, pre_walk_values, walk_instances, walk_items, walk_values
from .type_definitions import NOTHING, ConstrainedStr, StrEnum
from .visitors import NodeTranslator, NodeVisitor


__all__ = [  # noqa: RUF022 `__all__` is not sorted
    # concepts
    "Node",
    "RootNode",
    "SourceLocation",
    "SymbolName",
    "eq_nonlocated",
    "field",
    # exceptions
    "IRKitError",
    "IRKitValueError",
    "InternalInvariantError",
    # traits
    "PreserveLocationVisitor",
    # trees
    "pre_walk_items",
    "pre_walk_values",
    "walk_instances",
    "walk_items",
    "walk_values",
    # type_definitions
    "NOTHING",
    "ConstrainedStr",
    "StrEnum",
    # visitors
    "NodeTranslator",
    "NodeVisitor",
]
