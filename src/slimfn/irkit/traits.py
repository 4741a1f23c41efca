# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

"""Definitions of visitor trait classes."""

from __future__ import annotations

from typing import Any

from . import concepts, visitors


class PreserveLocationVisitor(visitors.NodeVisitor):
    """Visitor trait copying the source location of visited nodes into their results."""

    def visit(self, node: concepts.RootNode, **kwargs: Any) -> Any:
        result = super().visit(node, **kwargs)
        if hasattr(node, "location") and hasattr(result, "location"):
            result.location = node.location
        return result
