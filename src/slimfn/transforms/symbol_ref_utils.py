# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

import dataclasses
from collections import Counter
from typing import Iterable, List, Optional, Sequence, Union

from slimfn import ir, irkit


@dataclasses.dataclass
class CountIdentifierRefs(irkit.NodeVisitor):
    ref_counts: Counter[str] = dataclasses.field(default_factory=Counter)

    @classmethod
    def apply(
        cls,
        node: Union[ir.Node, Sequence[ir.Node]],
        names: Optional[Iterable[str]] = None,
    ) -> Counter[str]:
        """
        Count references to variables in the scope of ``node``.

        Assignment targets count as references, callee names and declarations
        do not. Nested function definitions open a new scope and are skipped,
        except when ``node`` itself is a function definition.

        Examples:
            >>> from slimfn import ir_makers as im
            >>> body = im.block(im.assign("r", im.call("add")("a", im.call("mul")("a", "b"))))
            >>> CountIdentifierRefs.apply(body)
            Counter({'a': 2, 'r': 1, 'b': 1})

            If only some names are of interest the search can be restricted:

            >>> CountIdentifierRefs.apply(body, names=["b", "c"])
            Counter({'b': 1})
        """
        obj = cls()
        if isinstance(node, ir.FunctionDefinition):
            obj.generic_visit(node)
        else:
            obj.visit(node)

        if names is not None:
            names = set(names)
            return Counter({k: v for k, v in obj.ref_counts.items() if k in names})
        return obj.ref_counts

    def visit_Identifier(self, node: ir.Identifier) -> None:
        self.ref_counts[str(node.name)] += 1

    def visit_FunctionCall(self, node: ir.FunctionCall) -> None:
        self.visit(node.arguments)

    def visit_FunctionDefinition(self, node: ir.FunctionDefinition) -> None:
        pass


def collect_identifier_refs(
    node: Union[ir.Node, Sequence[ir.Node]], names: Optional[Iterable[str]] = None
) -> List[str]:
    return [name for name, count in CountIdentifierRefs.apply(node, names).items() if count > 0]
