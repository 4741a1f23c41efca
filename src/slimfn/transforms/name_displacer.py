# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import dataclasses
from typing import Dict, Iterable, Set, Tuple

from slimfn import ir, irkit
from slimfn.name_dispenser import NameDispenser


@dataclasses.dataclass
class NameDisplacer(irkit.PreserveLocationVisitor, irkit.NodeTranslator):
    """
    Give fresh names to the declarations of the names to free and update all their references.

    The names to free are marked as used in the dispenser, so they never come
    back as fresh names and can be taken by new declarations afterwards.

    >>> from slimfn import ir_makers as im
    >>> from slimfn.dialect import EVM_DIALECT
    >>> program = im.block(
    ...     im.fundef("f", ["a"], ["r"], [im.assign("r", "a")]),
    ...     im.let("x", im.call("f")(1)),
    ... )
    >>> dispenser = NameDispenser.from_ast(EVM_DIALECT, program)
    >>> new_program, translations = NameDisplacer.apply(program, ["f"], dispenser)
    >>> translations
    {'f': SymbolName('f_1')}
    >>> new_program.statements[1].value.function_name.name
    SymbolName('f_1')
    """

    name_dispenser: NameDispenser
    names_to_free: Set[str]
    translations: Dict[str, irkit.SymbolName] = dataclasses.field(default_factory=dict)

    @classmethod
    def apply(
        cls, node: ir.Node, names_to_free: Iterable[str], name_dispenser: NameDispenser
    ) -> Tuple[ir.Node, Dict[str, irkit.SymbolName]]:
        names_to_free = {str(name) for name in names_to_free}
        name_dispenser.mark_used(names_to_free)
        displacer = cls(name_dispenser, names_to_free)
        return displacer.visit(node), displacer.translations

    def _replace_declared(self, name: str) -> irkit.SymbolName:
        name = str(name)
        assert name not in self.translations, f"Name '{name}' is declared more than once."
        if name in self.names_to_free:
            self.translations[name] = self.name_dispenser.new_name(name)
            return self.translations[name]
        return irkit.SymbolName(name)

    def _replace_referenced(self, name: str) -> irkit.SymbolName:
        return self.translations.get(name, irkit.SymbolName(name))

    def visit_Block(self, node: ir.Block) -> ir.Block:
        # functions are visible in the whole block, so they are renamed before any use
        for stmt in node.statements:
            if isinstance(stmt, ir.FunctionDefinition):
                self._replace_declared(stmt.name)
        return self.generic_visit(node)

    def visit_FunctionDefinition(self, node: ir.FunctionDefinition) -> ir.FunctionDefinition:
        new_node = self.generic_visit(node)
        new_node.name = self._replace_referenced(node.name)
        return new_node

    def visit_TypedName(self, node: ir.TypedName) -> ir.TypedName:
        return ir.TypedName(name=self._replace_declared(node.name), type=node.type)

    def visit_Identifier(self, node: ir.Identifier) -> ir.Identifier:
        return ir.Identifier(name=self._replace_referenced(node.name))
