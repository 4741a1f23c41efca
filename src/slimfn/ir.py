# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

"""Node classes of the Yul-like intermediate representation.

A whole program is a top-level :class:`Block`. Expressions and statements are
closed sets of node classes: passes match on them structurally and every
statement kind not handled by a pass is carried over unchanged.
"""

from __future__ import annotations

from typing import List, Optional

from slimfn import irkit
from slimfn.irkit import SourceLocation, SymbolName


class Node(irkit.Node):
    location: Optional[SourceLocation] = irkit.field(default=None, eq=False, repr=False)


class TypedName(Node):
    name: SymbolName = irkit.field(converter=SymbolName)
    type: str = ""  # noqa: A003  # empty for the dialect default type


class Expr(Node): ...


class Identifier(Expr):
    name: SymbolName = irkit.field(converter=SymbolName)


class LiteralKind(irkit.StrEnum):
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "bool"


class Literal(Expr):
    value: str
    kind: LiteralKind = LiteralKind.NUMBER
    type: str = ""  # noqa: A003


class FunctionCall(Expr):
    function_name: Identifier
    arguments: List[Expr] = irkit.field(factory=list)


class Stmt(Node): ...


class ExpressionStatement(Stmt):
    expression: Expr


class Assignment(Stmt):
    variable_names: List[Identifier]
    value: Expr


class VariableDeclaration(Stmt):
    variables: List[TypedName]
    value: Optional[Expr] = None


class Block(Stmt):
    statements: List[Stmt] = irkit.field(factory=list)


class If(Stmt):
    condition: Expr
    body: Block


class Case(Node):
    value: Optional[Literal]  # `None` for the default case
    body: Block


class Switch(Stmt):
    expression: Expr
    cases: List[Case]


class ForLoop(Stmt):
    pre: Block
    condition: Expr
    post: Block
    body: Block


class Break(Stmt): ...


class Continue(Stmt): ...


class Leave(Stmt): ...


class FunctionDefinition(Stmt):
    name: SymbolName = irkit.field(converter=SymbolName)
    parameters: List[TypedName] = irkit.field(factory=list)
    return_variables: List[TypedName] = irkit.field(factory=list)
    body: Block = irkit.field(factory=Block)

    def __attrs_post_init__(self) -> None:
        names = [v.name for v in self.parameters + self.return_variables]
        if len(set(names)) != len(names):
            duplicated = sorted({name for name in names if names.count(name) > 1})
            raise irkit.IRKitValueError(
                f"Function '{self.name}' declares the names {duplicated} more than once."
            )
