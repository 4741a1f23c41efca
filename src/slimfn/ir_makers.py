# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

from typing import Iterable, Optional, TypeAlias, Union

from slimfn import ir


ExprLike: TypeAlias = Union[str, bool, int, ir.Expr]
StmtLike: TypeAlias = Union[ir.Stmt, ir.Expr]


def ident(ident_or_name: Union[str, ir.Identifier]) -> ir.Identifier:
    """
    Convert to Identifier if necessary.

    Examples
    --------
    >>> ident("a")
    Identifier(name=SymbolName('a'))

    >>> ident(ir.Identifier(name="b"))
    Identifier(name=SymbolName('b'))
    """
    if isinstance(ident_or_name, ir.Identifier):
        return ident_or_name
    return ir.Identifier(name=ident_or_name)


def typed(typed_or_name: Union[str, ir.TypedName], type_: str = "") -> ir.TypedName:
    """
    Convert to TypedName if necessary.

    Examples
    --------
    >>> typed("a", "u256")
    TypedName(name=SymbolName('a'), type='u256')
    """
    if isinstance(typed_or_name, ir.TypedName):
        assert not type_
        return typed_or_name
    return ir.TypedName(name=typed_or_name, type=type_)


def literal(value: Union[str, int, bool], type_: str = "") -> ir.Literal:
    """
    Create a Literal node from a Python value.

    Examples
    --------
    >>> literal(5).value
    '5'

    >>> literal(True).kind
    <LiteralKind.BOOLEAN: 'bool'>
    """
    if isinstance(value, bool):
        return ir.Literal(value=str(value).lower(), kind=ir.LiteralKind.BOOLEAN, type=type_)
    if isinstance(value, int):
        return ir.Literal(value=str(value), kind=ir.LiteralKind.NUMBER, type=type_)
    return ir.Literal(value=value, kind=ir.LiteralKind.STRING, type=type_)


def ensure_expr(expr_like: ExprLike) -> ir.Expr:
    """
    Convert names into Identifiers and Python values into Literals, let expressions pass unchanged.

    Examples
    --------
    >>> ensure_expr("a")
    Identifier(name=SymbolName('a'))

    >>> ensure_expr(3).value
    '3'
    """
    if isinstance(expr_like, str):
        return ident(expr_like)
    elif isinstance(expr_like, (bool, int)):
        return literal(expr_like)
    assert isinstance(expr_like, ir.Expr), expr_like
    return expr_like


def ensure_stmt(stmt_like: StmtLike) -> ir.Stmt:
    """Wrap bare expressions into an ExpressionStatement, let statements pass unchanged."""
    if isinstance(stmt_like, ir.Expr):
        return ir.ExpressionStatement(expression=stmt_like)
    assert isinstance(stmt_like, ir.Stmt), stmt_like
    return stmt_like


class call:
    """
    Create a FunctionCall from a callee name and arguments.

    Examples
    --------
    >>> call("add")("a", "b")
    FunctionCall(function_name=Identifier(name=SymbolName('add')), arguments=[Identifier(name=SymbolName('a')), Identifier(name=SymbolName('b'))])
    """

    def __init__(self, name: Union[str, ir.Identifier]):
        self.function_name = ident(name)

    def __call__(self, *exprs: ExprLike) -> ir.FunctionCall:
        return ir.FunctionCall(
            function_name=self.function_name, arguments=[ensure_expr(expr) for expr in exprs]
        )


def expr_stmt(expr: ExprLike) -> ir.ExpressionStatement:
    return ir.ExpressionStatement(expression=ensure_expr(expr))


def assign(targets: Union[str, Iterable[str]], value: ExprLike) -> ir.Assignment:
    """
    Create an Assignment of ``value`` to one or more variables.

    Examples
    --------
    >>> assign(["x", "y"], call("f")()).variable_names
    [Identifier(name=SymbolName('x')), Identifier(name=SymbolName('y'))]
    """
    if isinstance(targets, str):
        targets = [targets]
    return ir.Assignment(variable_names=[ident(t) for t in targets], value=ensure_expr(value))


def let(
    names: Union[str, ir.TypedName, Iterable[Union[str, ir.TypedName]]],
    value: Optional[ExprLike] = None,
) -> ir.VariableDeclaration:
    if isinstance(names, (str, ir.TypedName)):
        names = [names]
    return ir.VariableDeclaration(
        variables=[typed(n) for n in names],
        value=ensure_expr(value) if value is not None else None,
    )


def block(*stmts: StmtLike) -> ir.Block:
    return ir.Block(statements=[ensure_stmt(stmt) for stmt in stmts])


def if_(condition: ExprLike, *stmts: StmtLike) -> ir.If:
    return ir.If(condition=ensure_expr(condition), body=block(*stmts))


def fundef(
    name: str,
    params: Iterable[Union[str, ir.TypedName]] = (),
    returns: Iterable[Union[str, ir.TypedName]] = (),
    body: Union[ir.Block, Iterable[StmtLike]] = (),
) -> ir.FunctionDefinition:
    """
    Create a FunctionDefinition.

    Examples
    --------
    >>> f = fundef("f", ["a", "b"], ["r"], [assign("r", call("add")("a", "b"))])
    >>> [p.name for p in f.parameters], [r.name for r in f.return_variables]
    ([SymbolName('a'), SymbolName('b')], [SymbolName('r')])
    """
    return ir.FunctionDefinition(
        name=name,
        parameters=[typed(p) for p in params],
        return_variables=[typed(r) for r in returns],
        body=body if isinstance(body, ir.Block) else block(*body),
    )
