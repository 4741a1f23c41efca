# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

"""Definitions of basic IR toolkit concepts."""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, List, Optional, Tuple, TypeVar, Union

import attrs
import deepdiff
from typing_extensions import Self

from . import trees
from .type_definitions import IDENTIFIER_RE, ConstrainedStr


class SymbolName(ConstrainedStr, regex=IDENTIFIER_RE):
    """String value containing a valid identifier of the IR."""

    __slots__ = ()


#: Re-export of :func:`attrs.field` to declare node fields with extra options.
field = attrs.field


@attrs.frozen(slots=True)
class SourceLocation:
    """Source code location (line, column, source)."""

    line: int = attrs.field(validator=attrs.validators.ge(1))
    column: int = attrs.field(validator=attrs.validators.ge(1))
    source: str = attrs.field(default="", kw_only=True)
    end_line: Optional[int] = attrs.field(
        default=None, kw_only=True, validator=attrs.validators.optional(attrs.validators.ge(1))
    )
    end_column: Optional[int] = attrs.field(
        default=None, kw_only=True, validator=attrs.validators.optional(attrs.validators.ge(1))
    )

    def __attrs_post_init__(self) -> None:
        assert self.end_column is None or self.end_line is not None

    def __str__(self) -> str:
        src = self.source or ""

        end_part = ""
        if self.end_line is not None:
            end_part += f" to {self.end_line}"
        if self.end_column is not None:
            end_part += f":{self.end_column}"

        return f"<{src}:{self.line}:{self.column}{end_part}>"


class Node(trees.Tree):
    """Base class representing a node in a syntax tree.

    Every subclass is automatically turned into an ``attrs`` class with
    keyword-only, mutable fields declared through annotations.

    Field values should be either:

        * builtin types: `bool`, `bytes`, `int`, `float`, `str`
        * enum.Enum types
        * other :class:`Node` subclasses
        * supported collections (:class:`List`, :class:`Dict`) of any of the
          previous items

    Fields declared with ``eq=False`` (like source locations) do not take part
    in equality comparisons. Nodes are mutable and thus not hashable.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        attrs.define(cls, kw_only=True, slots=False, eq=True)

    def iter_children_values(self) -> Iterable:
        for attribute in attrs.fields(type(self)):
            yield getattr(self, attribute.name)

    def iter_children_items(self) -> Iterable[Tuple[trees.TreeKey, Any]]:
        for attribute in attrs.fields(type(self)):
            yield attribute.name, getattr(self, attribute.name)

    pre_walk_items = trees.pre_walk_items
    pre_walk_values = trees.pre_walk_values

    walk_items = trees.walk_items
    walk_values = trees.walk_values

    def copy(self, update: Optional[Dict[str, Any]] = None) -> Self:
        new_node = copy.deepcopy(self)
        for k, v in (update or {}).items():
            setattr(new_node, k, v)
        return new_node


NodeT = TypeVar("NodeT", bound=Node)
ValueNode = Union[bool, bytes, int, float, str]
LeafNode = Union[NodeT, ValueNode]
CollectionNode = Union[List[LeafNode], Dict[Any, LeafNode]]
RootNode = Union[NodeT, CollectionNode]


def eq_nonlocated(a: Any, b: Any) -> bool:
    """Compare two nodes (or collections of nodes), ignoring their `SourceLocation`."""
    return len(deepdiff.DeepDiff(a, b, exclude_types=[SourceLocation])) == 0
