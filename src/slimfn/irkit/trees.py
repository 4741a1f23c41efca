# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

"""Iterator utils."""

from __future__ import annotations

import abc
import collections.abc
import functools
from typing import Any, Iterable, Iterator, Optional, Protocol, Tuple, Type, TypeVar, Union

import toolz


TreeKey = Union[int, str]


class TreeLike(abc.ABC):  # noqa: B024
    ...


class Tree(Protocol):
    @abc.abstractmethod
    def iter_children_values(self) -> Iterable: ...

    @abc.abstractmethod
    def iter_children_items(self) -> Iterable[Tuple[TreeKey, Any]]: ...


TreeLike.register(Tree)

_T = TypeVar("_T")


@functools.singledispatch
def iter_children_values(node: TreeLike) -> Iterable:
    """Create an iterator to traverse values as tree nodes."""
    return node.iter_children_values() if hasattr(node, "iter_children_values") else iter(())


@functools.singledispatch
def iter_children_items(node: TreeLike) -> Iterable[Tuple[TreeKey, Any]]:
    """Create an iterator to traverse values as tree nodes."""
    return node.iter_children_items() if hasattr(node, "iter_children_items") else iter(())


def register_tree_type(*types: type, iter_values_fn: Any, iter_items_fn: Any) -> None:
    for t in types:
        TreeLike.register(t)
        iter_children_values.register(t)(iter_values_fn)
        iter_children_items.register(t)(iter_items_fn)


register_tree_type(str, bytes, iter_values_fn=lambda _: iter(()), iter_items_fn=lambda _: iter(()))

register_tree_type(
    collections.abc.Sequence,
    collections.abc.Set,
    iter_values_fn=lambda x: iter(x),
    iter_items_fn=lambda x: enumerate(x),
)

register_tree_type(
    collections.abc.Mapping,
    iter_values_fn=lambda x: x.values(),
    iter_items_fn=lambda x: x.items(),
)


# -- Tree traversals --
def pre_walk_items(
    node: TreeLike, *, __key__: Optional[TreeKey] = None
) -> Iterator[Tuple[Optional[TreeKey], Any]]:
    """Create a pre-order tree traversal iterator of (key, value) pairs."""
    yield __key__, node
    for key, child in iter_children_items(node):
        yield from pre_walk_items(child, __key__=key)


def pre_walk_values(node: TreeLike) -> Iterator[Any]:
    """Create a pre-order tree traversal iterator of values."""
    return toolz.cons(
        node, toolz.concat(pre_walk_values(child) for child in iter_children_values(node))
    )


walk_items = pre_walk_items
walk_values = pre_walk_values


def walk_instances(node: TreeLike, *types: Type[_T]) -> Iterator[_T]:
    """Create a pre-order iterator over the values of the tree which are instances of ``types``."""
    return (value for value in pre_walk_values(node) if isinstance(value, types))
