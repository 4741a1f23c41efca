# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import dataclasses
import functools
import itertools
import threading
from typing import Iterable, Iterator, Set

from slimfn import ir, irkit
from slimfn.dialect import Dialect


def collect_names(node: irkit.RootNode) -> Set[str]:
    """Collect every name declared or referenced in the tree."""
    return {
        str(n.name)
        for n in irkit.walk_instances(node, ir.Identifier, ir.TypedName, ir.FunctionDefinition)
    }


@dataclasses.dataclass
class NameDispenser:
    """
    Generator of names which are unique in a whole compilation unit.

    A hint is returned unchanged if it is still free, otherwise it gets a
    numeric suffix from a counter shared by all the names of the dispenser.
    Names used in the program, builtins and reserved words of the dialect
    and every previously generated name are never returned.

    >>> from slimfn.dialect import EVM_DIALECT
    >>> dispenser = NameDispenser(EVM_DIALECT, used_names={"x"})
    >>> dispenser.new_name("y"), dispenser.new_name("x"), dispenser.new_name("x")
    (SymbolName('y'), SymbolName('x_1'), SymbolName('x_2'))
    >>> dispenser.new_name("add")
    SymbolName('add_3')
    """

    dialect: Dialect
    used_names: Set[str] = dataclasses.field(default_factory=set)

    _counter: Iterator[int] = dataclasses.field(
        default_factory=functools.partial(itertools.count, 1), init=False, repr=False
    )
    _lock: threading.Lock = dataclasses.field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    @classmethod
    def from_ast(cls, dialect: Dialect, ast: irkit.RootNode) -> NameDispenser:
        return cls(dialect, used_names=collect_names(ast))

    def _is_illegal(self, name: str) -> bool:
        return name in self.used_names or self.dialect.is_reserved(name)

    def new_name(self, hint: str) -> irkit.SymbolName:
        """Return a fresh name derived from ``hint`` and mark it as used."""
        with self._lock:
            name = str(hint)
            while self._is_illegal(name):
                name = f"{hint}_{next(self._counter)}"
            self.used_names.add(name)
        return irkit.SymbolName(name)

    def mark_used(self, names: Iterable[str]) -> None:
        with self._lock:
            self.used_names.update(str(name) for name in names)
