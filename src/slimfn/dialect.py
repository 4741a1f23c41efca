# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

"""Dialect registry answering which callee names are dialect-provided builtins."""

from __future__ import annotations

from typing import Callable, Final, FrozenSet

import attrs


#: Builtin oracle: ``True`` if the given callee name is a primitive of the dialect.
BuiltinOracle = Callable[[str], bool]


ARITHMETIC_BUILTINS: Final = frozenset(
    {
        "add",
        "sub",
        "mul",
        "div",
        "sdiv",
        "mod",
        "smod",
        "exp",
        "addmod",
        "mulmod",
        "signextend",
    }
)

COMPARISON_BUILTINS: Final = frozenset({"lt", "gt", "slt", "sgt", "eq", "iszero"})

BITWISE_BUILTINS: Final = frozenset({"not", "and", "or", "xor", "byte", "shl", "shr", "sar"})

MEMORY_AND_STORAGE_BUILTINS: Final = frozenset(
    {
        "mload",
        "mstore",
        "mstore8",
        "msize",
        "mcopy",
        "sload",
        "sstore",
        "tload",
        "tstore",
        "keccak256",
    }
)

ENVIRONMENT_BUILTINS: Final = frozenset(
    {
        "address",
        "balance",
        "selfbalance",
        "origin",
        "caller",
        "callvalue",
        "calldataload",
        "calldatasize",
        "calldatacopy",
        "codesize",
        "codecopy",
        "extcodesize",
        "extcodecopy",
        "extcodehash",
        "returndatasize",
        "returndatacopy",
        "gasprice",
        "gas",
        "blockhash",
        "blobhash",
        "coinbase",
        "timestamp",
        "number",
        "difficulty",
        "prevrandao",
        "gaslimit",
        "chainid",
        "basefee",
        "blobbasefee",
    }
)

CONTROL_BUILTINS: Final = frozenset(
    {
        "stop",
        "return",
        "revert",
        "invalid",
        "selfdestruct",
        "pop",
        "create",
        "create2",
        "call",
        "callcode",
        "delegatecall",
        "staticcall",
        "log0",
        "log1",
        "log2",
        "log3",
        "log4",
    }
)

EVM_BUILTINS: Final = frozenset(
    {
        *ARITHMETIC_BUILTINS,
        *COMPARISON_BUILTINS,
        *BITWISE_BUILTINS,
        *MEMORY_AND_STORAGE_BUILTINS,
        *ENVIRONMENT_BUILTINS,
        *CONTROL_BUILTINS,
    }
)

KEYWORDS: Final = frozenset(
    {
        "function",
        "let",
        "if",
        "switch",
        "case",
        "default",
        "for",
        "break",
        "continue",
        "leave",
        "true",
        "false",
    }
)


@attrs.frozen
class Dialect:
    """A target dialect: its name, its builtin functions and its reserved words."""

    name: str
    builtins: FrozenSet[str] = attrs.field(converter=frozenset)
    reserved: FrozenSet[str] = attrs.field(default=KEYWORDS, converter=frozenset)

    def is_builtin(self, name: str) -> bool:
        return name in self.builtins

    def is_reserved(self, name: str) -> bool:
        """Names a user definition must never take (keywords and builtins)."""
        return name in self.reserved or name in self.builtins


EVM_DIALECT: Final = Dialect(name="evm", builtins=EVM_BUILTINS)
