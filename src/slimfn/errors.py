# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

"""Internal invariant errors raised by the passes.

All of them point at an inconsistency between a pass and the analysis or
driver feeding it (usage masks, rename tables), never at the user program.
"""

from __future__ import annotations

from slimfn.irkit import InternalInvariantError


class MaskLengthMismatchError(InternalInvariantError):
    message_template = (
        "Boolean mask of length {mask_length} cannot be applied to a sequence "
        "of length {sequence_length}."
    )


class MissingTranslationError(InternalInvariantError):
    message_template = "No original name is known for the displaced function '{function_name}'."


class UnsoundSplitError(InternalInvariantError):
    message_template = (
        "Body of function '{function_name}' still references {names} "
        "which were dropped from its signature."
    )
