# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import itertools
from typing import List, Sequence, TypeVar

from slimfn.errors import MaskLengthMismatchError


_T = TypeVar("_T")


def apply_boolean_mask(items: Sequence[_T], mask: Sequence[bool]) -> List[_T]:
    """
    Select the items at the positions where the mask is `True`, preserving their order.

    >>> apply_boolean_mask(["a", "b", "c"], [True, False, True])
    ['a', 'c']
    """
    if len(items) != len(mask):
        raise MaskLengthMismatchError(mask_length=len(mask), sequence_length=len(items))
    return list(itertools.compress(items, mask))
