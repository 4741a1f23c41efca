# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

from slimfn.transforms.function_splitter import split_function
from slimfn.transforms.name_displacer import NameDisplacer
from slimfn.transforms.split_heuristic import was_pruned
from slimfn.transforms.unused_function_parameter_pruner import prune_unused_function_parameters


__all__ = ["NameDisplacer", "prune_unused_function_parameters", "split_function", "was_pruned"]
