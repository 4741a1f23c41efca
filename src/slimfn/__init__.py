# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

"""Optimizer passes removing unused parameters and return variables from IR functions.

The main entry points are:
    - `slimfn.transforms.function_splitter.split_function`, turning a function into a
      signature-preserving wrapper around a new function with a reduced signature,
    - `slimfn.transforms.unused_function_parameter_pruner.prune_unused_function_parameters`,
      applying the splitter to all the eligible functions of a program.
"""

import logging

from . import config, irkit
from .__about__ import __author__, __copyright__, __license__, __version__, __version_info__


logging.getLogger(__name__).setLevel(config.LOG_LEVEL)


__all__ = [
    "__author__",
    "__copyright__",
    "__license__",
    "__version__",
    "__version_info__",
    "config",
    "irkit",
]
