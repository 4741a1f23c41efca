# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import logging
import os
from typing import Final


def env_flag_to_bool(name: str, default: bool) -> bool:
    """Recognize true or false signaling string values."""
    flag_value = None
    if name in os.environ:
        flag_value = os.environ[name].lower()
    match flag_value:
        case None:
            return default
        case "0" | "false" | "off":
            return False
        case "1" | "true" | "on":
            return True
        case _:
            raise ValueError(
                "Invalid slimfn environment flag value: use '0 | false | off' or '1 | true | on'."
            )


def env_log_level(name: str, default: str) -> int:
    """Translate a logging level name from the environment into its numeric value."""
    level_name = os.environ.get(name, default).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Invalid slimfn logging level '{level_name}' in '{name}'.")
    return level


#: Master debug flag
#: Changes defaults for all the other options to be as helpful for debugging as possible.
#: Does not override values set in environment variables.
DEBUG: Final[bool] = env_flag_to_bool("SLIMFN_DEBUG", default=False)


#: Verify that the body moved into a split function does not reference any dropped
#: parameter or return variable. Disabling it trusts the usage masks blindly.
CHECK_SPLIT_REFERENCES: bool = env_flag_to_bool("SLIMFN_CHECK_SPLIT_REFERENCES", default=True)


#: Level of the `slimfn` package logger.
LOG_LEVEL: int = env_log_level("SLIMFN_LOG_LEVEL", default="DEBUG" if DEBUG else "WARNING")
