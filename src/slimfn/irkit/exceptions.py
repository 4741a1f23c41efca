# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

"""Definitions of IR toolkit exceptions."""

from __future__ import annotations

from typing import Any, Dict, Optional


class IRKitError:
    """Base class for toolkit-specific exceptions.

    Notes:
        This base class has to be always inherited together with a standard
        exception, and thus it should not be used as direct superclass
        for custom exceptions. Inherit directly from :class:`IRKitValueError`,
        :class:`InternalInvariantError`, etc. instead.

    """

    message_template = "Generic IR error [{info}]"
    info: Dict[str, Any]

    def __init__(self, message: Optional[str] = None, **kwargs: Any) -> None:
        self.info = kwargs
        super().__init__(  # type: ignore  # super() call works as expected when using multiple inheritance
            message
            or type(self).message_template.format(
                **self.info, info=", ".join(f"{key}={value}" for key, value in self.info.items())
            )
        )


class IRKitValueError(IRKitError, ValueError):
    """Base class for toolkit-specific value errors."""

    message_template = "Invalid value [{info}]"


class InternalInvariantError(IRKitError, AssertionError):
    """Broken internal invariant between a pass and its callers.

    These errors signal a defect in the compiler pipeline, never a property
    of the user program, and they are not meant to be recovered from.
    """

    message_template = "Internal invariant violated [{info}]"
