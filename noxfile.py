#! /usr/bin/env python
#
# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

import pathlib
from typing import Final

import nox


PYTHON_VERSIONS: Final[list[str]] = ["3.10", "3.11", "3.12"]

nox.options.sessions = [f"test_slimfn-{version}" for version in PYTHON_VERSIONS]


@nox.session(python=PYTHON_VERSIONS)
def test_slimfn(session: nox.Session) -> None:
    """Run 'slimfn' tests and doctests."""

    session.install("-e", ".[testing]")

    session.run(
        *"pytest --cache-clear -sv".split(),
        str(pathlib.Path("tests") / "slimfn_tests"),
        *session.posargs,
    )
    session.run(
        *"pytest --doctest-modules -sv".split(),
        str(pathlib.Path("src") / "slimfn"),
    )
