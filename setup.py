# -*- coding: utf-8 -*-
#
# slimfn - Function signature slimming for Yul-like IR
#
# Copyright (c) 2014-2024, ETH Zurich
# All rights reserved.
#
# Please, refer to the LICENSE file in the root directory.
# SPDX-License-Identifier: BSD-3-Clause

from setuptools import find_packages, setup


if __name__ == "__main__":
    setup(
        name="slimfn",
        version="0.3.0",
        description="Optimizer passes removing unused parameters and return variables from IR functions",
        author="ETH Zurich",
        license="BSD-3-Clause",
        package_dir={"": "src"},
        packages=find_packages("src"),
        python_requires=">=3.10",
        install_requires=[
            "attrs>=21.3",
            "deepdiff>=5.6.0",
            "packaging>=20.0",
            "toolz>=0.12.0",
            "typing-extensions>=4.2",
        ],
        extras_require={
            "testing": [
                "hypothesis>=6.0.0",
                "nox>=2025.02.09",
                "pytest>=7.0",
            ],
        },
    )
