# SPDX-FileCopyrightText: 2025 secret-recovery contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="secret-recovery",
    version="0.1.0",
    description="Recover the constant term of a threshold-shared polynomial from radix-encoded shares",
    author="secret-recovery contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "click<9.0,>=8.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "pytest-xdist>=3.5.0",
            "hypothesis>=6.0.0",
        ],
        "dev": [
            "ruff>=0.2.0",
            "black>=23.1.0",
            "isort>=5.10.1",
            "mypy>=1.8.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "secret-recovery=secret_recovery.cli:main",
        ],
    },
)
