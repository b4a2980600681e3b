# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="share-recovery",
    version="0.1.0",
    description="Recover a threshold-shared secret from shares that may be corrupted",
    author="Share Recovery contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "PyYAML<7.0,>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "share-recover=share_recovery.cli:main",
        ],
    },
)
