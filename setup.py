#!/usr/bin/env python3
"""
Memory Cache Setup Script
=========================
Allows installation of the memory-cache package.

Usage:
    pip install -e .           # Development install
    pip install -e ".[test]"   # Development install with test tools
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="memory-cache",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "memory-cache=memory_cache.cli:main",
        ],
    },
)
