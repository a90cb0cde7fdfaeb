#!/usr/bin/env python3
"""Setup script for cardforge package."""

from setuptools import setup, find_packages

setup(
    name="cardforge",
    version="0.1.0",
    description="Interactive card compositor: template + illustration + text into printable PNG cards",
    author="Cardforge Project",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.0.0",
        "Pillow>=10.1.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0"],
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "cardforge=cardforge.cli:cli",
        ],
    },
    python_requires=">=3.10",
)
