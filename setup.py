"""
setup.py

Packaging metadata and CLI entry point for propcheck.

Version: 0.1.0. Property-mode and table-mode runners, arbitrary registry,
rule-driven mock collaborators, layered YAML configuration and a click CLI.
"""
from setuptools import setup, find_packages

setup(
    name="propcheck",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click",
        "pydantic>=2.0",
        "PyYAML",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "propcheck=cli:cli",
        ],
    },
    python_requires=">=3.8",
)
