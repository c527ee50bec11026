"""
Demo application exercised by the runners.
"""

from propcheck.app.dependency import ConcatenatingDependency, DependencyCapability
from propcheck.app.some_app import SomeApp

__all__ = [
    "ConcatenatingDependency",
    "DependencyCapability",
    "SomeApp",
]
