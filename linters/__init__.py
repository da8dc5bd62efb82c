"""
Linter plugin architecture.

This package provides the linter plugin interface, the supported linter
types and the registry used to look them up by name.
"""

from linters.base import BoundLinter, LinterPlugin
from linters.registry import LinterRegistry, default_registry

__all__ = ['BoundLinter', 'LinterPlugin', 'LinterRegistry', 'default_registry']
