"""
Registry of linter plugins.

This module manages linter registration and lookup by name. The set of
linters is closed: ``default_registry`` registers every supported type.
"""

import logging
from typing import Dict, List, Optional

from linters.base import LinterPlugin
from linters.javascript import CoffeeScriptLinter, EslintLinter, JshintLinter, TslintLinter
from linters.misc import (
    CredoLinter,
    Flake8Linter,
    GolintLinter,
    RemarkLinter,
    ScssLinter,
    SwiftLinter,
)
from linters.ruby import HamlLinter, RubyLinter

logger = logging.getLogger(__name__)


class LinterRegistry:
    """Manages linter plugin registration and selection."""
    
    def __init__(self):
        """Initialize an empty registry."""
        self._linters: Dict[str, LinterPlugin] = {}
    
    def register(self, linter: LinterPlugin) -> None:
        """
        Register a linter plugin.
        
        Args:
            linter: LinterPlugin instance to register
        """
        if linter.name in self._linters:
            logger.warning(f"Linter '{linter.name}' already registered, overwriting")
        
        self._linters[linter.name] = linter
        
        logger.debug(
            f"Registered linter '{linter.name}' with extensions: {linter.file_extensions}"
        )
    
    def get(self, name: str) -> Optional[LinterPlugin]:
        """
        Get linter by name.
        
        Args:
            name: Linter name
            
        Returns:
            LinterPlugin instance if found, None otherwise
        """
        return self._linters.get(name)
    
    def unregister(self, name: str) -> bool:
        """
        Unregister a linter.
        
        Returns:
            True if the linter was unregistered, False if not found
        """
        if name not in self._linters:
            return False
        
        del self._linters[name]
        logger.info(f"Unregistered linter '{name}'")
        return True
    
    def plugins_for_file(self, filename: str) -> List[LinterPlugin]:
        """
        Get every linter able to process a file.
        
        Args:
            filename: Path to the file
            
        Returns:
            Matching LinterPlugin instances in registration order
        """
        matches = [linter for linter in self._linters.values() if linter.can_lint(filename)]
        
        if not matches:
            logger.debug(f"No linter found for file: {filename}")
        
        return matches
    
    def all(self) -> List[LinterPlugin]:
        return list(self._linters.values())
    
    def list_names(self) -> List[str]:
        return list(self._linters.keys())
    
    def ignore_keys(self) -> Dict[str, str]:
        """Map each linter name to its ignore-list key."""
        return {name: linter.ignore_key for name, linter in self._linters.items()}
    
    def get_statistics(self) -> Dict[str, object]:
        """
        Get registry statistics.
        
        Returns:
            Dictionary with statistics
        """
        extensions = {ext for linter in self._linters.values() for ext in linter.file_extensions}
        return {
            "total_linters": len(self._linters),
            "total_extensions": len(extensions),
            "linters": list(self._linters.keys())
        }
    
    def __contains__(self, name: str) -> bool:
        return name in self._linters
    
    def __len__(self) -> int:
        return len(self._linters)


def default_registry() -> LinterRegistry:
    """
    Build a registry with every supported linter type.
    
    Returns:
        LinterRegistry instance
    """
    registry = LinterRegistry()
    for linter in (
        JshintLinter(),
        EslintLinter(),
        CoffeeScriptLinter(),
        TslintLinter(),
        RubyLinter(),
        HamlLinter(),
        ScssLinter(),
        Flake8Linter(),
        GolintLinter(),
        RemarkLinter(),
        SwiftLinter(),
        CredoLinter(),
    ):
        registry.register(linter)
    return registry
