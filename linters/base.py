"""
Base interface for linter plugins.

This module defines the abstract base class every linter type implements
to declare which files it can lint, and the binding of a linter type to a
build's configuration.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from lintbot.errors import ConfigResolutionError
from lintbot.models.build import Build, CommitFile
from lintbot.models.config import RepositoryConfig, ResolvedConfig
from lintbot.services.config_resolver import resolve_for_repository
from lintbot.services.path_filter import PathFilter


class LinterPlugin(ABC):
    """Base interface for linter plugins."""
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the linter name (e.g., 'jshint', 'ruby')."""
        pass
    
    @property
    @abstractmethod
    def file_extensions(self) -> List[str]:
        """Return supported filename suffixes (e.g., ['.js'])."""
        pass
    
    @property
    def excluded_suffixes(self) -> List[str]:
        """
        Return compound suffixes that end in a supported extension but
        belong to another source language (e.g., '.coffee.js').
        """
        return []
    
    @property
    def ignore_key(self) -> str:
        """Return the well-known ignore-list key (e.g., '.jshintignore')."""
        return f".{self.name}ignore"
    
    @property
    def job_class(self) -> str:
        """Return the job kind workers consume (e.g., 'JshintReviewJob')."""
        return "".join(part.capitalize() for part in self.name.split("_")) + "ReviewJob"
    
    def can_lint(self, filename: str) -> bool:
        """
        Check whether this linter type can process a file.
        
        Uses exact suffix matching: the filename must end with a supported
        extension and must not end with one of the excluded compound
        suffixes.
        
        Args:
            filename: Path of the file
            
        Returns:
            True if the file is in scope for this linter
        """
        if not any(filename.endswith(ext) and len(filename) > len(ext) for ext in self.file_extensions):
            return False
        return not any(filename.endswith(suffix) for suffix in self.excluded_suffixes)
    
    def bind(self, build: Build, repository_config: RepositoryConfig) -> "BoundLinter":
        """Bind this linter type to a build and its configuration."""
        return BoundLinter(self, build, repository_config)


class BoundLinter:
    """
    A linter plugin bound to one build's configuration.
    
    The resolved configuration is computed once and reused for both the
    ignore-list check and the job payload.
    """
    
    def __init__(self, plugin: LinterPlugin, build: Build, repository_config: RepositoryConfig):
        self.plugin = plugin
        self.build = build
        self.repository_config = repository_config
        self._resolved_config: Optional[ResolvedConfig] = None
    
    @property
    def name(self) -> str:
        return self.plugin.name
    
    @property
    def enabled(self) -> bool:
        return self.repository_config.is_enabled(self.plugin.name)
    
    @property
    def resolved_config(self) -> ResolvedConfig:
        """
        Effective configuration for this linter.
        
        Raises:
            ConfigResolutionError: If the linter's configuration is malformed
        """
        if self._resolved_config is None:
            self._resolved_config = resolve_for_repository(self.repository_config, self.plugin.name)
        return self._resolved_config
    
    def can_lint(self, filename: str) -> bool:
        return self.plugin.can_lint(filename)
    
    def file_included(self, commit_file: CommitFile) -> bool:
        """
        Check the file against the linter's ignore list.
        
        Raises:
            ConfigResolutionError: If the ignore list is not a string or list
        """
        try:
            path_filter = PathFilter.from_config_value(
                self.resolved_config.get(self.plugin.ignore_key)
            )
        except ConfigResolutionError as e:
            e.linter_name = e.linter_name or self.plugin.name
            raise
        return path_filter.is_included(commit_file.filename)
