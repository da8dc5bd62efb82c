"""Ruby and Haml linter plugins."""

from typing import List

from linters.base import LinterPlugin


class RubyLinter(LinterPlugin):
    """RuboCop for Ruby files."""
    
    @property
    def name(self) -> str:
        return "ruby"
    
    @property
    def file_extensions(self) -> List[str]:
        return [".rb"]


class HamlLinter(LinterPlugin):
    """haml-lint for Haml templates."""
    
    @property
    def name(self) -> str:
        return "haml"
    
    @property
    def file_extensions(self) -> List[str]:
        return [".haml"]
