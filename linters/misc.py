"""Linter plugins for stylesheets, Python, Go, Markdown, Swift and Elixir."""

from typing import List

from linters.base import LinterPlugin


class ScssLinter(LinterPlugin):
    
    @property
    def name(self) -> str:
        return "scss"
    
    @property
    def file_extensions(self) -> List[str]:
        return [".scss"]


class Flake8Linter(LinterPlugin):
    
    @property
    def name(self) -> str:
        return "flake8"
    
    @property
    def file_extensions(self) -> List[str]:
        return [".py"]


class GolintLinter(LinterPlugin):
    
    @property
    def name(self) -> str:
        return "golint"
    
    @property
    def file_extensions(self) -> List[str]:
        return [".go"]


class RemarkLinter(LinterPlugin):
    
    @property
    def name(self) -> str:
        return "remark"
    
    @property
    def file_extensions(self) -> List[str]:
        return [".md", ".markdown"]


class SwiftLinter(LinterPlugin):
    
    @property
    def name(self) -> str:
        return "swift"
    
    @property
    def file_extensions(self) -> List[str]:
        return [".swift"]


class CredoLinter(LinterPlugin):
    """Credo for Elixir sources and scripts."""
    
    @property
    def name(self) -> str:
        return "credo"
    
    @property
    def file_extensions(self) -> List[str]:
        return [".ex", ".exs"]
