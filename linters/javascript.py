"""JavaScript linter plugins."""

from typing import List

from linters.base import LinterPlugin


class JshintLinter(LinterPlugin):
    """JSHint for plain JavaScript files."""
    
    @property
    def name(self) -> str:
        return "jshint"
    
    @property
    def file_extensions(self) -> List[str]:
        return [".js"]
    
    @property
    def excluded_suffixes(self) -> List[str]:
        # Compiled CoffeeScript is reviewed by the coffeescript linter
        return [".coffee.js"]
    
    @property
    def ignore_key(self) -> str:
        return ".jshintignore"


class EslintLinter(LinterPlugin):
    """ESLint for JavaScript and JSX files."""
    
    @property
    def name(self) -> str:
        return "eslint"
    
    @property
    def file_extensions(self) -> List[str]:
        return [".js", ".jsx"]
    
    @property
    def excluded_suffixes(self) -> List[str]:
        return [".coffee.js"]
    
    @property
    def ignore_key(self) -> str:
        return ".eslintignore"


class CoffeeScriptLinter(LinterPlugin):
    """CoffeeLint for CoffeeScript sources, including compiled variants."""
    
    @property
    def name(self) -> str:
        return "coffeescript"
    
    @property
    def file_extensions(self) -> List[str]:
        return [".coffee", ".coffee.js", ".coffee.erb"]
    
    @property
    def job_class(self) -> str:
        return "CoffeeScriptReviewJob"


class TslintLinter(LinterPlugin):
    """TSLint for TypeScript files."""
    
    @property
    def name(self) -> str:
        return "tslint"
    
    @property
    def file_extensions(self) -> List[str]:
        return [".ts"]
    
    @property
    def excluded_suffixes(self) -> List[str]:
        # Declaration files are generated
        return [".d.ts"]
