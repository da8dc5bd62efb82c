"""Configuration document data models."""

import json
from typing import Any, Dict, List

from pydantic import BaseModel


class ResolvedConfig(BaseModel):
    """Effective configuration for one (linter, build) pair."""

    linter_name: str
    values: Dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def to_json(self) -> str:
        """Serialize as compact, key-sorted JSON."""
        return json.dumps(self.values, sort_keys=True, separators=(",", ":"))


class RepositoryConfig(BaseModel):
    """
    Raw owner-level and repository-level configuration for one build.

    ``errors`` maps linter names to load failures recorded while building
    the documents; they surface only when that linter's config is resolved.
    """

    owner: Dict[str, Any] = {}
    repository: Dict[str, Any] = {}
    errors: Dict[str, str] = {}
    disabled: List[str] = []

    def is_enabled(self, linter_name: str) -> bool:
        return linter_name not in self.disabled
