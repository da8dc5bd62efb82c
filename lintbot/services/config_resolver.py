"""
Configuration resolution for linters.

Merges the owner-level configuration tree with the repository-level tree
for one linter key. Repository values win: nested mappings are merged
recursively, anything else (scalars, lists, type conflicts) is replaced
wholesale by the repository value.
"""

import copy
import json
import logging
from typing import Any, Dict, Mapping, Optional

import yaml

from lintbot.errors import ConfigResolutionError
from lintbot.models.config import RepositoryConfig, ResolvedConfig


logger = logging.getLogger(__name__)


def parse_config_document(text: Optional[str], source: str = "<config>") -> Dict[str, Any]:
    """
    Parse raw configuration text (YAML or JSON) into a ConfigDocument.

    Args:
        text: Raw document text; None or blank yields an empty document
        source: Name used in error messages

    Returns:
        Parsed mapping

    Raises:
        ConfigResolutionError: If the text is unparsable or not a mapping
    """
    if text is None or not text.strip():
        return {}

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigResolutionError(f"Failed to parse {source}: {e}")

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigResolutionError(
            f"Expected a mapping in {source}, got {type(document).__name__}"
        )
    return document


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Recursively overlay ``override`` on ``base`` without mutating either.

    Args:
        base: Lower precedence mapping (owner)
        override: Higher precedence mapping (repository)

    Returns:
        New merged mapping
    """
    merged = copy.deepcopy(dict(base))

    for key, value in override.items():
        existing = merged.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(existing, value)
        else:
            merged[key] = copy.deepcopy(value)

    return merged


def _linter_section(document: Mapping[str, Any], linter_key: str, level: str) -> Mapping[str, Any]:
    section = document.get(linter_key)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigResolutionError(
            f"{level} configuration for '{linter_key}' must be a mapping, "
            f"got {type(section).__name__}",
            linter_name=linter_key
        )
    return section


def _canonicalize(value: Any) -> Any:
    # JSON round trip keeps only plain, serializable values
    try:
        return json.loads(json.dumps(value, sort_keys=True))
    except (TypeError, ValueError) as e:
        raise ConfigResolutionError(f"Configuration is not serializable: {e}")


def resolve(
    owner_config: Mapping[str, Any],
    repo_config: Mapping[str, Any],
    linter_key: str
) -> ResolvedConfig:
    """
    Resolve the effective configuration for one linter.

    Args:
        owner_config: Owner-level ConfigDocument
        repo_config: Repository-level ConfigDocument
        linter_key: Linter name used as the top-level key in both documents

    Returns:
        ResolvedConfig with repository precedence applied

    Raises:
        ConfigResolutionError: If either section for the linter is malformed
    """
    owner_section = _linter_section(owner_config, linter_key, "Owner")
    repo_section = _linter_section(repo_config, linter_key, "Repository")

    merged = deep_merge(owner_section, repo_section)

    logger.debug(
        f"Resolved config for '{linter_key}' "
        f"({len(owner_section)} owner keys, {len(repo_section)} repository keys)"
    )

    return ResolvedConfig(linter_name=linter_key, values=_canonicalize(merged))


def resolve_for_repository(repository_config: RepositoryConfig, linter_key: str) -> ResolvedConfig:
    """
    Resolve a linter's configuration from a loaded RepositoryConfig.

    Raises:
        ConfigResolutionError: If the linter's documents failed to load or
            its sections are malformed
    """
    load_error = repository_config.errors.get(linter_key)
    if load_error:
        raise ConfigResolutionError(load_error, linter_name=linter_key)

    return resolve(repository_config.owner, repository_config.repository, linter_key)
