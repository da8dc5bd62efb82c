"""
Configuration loading for builds.

Configuration is stored as files: a ``.hound.yml`` index mapping linter
names to their settings file, plus per-linter config and ignore files:

    jshint:
      config_file: .jshintrc
      ignore_file: .jshintignore
      enabled: true

The referenced config file becomes the linter's section of the
ConfigDocument and the ignore file's text is stored in that section under
the linter's ignore key.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Tuple

from lintbot.errors import ConfigResolutionError
from lintbot.models.build import Build
from lintbot.models.config import RepositoryConfig
from lintbot.services.config_resolver import parse_config_document


logger = logging.getLogger(__name__)

HOUND_CONFIG_FILENAME = ".hound.yml"


def build_config_document(
    files: Mapping[str, str],
    ignore_keys: Optional[Mapping[str, str]] = None
) -> Tuple[Dict[str, Any], Dict[str, str], List[str]]:
    """
    Build a ConfigDocument from configuration file contents.

    Args:
        files: Mapping of file path to file text
        ignore_keys: Mapping of linter name to its default ignore filename,
            which doubles as the key the patterns are stored under

    Returns:
        Tuple of (document, per-linter load errors, disabled linter names)

    Raises:
        ConfigResolutionError: If ``.hound.yml`` itself is unparsable
    """
    ignore_keys = ignore_keys or {}
    index = parse_config_document(files.get(HOUND_CONFIG_FILENAME), HOUND_CONFIG_FILENAME)

    document: Dict[str, Any] = {}
    errors: Dict[str, str] = {}
    disabled: List[str] = []

    for linter_name, options in index.items():
        if not isinstance(options, Mapping):
            errors[linter_name] = (
                f"Options for '{linter_name}' in {HOUND_CONFIG_FILENAME} must be a mapping"
            )
            continue

        if options.get("enabled") is False:
            disabled.append(linter_name)

        config_file = options.get("config_file")
        if config_file:
            if config_file not in files:
                logger.warning(f"Config file {config_file} for '{linter_name}' not found")
            else:
                try:
                    document[linter_name] = parse_config_document(files[config_file], config_file)
                except ConfigResolutionError as e:
                    errors[linter_name] = str(e)
                    continue

        ignore_file = options.get("ignore_file")
        if ignore_file and ignore_file in files:
            ignore_key = ignore_keys.get(linter_name, ignore_file)
            document.setdefault(linter_name, {})[ignore_key] = files[ignore_file]

    # Ignore files at their well-known path apply without an index entry
    for linter_name, ignore_key in ignore_keys.items():
        if linter_name in errors or ignore_key not in files:
            continue
        section = document.setdefault(linter_name, {})
        section.setdefault(ignore_key, files[ignore_key])

    return document, errors, disabled


class ConfigLoader(ABC):
    """Supplies owner-level and repository-level configuration for a build."""

    @abstractmethod
    async def load(self, build: Build) -> RepositoryConfig:
        """
        Load configuration documents for a build.

        Raises:
            ConfigResolutionError: If the configuration index is unparsable
        """


class StaticConfigLoader(ConfigLoader):
    """
    Config loader backed by in-memory file mappings.

    Args:
        owner_files: Files from the owner's configuration repository
        repository_files: Files from the commit under review
        ignore_keys: Mapping of linter name to ignore key, usually
            ``registry.ignore_keys()``
    """

    def __init__(
        self,
        owner_files: Optional[Mapping[str, str]] = None,
        repository_files: Optional[Mapping[str, str]] = None,
        ignore_keys: Optional[Mapping[str, str]] = None
    ):
        self._owner_files = dict(owner_files or {})
        self._repository_files = dict(repository_files or {})
        self._ignore_keys = dict(ignore_keys or {})

    async def load(self, build: Build) -> RepositoryConfig:
        owner, owner_errors, _ = build_config_document(self._owner_files, self._ignore_keys)
        repository, repo_errors, disabled = build_config_document(
            self._repository_files,
            self._ignore_keys
        )

        logger.debug(
            f"Loaded config for build {build.id}: "
            f"owner linters={sorted(owner)}, repository linters={sorted(repository)}"
        )

        return RepositoryConfig(
            owner=owner,
            repository=repository,
            errors={**owner_errors, **repo_errors},
            disabled=disabled
        )
