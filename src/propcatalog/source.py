"""Schema sources: where descriptor json text comes from.

A schema source returns the raw json text of a named artifact, or None
when it has no such artifact. Absence is never an error.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from propcatalog.codes import ArtifactKind
from propcatalog.config import SchemaSourceConfig

logger = logging.getLogger(__name__)


class SchemaSource(Protocol):
    """Supplies raw descriptor json text per artifact name."""

    def get_component_json_schema(self, name: str) -> Optional[str]:
        ...

    def get_data_format_json_schema(self, name: str) -> Optional[str]:
        ...

    def get_language_json_schema(self, name: str) -> Optional[str]:
        ...

    def get_model_json_schema(self, name: str) -> Optional[str]:
        ...

    def get_other_json_schema(self, name: str) -> Optional[str]:
        ...

    def get_main_json_schema(self) -> Optional[str]:
        ...


def get_json_schema(source: SchemaSource, kind: Union[ArtifactKind, str], name: str) -> Optional[str]:
    """Dispatch to the source getter for ``kind``."""
    getters = {
        ArtifactKind.COMPONENT: source.get_component_json_schema,
        ArtifactKind.DATA_FORMAT: source.get_data_format_json_schema,
        ArtifactKind.LANGUAGE: source.get_language_json_schema,
        ArtifactKind.MODEL: source.get_model_json_schema,
        ArtifactKind.OTHER: source.get_other_json_schema,
    }
    return getters[ArtifactKind(kind)](name)


def _is_plain_name(name: str) -> bool:
    return bool(name) and "/" not in name and "\\" not in name and name not in (".", "..")


class DirectorySchemaSource:
    """Reads descriptors from a directory laid out per SchemaSourceConfig."""

    def __init__(self, config: SchemaSourceConfig):
        self.config = config

    def _read(self, path: Path) -> Optional[str]:
        if not path.is_file():
            logger.debug("No descriptor at %s", path)
            return None
        try:
            return path.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read descriptor %s: %s", path, e)
            return None

    def _read_artifact(self, kind: ArtifactKind, name: str) -> Optional[str]:
        if not _is_plain_name(name):
            logger.debug("Rejecting artifact name %r", name)
            return None
        return self._read(self.config.directory_for(kind) / f"{name}{self.config.suffix}")

    def get_component_json_schema(self, name: str) -> Optional[str]:
        return self._read_artifact(ArtifactKind.COMPONENT, name)

    def get_data_format_json_schema(self, name: str) -> Optional[str]:
        return self._read_artifact(ArtifactKind.DATA_FORMAT, name)

    def get_language_json_schema(self, name: str) -> Optional[str]:
        return self._read_artifact(ArtifactKind.LANGUAGE, name)

    def get_model_json_schema(self, name: str) -> Optional[str]:
        return self._read_artifact(ArtifactKind.MODEL, name)

    def get_other_json_schema(self, name: str) -> Optional[str]:
        return self._read_artifact(ArtifactKind.OTHER, name)

    def get_main_json_schema(self) -> Optional[str]:
        return self._read(self.config.main_path)


class InMemorySchemaSource:
    """Dict-backed schema source.

    Args:
        artifacts: Mapping of artifact kind to {name: json text}
        main: Main configuration json text, if any
    """

    def __init__(
        self,
        artifacts: Optional[Dict[Union[ArtifactKind, str], Dict[str, str]]] = None,
        main: Optional[str] = None,
    ):
        self._artifacts: Dict[ArtifactKind, Dict[str, str]] = {
            ArtifactKind(kind): dict(entries) for kind, entries in (artifacts or {}).items()
        }
        self._main = main

    def _get(self, kind: ArtifactKind, name: str) -> Optional[str]:
        return self._artifacts.get(kind, {}).get(name)

    def get_component_json_schema(self, name: str) -> Optional[str]:
        return self._get(ArtifactKind.COMPONENT, name)

    def get_data_format_json_schema(self, name: str) -> Optional[str]:
        return self._get(ArtifactKind.DATA_FORMAT, name)

    def get_language_json_schema(self, name: str) -> Optional[str]:
        return self._get(ArtifactKind.LANGUAGE, name)

    def get_model_json_schema(self, name: str) -> Optional[str]:
        return self._get(ArtifactKind.MODEL, name)

    def get_other_json_schema(self, name: str) -> Optional[str]:
        return self._get(ArtifactKind.OTHER, name)

    def get_main_json_schema(self) -> Optional[str]:
        return self._main
