"""Configuration for file-backed schema sources."""

import json
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from propcatalog.codes import ArtifactKind


class SchemaSourceConfig(BaseModel):
    """Layout of a descriptor directory.

    Descriptors live at ``<root>/<kind directory>/<name><suffix>``; the
    main configuration is a single file directly under ``root``.
    """
    root: Path
    components_dir: str = "components"
    dataformats_dir: str = "dataformats"
    languages_dir: str = "languages"
    models_dir: str = "models"
    others_dir: str = "others"
    suffix: str = Field(".json", description="File suffix of per-artifact descriptors")
    main_file: str = "main-configuration-metadata.json"
    encoding: str = "utf-8"

    model_config = ConfigDict(extra="forbid")

    def directory_for(self, kind: ArtifactKind) -> Path:
        """Directory holding descriptors of the given kind."""
        dirs = {
            ArtifactKind.COMPONENT: self.components_dir,
            ArtifactKind.DATA_FORMAT: self.dataformats_dir,
            ArtifactKind.LANGUAGE: self.languages_dir,
            ArtifactKind.MODEL: self.models_dir,
            ArtifactKind.OTHER: self.others_dir,
        }
        return self.root / dirs[ArtifactKind(kind)]

    @property
    def main_path(self) -> Path:
        return self.root / self.main_file

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "SchemaSourceConfig":
        """Load config from a JSON file; a relative ``root`` is resolved against the file's directory."""
        config_path = Path(path)
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        config = cls(**data)
        if not config.root.is_absolute():
            config = config.model_copy(update={"root": config_path.parent / config.root})
        return config
