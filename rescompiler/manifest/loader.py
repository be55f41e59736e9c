"""Loads manifest nodes from JSON files."""

import json
import logging
import os
from pathlib import Path

from ..config import CompilerConfig
from ..errors import AssetNotFound, CompilerIOError, ManifestParseError
from .contracts import Resource

_REQUIRED_FIELDS: dict[str, type] = {
    "name": str,
    "namespace": str,
    "dependencies": list,
    "content": list,
}

_TYPE_NAMES = {str: "a string", list: "a list", dict: "an object"}


class ManifestLoader:
    """Reads one manifest file into a Resource."""

    def __init__(self, config: CompilerConfig) -> None:
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)

    def manifest_path(self, path: Path | str) -> Path:
        """Return ``path`` with the manifest extension appended when missing."""
        path = Path(path)
        if path.suffix != self.config.manifest_extension:
            path = path.with_name(path.name + self.config.manifest_extension)
        return path

    def is_sub_manifest(self, path: Path) -> bool:
        """Content entries with the sub-manifest suffix point at another node."""
        return path.suffix == self.config.sub_manifest_extension

    def relative_path(self, path: Path) -> str:
        """Path of a manifest relative to the resource root, POSIX separated."""
        relative = os.path.relpath(path, self.config.resource_root)
        return Path(relative).as_posix()

    def load(self, path: Path | str) -> Resource:
        """
        Load and validate the manifest at ``path``.

        Raises:
            AssetNotFound: the manifest file does not exist.
            ManifestParseError: invalid JSON or a missing/mistyped field.
        """
        json_path = self.manifest_path(path)
        print(f"Resource JSON: {json_path}")

        if not json_path.is_file():
            raise AssetNotFound(json_path)

        try:
            raw = json_path.read_bytes()
        except OSError as e:
            raise CompilerIOError(json_path, e.strerror or str(e)) from e

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ManifestParseError(json_path, f"not valid UTF-8 ({e})") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ManifestParseError(json_path, f"invalid JSON ({e})") from e

        self._validate(json_path, data)

        resource = Resource.from_dict(data, self.relative_path(json_path))
        self.logger.debug(
            "Loaded %s: %d dependencies, %d content entries",
            resource.relative_path, len(resource.dependencies), len(resource.content),
        )
        return resource

    def _validate(self, path: Path, data: object) -> None:
        """Check required fields and their JSON types."""
        if not isinstance(data, dict):
            raise ManifestParseError(path, "top-level value must be an object")

        name = data.get("name") if isinstance(data.get("name"), str) else None

        for key, expected in _REQUIRED_FIELDS.items():
            if key not in data:
                raise ManifestParseError(path, f"missing required field '{key}'", name)
            if not isinstance(data[key], expected):
                raise ManifestParseError(
                    path, f"field '{key}' must be {_TYPE_NAMES[expected]}", name
                )

        if not data["name"]:
            raise ManifestParseError(path, "field 'name' must not be empty")

        for i, dependency in enumerate(data["dependencies"]):
            if not isinstance(dependency, str):
                raise ManifestParseError(path, f"dependencies[{i}] must be a string", name)

        for i, item in enumerate(data["content"]):
            if not isinstance(item, dict):
                raise ManifestParseError(path, f"content[{i}] must be an object", name)
            for key in ("path", "name"):
                if key not in item:
                    raise ManifestParseError(
                        path, f"content[{i}] is missing required field '{key}'", name
                    )
                if not isinstance(item[key], str):
                    raise ManifestParseError(path, f"content[{i}].{key} must be a string", name)
            if not isinstance(item.get("namespace", ""), str):
                raise ManifestParseError(path, f"content[{i}].namespace must be a string", name)
