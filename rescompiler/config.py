"""Compiler run configuration."""

import json
from dataclasses import dataclass, field, replace
from pathlib import Path

from .errors import ConfigError

CONFIG_DIR = ".rescompiler"
CONFIG_FILE = "config.json"

_OVERRIDABLE = {
    "source_extension",
    "header_extension",
    "sub_manifest_extension",
    "generated_extensions",
}


@dataclass(frozen=True)
class CompilerConfig:
    """Immutable context shared by every stage of one compile run."""

    resource_root: Path
    output_root: Path
    manifest_extension: str = ".json"
    sub_manifest_extension: str = ".rc"
    source_extension: str = ".c"
    header_extension: str = ".h"
    generated_extensions: frozenset[str] = field(
        default_factory=lambda: frozenset({".c", ".h", ".cpp", ".hpp"})
    )

    @classmethod
    def for_manifest(
        cls,
        manifest_path: Path | str,
        output_dir: Path | str | None = None,
        cwd: Path | None = None,
    ) -> "CompilerConfig":
        """Resolve input/output roots the way the CLI does.

        Relative paths are anchored at ``cwd`` (the process working directory
        by default). The output root defaults to the manifest's directory.
        """
        cwd = Path.cwd() if cwd is None else cwd
        manifest_path = Path(manifest_path)
        resource_root = manifest_path.parent
        if not resource_root.is_absolute():
            resource_root = cwd / resource_root

        output_root = Path(output_dir) if output_dir is not None else resource_root
        if not output_root.is_absolute():
            output_root = cwd / output_root

        config = cls(resource_root=resource_root, output_root=output_root)
        return config.with_overrides(resource_root)

    def with_overrides(self, directory: Path) -> "CompilerConfig":
        """Apply ``<directory>/.rescompiler/config.json`` if it exists."""
        config_path = directory / CONFIG_DIR / CONFIG_FILE
        if not config_path.exists():
            return self

        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"{config_path}: {e}") from e
        return self._from_dict(data, config_path)

    def _from_dict(self, data: object, source: Path) -> "CompilerConfig":
        if not isinstance(data, dict):
            raise ConfigError(f"{source}: expected a JSON object")

        unknown = set(data) - _OVERRIDABLE
        if unknown:
            raise ConfigError(f"{source}: unknown keys {', '.join(sorted(unknown))}")

        changes: dict[str, object] = {}
        for key in ("source_extension", "header_extension", "sub_manifest_extension"):
            if key in data:
                changes[key] = _extension(data[key], key, source)

        generated = set(self.generated_extensions)
        if "generated_extensions" in data:
            values = data["generated_extensions"]
            if not isinstance(values, list):
                raise ConfigError(f"{source}: generated_extensions must be a list")
            generated = {_extension(v, "generated_extensions", source) for v in values}

        source_extension = changes.get("source_extension", self.source_extension)
        header_extension = changes.get("header_extension", self.header_extension)
        if source_extension == header_extension:
            raise ConfigError(
                f"{source}: source_extension and header_extension are both {source_extension!r}"
            )

        # the cleaner must always remove what the compiler writes
        generated.add(source_extension)
        generated.add(header_extension)

        sub_manifest_extension = changes.get("sub_manifest_extension", self.sub_manifest_extension)
        protected = generated & {self.manifest_extension, sub_manifest_extension}
        if protected:
            raise ConfigError(
                f"{source}: manifest extension {', '.join(sorted(protected))} "
                "cannot be a generated extension"
            )
        changes["generated_extensions"] = frozenset(generated)

        return replace(self, **changes)


def _extension(value: object, key: str, source: Path) -> str:
    if not isinstance(value, str) or not value.startswith(".") or len(value) < 2:
        raise ConfigError(f"{source}: {key} must be an extension like '.c', got {value!r}")
    return value
