"""Tests for CompilerConfig."""

import json
from pathlib import Path

import pytest

from rescompiler.config import CompilerConfig
from rescompiler.errors import ConfigError


def _write_overrides(root: Path, data: object) -> None:
    config_dir = root / ".rescompiler"
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "config.json").write_text(json.dumps(data), encoding="utf-8")


class TestForManifest:
    """Input and output root resolution."""

    def test_relative_paths_use_cwd(self, tmp_path: Path) -> None:
        config = CompilerConfig.for_manifest("assets/main.rc.json", "build/gen", cwd=tmp_path)

        assert config.resource_root == tmp_path / "assets"
        assert config.output_root == tmp_path / "build" / "gen"

    def test_output_defaults_to_manifest_dir(self, tmp_path: Path) -> None:
        config = CompilerConfig.for_manifest(tmp_path / "assets" / "main.rc.json")

        assert config.resource_root == tmp_path / "assets"
        assert config.output_root == tmp_path / "assets"

    def test_absolute_output_kept(self, tmp_path: Path) -> None:
        config = CompilerConfig.for_manifest(
            "main.rc.json", tmp_path / "gen", cwd=tmp_path / "elsewhere"
        )

        assert config.resource_root == tmp_path / "elsewhere"
        assert config.output_root == tmp_path / "gen"

    def test_defaults(self, tmp_path: Path) -> None:
        config = CompilerConfig.for_manifest(tmp_path / "main.rc.json")

        assert config.manifest_extension == ".json"
        assert config.sub_manifest_extension == ".rc"
        assert config.source_extension == ".c"
        assert config.header_extension == ".h"
        assert config.generated_extensions == frozenset({".c", ".h", ".cpp", ".hpp"})

    def test_frozen(self, tmp_path: Path) -> None:
        config = CompilerConfig.for_manifest(tmp_path / "main.rc.json")

        with pytest.raises(AttributeError):
            config.output_root = tmp_path  # type: ignore[misc]


class TestOverrides:
    """Per-tree configuration file."""

    def test_source_extension_override(self, tmp_path: Path) -> None:
        _write_overrides(tmp_path, {"source_extension": ".cc", "header_extension": ".hh"})

        config = CompilerConfig.for_manifest(tmp_path / "main.rc.json")

        assert config.source_extension == ".cc"
        assert config.header_extension == ".hh"
        assert {".cc", ".hh"} <= config.generated_extensions

    def test_generated_extensions_replaced(self, tmp_path: Path) -> None:
        _write_overrides(tmp_path, {"generated_extensions": [".inc"]})

        config = CompilerConfig.for_manifest(tmp_path / "main.rc.json")

        assert config.generated_extensions == frozenset({".inc", ".c", ".h"})

    def test_unknown_key(self, tmp_path: Path) -> None:
        _write_overrides(tmp_path, {"compress": True})

        with pytest.raises(ConfigError, match="compress"):
            CompilerConfig.for_manifest(tmp_path / "main.rc.json")

    def test_bad_extension(self, tmp_path: Path) -> None:
        _write_overrides(tmp_path, {"source_extension": "c"})

        with pytest.raises(ConfigError, match="source_extension"):
            CompilerConfig.for_manifest(tmp_path / "main.rc.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        config_dir = tmp_path / ".rescompiler"
        config_dir.mkdir()
        (config_dir / "config.json").write_text("{", encoding="utf-8")

        with pytest.raises(ConfigError):
            CompilerConfig.for_manifest(tmp_path / "main.rc.json")

    def test_source_and_header_must_differ(self, tmp_path: Path) -> None:
        _write_overrides(tmp_path, {"header_extension": ".c"})

        with pytest.raises(ConfigError, match="header_extension"):
            CompilerConfig.for_manifest(tmp_path / "main.rc.json")

    @pytest.mark.parametrize("extension", [".json", ".rc"])
    def test_manifests_never_cleaned(self, tmp_path: Path, extension: str) -> None:
        _write_overrides(tmp_path, {"generated_extensions": [".c", extension]})

        with pytest.raises(ConfigError, match="manifest extension"):
            CompilerConfig.for_manifest(tmp_path / "main.rc.json")

    def test_written_extension_cannot_be_manifest(self, tmp_path: Path) -> None:
        _write_overrides(tmp_path, {"source_extension": ".json"})

        with pytest.raises(ConfigError, match="manifest extension"):
            CompilerConfig.for_manifest(tmp_path / "main.rc.json")
