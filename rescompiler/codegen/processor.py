"""Depth-first generation of source/header pairs for a manifest tree."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from ..config import CompilerConfig
from ..errors import CompilerIOError, ManifestParseError
from ..manifest.contracts import Resource
from ..manifest.loader import ManifestLoader
from .emitter import (
    HEADER_BANNER,
    ContentEmitter,
    render_dependencies,
    render_internal_include,
    wrap_entry_namespace,
    wrap_resource_namespace,
)


@dataclass
class CompileResult:
    """Files touched by one compile run, in the order it touched them."""
    manifests: list[Path] = field(default_factory=list)
    outputs: list[Path] = field(default_factory=list)


class ResourceProcessor:
    """Walks a manifest tree and writes one source/header pair per node."""

    def __init__(
        self,
        config: CompilerConfig,
        loader: ManifestLoader | None = None,
        emitter: ContentEmitter | None = None,
    ) -> None:
        self.config = config
        self.loader = loader or ManifestLoader(config)
        self.emitter = emitter or ContentEmitter()
        self.logger = logging.getLogger(self.__class__.__name__)

    def process(self, resource: Resource) -> CompileResult:
        """Generate files for ``resource`` and every manifest nested under it."""
        result = CompileResult()
        self._process_node(resource, result, ())
        self.logger.info(
            "Generated %d files from %d nested manifests",
            len(result.outputs), len(result.manifests),
        )
        return result

    def source_path(self, resource: Resource) -> Path:
        return self._output_dir(resource) / f"{resource.name}{self.config.source_extension}"

    def header_path(self, resource: Resource) -> Path:
        return self._output_dir(resource) / f"{resource.name}{self.config.header_extension}"

    def include_path(self, resource: Resource) -> str:
        """Header path of ``resource`` as included from other generated headers."""
        parent = PurePosixPath(resource.relative_path).parent
        return (parent / f"{resource.name}{self.config.header_extension}").as_posix()

    def _output_dir(self, resource: Resource) -> Path:
        return self.config.output_root / PurePosixPath(resource.relative_path).parent

    def _process_node(
        self, resource: Resource, result: CompileResult, ancestors: tuple[str, ...]
    ) -> None:
        own_path = self.config.resource_root / resource.relative_path
        ancestors = ancestors + (os.path.normpath(own_path),)
        manifest_dir = own_path.parent

        dependencies = render_dependencies(resource.dependencies)
        internal_dependencies: list[str] = []
        source_parts: list[str] = []
        header_parts: list[str] = []

        for item in resource.content:
            item_path = manifest_dir / item.path
            is_manifest = self.loader.is_sub_manifest(item_path)
            target = self.loader.manifest_path(item_path) if is_manifest else item_path
            if _same_path(target, own_path):
                self.logger.debug("Skipping self-reference in %s", resource.relative_path)
                continue

            if is_manifest:
                if os.path.normpath(target) in ancestors:
                    raise ManifestParseError(
                        target, "cyclic manifest reference", resource.name
                    )
                child = self.loader.load(item_path)
                result.manifests.append(target)
                self._process_node(child, result, ancestors)
                internal_dependencies.append(render_internal_include(self.include_path(child)))
            else:
                emitted = self.emitter.emit(item_path, item.name)
                source_parts.append(emitted.source)
                header_parts.append(wrap_entry_namespace(emitted.header, item.namespace))

        source = dependencies + "".join(source_parts)
        header = (
            HEADER_BANNER
            + dependencies
            + "".join(internal_dependencies)
            + wrap_resource_namespace("".join(header_parts), resource.namespace)
        )

        self._write(self.source_path(resource), source, result)
        self._write(self.header_path(resource), header, result)

    def _write(self, path: Path, text: str, result: CompileResult) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8", newline="\n") as f:
                f.write(text)
        except OSError as e:
            raise CompilerIOError(path, e.strerror or str(e)) from e

        result.outputs.append(path)
        print(f"Out: {path}")


def _same_path(a: Path, b: Path) -> bool:
    return os.path.normpath(a) == os.path.normpath(b)
