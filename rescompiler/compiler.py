"""Top-level compile pipeline."""

import logging
from pathlib import Path

from .codegen.processor import CompileResult, ResourceProcessor
from .config import CompilerConfig
from .errors import CompilerIOError, InputDirectoryMissing
from .manifest.loader import ManifestLoader
from .output.cleaner import DirectoryCleaner

logger = logging.getLogger(__name__)


def compile_manifest(
    manifest_path: Path | str,
    output_dir: Path | str | None = None,
    config: CompilerConfig | None = None,
) -> CompileResult:
    """
    Clean the output tree, then generate every file for the manifest tree.

    Args:
        manifest_path: Root manifest. Its directory is the resource root.
        output_dir: Output root. Defaults to the resource root.
        config: Prebuilt configuration; derived from the paths when omitted.
    """
    if config is None:
        config = CompilerConfig.for_manifest(manifest_path, output_dir)

    if not config.resource_root.is_dir():
        raise InputDirectoryMissing(config.resource_root)

    try:
        config.output_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CompilerIOError(config.output_root, e.strerror or str(e)) from e
    DirectoryCleaner(config).clean()

    loader = ManifestLoader(config)
    root_path = config.resource_root / Path(manifest_path).name
    # the root line echoes the path as the caller spelled it
    resource = loader.load(manifest_path)

    result = ResourceProcessor(config, loader=loader).process(resource)
    result.manifests.insert(0, loader.manifest_path(root_path))
    logger.info("Compiled %s into %s", resource.name, config.output_root)
    return result
