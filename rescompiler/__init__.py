__version__ = "1.0.0"

from .codegen import CompileResult, ContentEmitter, EmittedContent, ResourceProcessor
from .compiler import compile_manifest
from .config import CompilerConfig
from .errors import (
    AssetNotFound,
    CompilerIOError,
    ConfigError,
    InputDirectoryMissing,
    ManifestParseError,
    ResourceCompilerError,
    UsageError,
)
from .manifest import ContentEntry, ManifestLoader, Resource
from .output import DirectoryCleaner

__all__ = [
    "__version__",
    "AssetNotFound",
    "CompileResult",
    "CompilerConfig",
    "CompilerIOError",
    "ConfigError",
    "ContentEmitter",
    "ContentEntry",
    "DirectoryCleaner",
    "EmittedContent",
    "InputDirectoryMissing",
    "ManifestLoader",
    "ManifestParseError",
    "Resource",
    "ResourceCompilerError",
    "ResourceProcessor",
    "UsageError",
    "compile_manifest",
]
