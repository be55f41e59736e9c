"""Command-line entry point.

Usage: rescompiler <manifest.rc.json> [output-dir]
"""

import sys
from pathlib import Path

from . import __version__
from .compiler import compile_manifest
from .errors import (
    AssetNotFound,
    CompilerIOError,
    ConfigError,
    InputDirectoryMissing,
    ManifestParseError,
    ResourceCompilerError,
    UsageError,
)

USAGE = "usage: rescompiler <manifest.rc.json> [output-dir]"

EXIT_OK = 0
EXIT_NO_ARGS = 1
EXIT_BAD_EXTENSION = 2
EXIT_NO_INPUT_DIR = 3
EXIT_ASSET_NOT_FOUND = 4
EXIT_PARSE_ERROR = 5
EXIT_IO_ERROR = 6

_EXIT_CODES: dict[type[ResourceCompilerError], int] = {
    InputDirectoryMissing: EXIT_NO_INPUT_DIR,
    AssetNotFound: EXIT_ASSET_NOT_FOUND,
    ManifestParseError: EXIT_PARSE_ERROR,
    ConfigError: EXIT_PARSE_ERROR,
    CompilerIOError: EXIT_IO_ERROR,
}


def check_manifest_argument(path: Path) -> None:
    """Root manifests end in ``.json`` or carry ``.rc`` in their file name."""
    if not path.suffix or (path.suffix != ".json" and ".rc" not in path.name):
        raise UsageError("The 1st argument doesn't have an extension: .rc.json")


def main(argv: list[str] | None = None) -> int:
    """Run the compiler and return the process exit code."""
    args = sys.argv[1:] if argv is None else argv

    if not args:
        print(
            "ERROR: No valid arguments found. Please pass at least 1 argument "
            "to run the resource compiler.",
            file=sys.stderr,
        )
        print(USAGE, file=sys.stderr)
        return EXIT_NO_ARGS

    if args[0] in ("-h", "--help"):
        print(USAGE)
        return EXIT_OK
    if args[0] == "--version":
        print(__version__)
        return EXIT_OK

    manifest_path = Path(args[0])
    output_dir = args[1] if len(args) > 1 else None

    try:
        check_manifest_argument(manifest_path)
    except UsageError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_BAD_EXTENSION

    try:
        compile_manifest(manifest_path, output_dir)
    except ResourceCompilerError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return _EXIT_CODES.get(type(e), EXIT_IO_ERROR)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
