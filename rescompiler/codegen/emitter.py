"""Byte-array and extern-declaration emission for leaf assets."""

import logging
from dataclasses import dataclass
from pathlib import Path

from ..errors import AssetNotFound, CompilerIOError

HEADER_BANNER = "// Auto-generated resource file. Do not edit.\n\n#pragma once\n\n"


@dataclass(frozen=True)
class EmittedContent:
    """Source and header text for one embedded asset."""
    source: str
    header: str


class ContentEmitter:
    """Turns a file into a C byte array plus its extern declarations."""

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    def emit(self, path: Path, name: str) -> EmittedContent:
        """
        Embed the raw bytes of ``path`` under the symbol ``name``.

        Raises:
            AssetNotFound: ``path`` does not exist or is not a regular file.
        """
        if not path.is_file():
            raise AssetNotFound(path, name)

        try:
            data = path.read_bytes()
        except OSError as e:
            raise CompilerIOError(path, e.strerror or str(e)) from e

        self.logger.debug("Embedding %s as %s (%d bytes)", path, name, len(data))
        return EmittedContent(
            source=self.render_source(name, data),
            header=self.render_header(name),
        )

    @staticmethod
    def render_source(name: str, data: bytes) -> str:
        """Array definition with every byte as an unsigned decimal, plus its length."""
        values = "".join(f"{byte}," for byte in data)
        return (
            f"const char {name}[] = {{{values}\n}};\n"
            f"const size_t {name}_len = sizeof({name});\n"
        )

    @staticmethod
    def render_header(name: str) -> str:
        """C-linkage declarations usable from both C and C++."""
        return (
            "\n#if __cplusplus\n"
            'extern "C" {\n'
            "#endif\n"
            f"extern const char {name}[];\n"
            f"extern const size_t {name}_len;\n"
            "#if __cplusplus\n"
            "}\n"
            "#endif\n"
        )


def render_dependencies(dependencies: list[str]) -> str:
    """External dependencies as angle-bracket includes."""
    return "".join(f"#include <{dependency}>\n" for dependency in dependencies)


def render_internal_include(header_path: str) -> str:
    """Include of a header generated for a nested manifest."""
    return f'#include "{header_path}"\n'


def wrap_entry_namespace(header: str, namespace: str) -> str:
    """Wrap one entry's declarations in a namespace visible only to C++."""
    if not namespace:
        return header
    return (
        "\n#if __cplusplus\n"
        f"namespace {namespace} {{\n"
        "#endif\n"
        f"{header}"
        "\n#if __cplusplus\n"
        "};\n"
        "#endif\n"
    )


def wrap_resource_namespace(body: str, namespace: str) -> str:
    """Wrap a whole header body in the resource-level namespace."""
    if not namespace:
        return body
    return (
        "#if __cplusplus\n"
        f"namespace {namespace}\n"
        "{\n"
        "#endif\n"
        f"{body}"
        "#if __cplusplus\n"
        "};\n"
        "#endif\n"
    )
