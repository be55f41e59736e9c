"""Removal of stale generated files."""

import logging
from pathlib import Path

from ..config import CompilerConfig
from ..errors import CompilerIOError


class DirectoryCleaner:
    """Deletes previously generated sources and headers under the output root."""

    def __init__(self, config: CompilerConfig) -> None:
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)

    def clean(self, root: Path | None = None) -> list[Path]:
        """
        Recursively delete generated files below ``root``.

        Args:
            root: Directory to clean. Defaults to the configured output root.

        Returns:
            The deleted paths, sorted.

        Raises:
            CompilerIOError: ``root`` is missing or a file cannot be removed.
        """
        root = self.config.output_root if root is None else root
        if not root.is_dir():
            raise CompilerIOError(root, "output directory does not exist")

        stale = sorted(
            path for path in root.rglob("*")
            if path.suffix in self.config.generated_extensions and path.is_file()
        )

        for path in stale:
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as e:
                raise CompilerIOError(path, e.strerror or str(e)) from e
            self.logger.debug("Removed stale %s", path)

        return stale
