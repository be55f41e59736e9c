"""Manifest loading."""

from .contracts import ContentEntry, Resource
from .loader import ManifestLoader

__all__ = ["ContentEntry", "Resource", "ManifestLoader"]
