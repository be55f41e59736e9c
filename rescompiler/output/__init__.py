"""Output tree maintenance."""

from .cleaner import DirectoryCleaner

__all__ = ["DirectoryCleaner"]
