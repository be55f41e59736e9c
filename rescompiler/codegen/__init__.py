"""C source/header generation."""

from .emitter import ContentEmitter, EmittedContent
from .processor import CompileResult, ResourceProcessor

__all__ = ["ContentEmitter", "EmittedContent", "CompileResult", "ResourceProcessor"]
