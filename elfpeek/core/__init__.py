"""
elfpeek Core Module
====================

Error taxonomy, data models and the file-reading engine.
"""

from elfpeek.core.engine import HeaderEngine
from elfpeek.core.errors import (
    ArgumentMissing,
    ElfPeekError,
    FileUnavailable,
    HeaderParseError,
    NotAnElfFile,
    TruncatedInput,
)
from elfpeek.core.models import ElfHeader, ElfIdent, FieldValue

__all__ = [
    "ArgumentMissing",
    "ElfHeader",
    "ElfIdent",
    "ElfPeekError",
    "FieldValue",
    "FileUnavailable",
    "HeaderEngine",
    "HeaderParseError",
    "NotAnElfFile",
    "TruncatedInput",
]
