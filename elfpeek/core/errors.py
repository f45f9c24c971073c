"""
elfpeek Error Taxonomy
=======================

Every failure the tool can report.  Parsers and the engine raise these;
only the CLI boundary catches them and turns them into a fatal message
and a non-zero exit status.
"""

from __future__ import annotations

import os


class ElfPeekError(Exception):
    """Base class for all elfpeek failures."""

    exit_code: int = 1


class ArgumentMissing(ElfPeekError):
    """No input path was supplied on the command line."""

    exit_code = 2

    def __init__(self, argument: str = "PATH") -> None:
        self.argument = argument
        super().__init__(f"Missing argument '{argument}'")


class FileUnavailable(ElfPeekError):
    """The input file could not be opened or read.

    Attributes:
        path: The path that failed.
        os_error: The underlying :class:`OSError`.
    """

    def __init__(self, path: str | os.PathLike[str], os_error: OSError) -> None:
        self.path = os.fspath(path)
        self.os_error = os_error
        reason = os_error.strerror or str(os_error)
        super().__init__(f"Cannot read {self.path}: {reason}")


class HeaderParseError(ElfPeekError):
    """Base class for failures while decoding the ELF header."""


class TruncatedInput(HeaderParseError):
    """Fewer bytes were available than the fixed header size."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Not an ELF file: truncated header "
            f"(expected {expected} bytes, got {actual})"
        )


class NotAnElfFile(HeaderParseError):
    """The magic signature is not ``7f 45 4c 46``."""

    def __init__(self, magic: bytes = b"") -> None:
        self.magic = bytes(magic)
        super().__init__("Not an ELF file")
