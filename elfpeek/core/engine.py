"""
elfpeek Header Engine
======================

Reads the leading bytes of a file and decodes them as an ELF64 header.

The file is opened, read once for exactly the header size, and closed
before decoding starts.  OS-level failures are wrapped in
:class:`~elfpeek.core.errors.FileUnavailable`; decoding failures
propagate unchanged from the parser.
"""

from __future__ import annotations

import os

from shared.config import ElfPeekConfig
from shared.logger import ToolLogger

from elfpeek.core.errors import FileUnavailable
from elfpeek.core.models import ElfHeader
from elfpeek.parsers.elf_header import ELF64_HEADER_SIZE, ElfHeaderParser


class HeaderEngine:
    """Load and decode the ELF header of a file on disk.

    Usage::

        engine = HeaderEngine()
        header = engine.inspect("/usr/bin/true")
        print(header.e_type)
    """

    def __init__(
        self,
        config: ElfPeekConfig | None = None,
        logger: ToolLogger | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            config: Tool configuration.  Defaults are used if not provided.
            logger: Logger instance.  A new one is created if not provided.
        """
        self._config: ElfPeekConfig = config or ElfPeekConfig()
        self._logger: ToolLogger = logger or ToolLogger(
            "readelf.engine",
            log_level=self._config.global_settings.log_level,
        )

    def read_header_bytes(self, path: str | os.PathLike[str]) -> bytes:
        """Return at most :data:`ELF64_HEADER_SIZE` bytes from *path*.

        Raises:
            FileUnavailable: The file could not be opened or read.
        """
        try:
            with open(path, "rb") as fh:
                data = fh.read(ELF64_HEADER_SIZE)
        except OSError as exc:
            raise FileUnavailable(path, exc) from exc
        self._logger.debug(
            "Read %d of %d header bytes from %s",
            len(data), ELF64_HEADER_SIZE, os.fspath(path),
            bytes_read=len(data),
        )
        return data

    def inspect(self, path: str | os.PathLike[str]) -> ElfHeader:
        """Read and decode the ELF64 header of *path*.

        Raises:
            FileUnavailable: The file could not be opened or read.
            TruncatedInput: The file is shorter than the header.
            NotAnElfFile: The magic signature does not match.
        """
        with self._logger.operation("read_header"), self._logger.timed(
            f"header decode of {os.fspath(path)}"
        ):
            data = self.read_header_bytes(path)
            header = ElfHeaderParser(data).parse()
            self._logger.debug(
                "Decoded %s %s header, type %s",
                header.e_ident.ei_class.display,
                header.e_ident.ei_data.display,
                header.e_type.display,
                e_type=header.e_type.raw,
                e_machine=header.e_machine,
            )
        return header
