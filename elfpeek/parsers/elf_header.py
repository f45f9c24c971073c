"""
ELF64 File Header Parser
=========================

Struct-based decoder for the fixed 64-byte header at the start of an
ELF64 object file.

The parser validates, in order:
    1. the buffer holds at least :data:`ELF64_HEADER_SIZE` bytes;
    2. the first four bytes are the ``\\x7fELF`` magic.

Every field is then read explicitly at its declared width with
:mod:`struct` and enumerated fields are passed through the total
decoders in :mod:`elfpeek.parsers.fields`.  Multi-byte fields use the
byte order the file declares in ``e_ident[EI_DATA]``; when that byte is
``ELFDATANONE`` or unrecognised the host byte order is used.

References:
    - TIS Committee. (1995). Tool Interface Standard (TIS) Executable and
      Linkable Format (ELF) Specification, Version 1.2.
    - System V Application Binary Interface, Edition 4.1.
"""

from __future__ import annotations

import struct

from elfpeek.core.errors import NotAnElfFile, TruncatedInput
from elfpeek.core.models import ElfHeader, ElfIdent
from elfpeek.parsers.fields import (
    EI_NIDENT,
    ELF_MAGIC,
    ELFDATA2LSB,
    ELFDATA2MSB,
    decode_class,
    decode_data_encoding,
    decode_header_type,
    decode_os_abi,
    decode_version,
)


# e_ident byte offsets
EI_MAG0: int = 0
EI_CLASS: int = 4
EI_DATA: int = 5
EI_VERSION: int = 6
EI_OSABI: int = 7
EI_ABIVERSION: int = 8
EI_PAD: int = 9

# Elf64_Ehdr after e_ident: type, machine, version, entry, phoff, shoff,
# flags, ehsize, phentsize, phnum, shentsize, shnum, shstrndx
_EHDR64_BODY: str = "HHIQQQIHHHHHH"

ELF64_HEADER_SIZE: int = EI_NIDENT + struct.calcsize("<" + _EHDR64_BODY)

_BYTE_ORDERS: dict[int, str] = {
    ELFDATA2LSB: "<",
    ELFDATA2MSB: ">",
}


class ElfHeaderParser:
    """Decode an ELF64 file header from raw bytes.

    Usage::

        header = ElfHeaderParser(raw_bytes).parse()
        print(header.e_type.display)
    """

    def __init__(self, data: bytes) -> None:
        """Initialise the parser.

        Args:
            data: At least the first 64 bytes of the file.  Extra bytes
                are ignored.
        """
        self._data: bytes = bytes(data)

    def parse(self) -> ElfHeader:
        """Validate and decode the header.

        Returns:
            A frozen :class:`ElfHeader`.

        Raises:
            TruncatedInput: Fewer than 64 bytes were supplied.
            NotAnElfFile: The magic signature does not match.
        """
        if len(self._data) < ELF64_HEADER_SIZE:
            raise TruncatedInput(ELF64_HEADER_SIZE, len(self._data))
        if self._data[EI_MAG0:EI_MAG0 + 4] != ELF_MAGIC:
            raise NotAnElfFile(self._data[EI_MAG0:EI_MAG0 + 4])

        ident = self._parse_ident()
        endian = _BYTE_ORDERS.get(ident.ei_data.raw, "=")
        (
            e_type, e_machine, e_version, e_entry,
            e_phoff, e_shoff, e_flags, e_ehsize,
            e_phentsize, e_phnum, e_shentsize, e_shnum,
            e_shstrndx,
        ) = struct.unpack_from(endian + _EHDR64_BODY, self._data, EI_NIDENT)

        return ElfHeader(
            e_ident=ident,
            e_type=decode_header_type(e_type),
            e_machine=e_machine,
            e_version=e_version,
            e_entry=e_entry,
            e_phoff=e_phoff,
            e_shoff=e_shoff,
            e_flags=e_flags,
            e_ehsize=e_ehsize,
            e_phentsize=e_phentsize,
            e_phnum=e_phnum,
            e_shentsize=e_shentsize,
            e_shnum=e_shnum,
            e_shstrndx=e_shstrndx,
        )

    def _parse_ident(self) -> ElfIdent:
        """Decode the 16-byte identification block."""
        d = self._data
        return ElfIdent(
            raw=d[:EI_NIDENT],
            ei_class=decode_class(d[EI_CLASS]),
            ei_data=decode_data_encoding(d[EI_DATA]),
            ei_version=decode_version(d[EI_VERSION]),
            ei_osabi=decode_os_abi(d[EI_OSABI]),
            ei_abiversion=d[EI_ABIVERSION],
        )


def parse_header(data: bytes) -> ElfHeader:
    """Module-level convenience wrapper around :meth:`ElfHeaderParser.parse`."""
    return ElfHeaderParser(data).parse()
