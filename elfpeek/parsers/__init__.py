"""
elfpeek Parsers
================

Field decoders and the ELF64 header parser.
"""

from elfpeek.parsers.elf_header import ELF64_HEADER_SIZE, ElfHeaderParser, parse_header

__all__ = [
    "ELF64_HEADER_SIZE",
    "ElfHeaderParser",
    "parse_header",
]
