"""
elfpeek -- ELF64 Header Inspector
==================================

Decodes the fixed 64-byte header of an ELF64 object file and renders it
in the format of binutils ``readelf -h``.

Capabilities:
    - Magic-signature and length validation
    - Total decoding of class, data encoding, version, OS/ABI and type
    - Text and JSON reports

References:
    - TIS Committee. (1995). ELF Specification.
"""

__version__ = "1.0.0"
__all__ = [
    "ElfHeader",
    "HeaderEngine",
    "parse_header",
    "render_text",
]

from elfpeek.core.engine import HeaderEngine
from elfpeek.core.models import ElfHeader
from elfpeek.output.report import render_text
from elfpeek.parsers.elf_header import parse_header
