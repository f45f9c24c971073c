"""
elfpeek Data Models
====================

Pydantic models for the decoded ELF64 file header.  Every model is
frozen: a header is built once from a byte buffer and never mutated.
All values are copied out of the input buffer, so the buffer may be
discarded as soon as parsing returns.

References:
    - TIS Committee. (1995). Executable and Linkable Format (ELF) Specification.
    - System V Application Binary Interface, Edition 4.1.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class FieldValue(BaseModel):
    """A decoded enumerated header field.

    Attributes:
        raw: The integer stored in the file.
        name: Symbolic constant name (``ELFCLASS64``, ``ET_EXEC``,
            ``PROCESSOR_SPECIFIC``) or ``UNKNOWN``.
        display: The string shown in the report.
    """

    model_config = ConfigDict(frozen=True)

    raw: int
    name: str
    display: str

    @property
    def known(self) -> bool:
        return self.name != "UNKNOWN"

    def __str__(self) -> str:
        return self.display


class ElfIdent(BaseModel):
    """The 16-byte identification block (``e_ident``).

    Attributes:
        raw: All 16 identification bytes, padding included.
        ei_class: File class (ELF32 / ELF64).
        ei_data: Data encoding (byte order).
        ei_version: Identification version.
        ei_osabi: Target OS / ABI.
        ei_abiversion: ABI version, shown as-is.
    """

    model_config = ConfigDict(frozen=True)

    raw: bytes = Field(min_length=16, max_length=16)
    ei_class: FieldValue
    ei_data: FieldValue
    ei_version: FieldValue
    ei_osabi: FieldValue
    ei_abiversion: int = Field(ge=0, le=0xFF)

    @property
    def magic(self) -> bytes:
        return self.raw[:4]

    @field_serializer("raw")
    def serialize_raw(self, raw: bytes) -> str:
        return raw.hex(" ")


class ElfHeader(BaseModel):
    """A decoded ELF64 file header (``Elf64_Ehdr``)."""

    model_config = ConfigDict(frozen=True)

    e_ident: ElfIdent
    e_type: FieldValue
    e_machine: int = Field(ge=0, le=0xFFFF)
    e_version: int = Field(ge=0, le=0xFFFFFFFF)
    e_entry: int = Field(ge=0)
    e_phoff: int = Field(ge=0)
    e_shoff: int = Field(ge=0)
    e_flags: int = Field(ge=0, le=0xFFFFFFFF)
    e_ehsize: int = Field(ge=0, le=0xFFFF)
    e_phentsize: int = Field(ge=0, le=0xFFFF)
    e_phnum: int = Field(ge=0, le=0xFFFF)
    e_shentsize: int = Field(ge=0, le=0xFFFF)
    e_shnum: int = Field(ge=0, le=0xFFFF)
    e_shstrndx: int = Field(ge=0, le=0xFFFF)
