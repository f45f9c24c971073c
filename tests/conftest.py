from __future__ import annotations

import struct

import pytest


def build_header(
    *,
    ei_class: int = 2,
    ei_data: int = 1,
    ei_version: int = 1,
    ei_osabi: int = 0,
    ei_abiversion: int = 0,
    e_type: int = 2,
    e_machine: int = 62,
    e_version: int = 1,
    e_entry: int = 0x401000,
    e_phoff: int = 64,
    e_shoff: int = 8400,
    e_flags: int = 0,
    e_ehsize: int = 64,
    e_phentsize: int = 56,
    e_phnum: int = 3,
    e_shentsize: int = 64,
    e_shnum: int = 6,
    e_shstrndx: int = 5,
    magic: bytes = b"\x7fELF",
    endian: str | None = None,
) -> bytes:
    """Build a 64-byte ELF64 header; byte order follows *ei_data* unless given."""
    if endian is None:
        endian = ">" if ei_data == 2 else "<"
    ident = magic + bytes([ei_class, ei_data, ei_version, ei_osabi, ei_abiversion]) + bytes(7)
    body = struct.pack(
        endian + "HHIQQQIHHHHHH",
        e_type, e_machine, e_version, e_entry,
        e_phoff, e_shoff, e_flags, e_ehsize,
        e_phentsize, e_phnum, e_shentsize, e_shnum,
        e_shstrndx,
    )
    return ident + body


@pytest.fixture
def header_bytes() -> bytes:
    return build_header()


@pytest.fixture
def elf_file(tmp_path, header_bytes):
    path = tmp_path / "static.elf"
    # header followed by some section data, as in a real file
    path.write_bytes(header_bytes + b"\x90" * 256)
    return path


@pytest.fixture(autouse=True)
def _no_user_config(monkeypatch):
    monkeypatch.delenv("ELFPEEK_CONFIG", raising=False)


@pytest.fixture
def make_header():
    return build_header
