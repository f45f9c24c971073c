"""
elfpeek Report Rendering
=========================

Text and JSON renderings of a decoded :class:`ElfHeader`.

The text report reproduces the layout of binutils ``readelf -h``: a
title line followed by one line per field in on-disk order, labels
padded to a fixed column.  The JSON report is the pydantic model dump.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from elfpeek.core.models import ElfHeader

_LABEL_WIDTH: int = 35


def _line(label: str, value: object) -> str:
    return f"  {label + ':':<{_LABEL_WIDTH}}{value}"


def render_text(header: ElfHeader) -> str:
    """Render *header* as a ``readelf -h`` style report.

    The result has no trailing newline.
    """
    ident = header.e_ident
    magic = "".join(f"{b:02x} " for b in ident.raw)
    lines = [
        "ELF Header:",
        f"  Magic:   {magic}",
        _line("Class", ident.ei_class),
        _line("Data", ident.ei_data),
        _line("Version", ident.ei_version),
        _line("OS/ABI", ident.ei_osabi),
        _line("ABI Version", ident.ei_abiversion),
        _line("Type", header.e_type),
        _line("Machine", header.e_machine),
        _line("Version", f"{header.e_version:#x}"),
        _line("Entry point address", f"{header.e_entry:#x}"),
        _line("Start of program headers", f"{header.e_phoff} (bytes into file)"),
        _line("Start of section headers", f"{header.e_shoff} (bytes into file)"),
        _line("Flags", f"{header.e_flags:#x}"),
        _line("Size of this header", f"{header.e_ehsize} (bytes)"),
        _line("Size of program headers", f"{header.e_phentsize} (bytes)"),
        _line("Number of program headers", header.e_phnum),
        _line("Size of section headers", f"{header.e_shentsize} (bytes)"),
        _line("Number of section headers", header.e_shnum),
        _line("Section header string table index", header.e_shstrndx),
    ]
    return "\n".join(lines)


def render_json(header: ElfHeader, path: str | None = None) -> str:
    """Render *header* as an indented JSON document.

    Args:
        header: The decoded header.
        path: Source file path, included when given.
    """
    document: dict[str, Any] = {}
    if path is not None:
        document["path"] = path
    document["header"] = header.model_dump(mode="json")
    return json.dumps(document, indent=2)


def write_report(content: str, output_path: str | Path) -> str:
    """Write a rendered report to *output_path*.

    Returns:
        The absolute path of the written file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content + "\n", encoding="utf-8")
    return str(path.resolve())
