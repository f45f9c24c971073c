"""
ELF Identification and Header Field Decoding
==============================================

Pure mapping of raw header integers to displayable values.  Decoding is
total: every value that fits in a field's width yields a
:class:`~elfpeek.core.models.FieldValue`.  Values outside a named set
decode to ``UNKNOWN`` with the display form ``Unknown(n)``, except the
file type, whose fallback is ``Unknown file type``.

Display strings follow binutils ``readelf -h``.

References:
    - TIS Committee. (1995). Tool Interface Standard (TIS) Executable and
      Linkable Format (ELF) Specification, Version 1.2.
    - Linux man page: elf(5).
"""

from __future__ import annotations

from elfpeek.core.models import FieldValue


# ---------------------------------------------------------------------------
# ELF Constants
# ---------------------------------------------------------------------------

ELF_MAGIC: bytes = b"\x7fELF"
EI_NIDENT: int = 16

# ELF Class (32-bit vs 64-bit)
ELFCLASSNONE: int = 0
ELFCLASS32: int = 1
ELFCLASS64: int = 2

_CLASS_NAMES: dict[int, tuple[str, str]] = {
    ELFCLASSNONE: ("ELFCLASSNONE", "None"),
    ELFCLASS32: ("ELFCLASS32", "ELF32"),
    ELFCLASS64: ("ELFCLASS64", "ELF64"),
}

# Data encoding (endianness)
ELFDATANONE: int = 0
ELFDATA2LSB: int = 1  # Little-endian
ELFDATA2MSB: int = 2  # Big-endian

_DATA_NAMES: dict[int, tuple[str, str]] = {
    ELFDATANONE: ("ELFDATANONE", "None"),
    ELFDATA2LSB: ("ELFDATA2LSB", "2's complement, little endian"),
    ELFDATA2MSB: ("ELFDATA2MSB", "2's complement, big endian"),
}

# Identification version
EV_NONE: int = 0
EV_CURRENT: int = 1

_VERSION_NAMES: dict[int, tuple[str, str]] = {
    EV_NONE: ("EV_NONE", "None"),
    EV_CURRENT: ("EV_CURRENT", "1 (current)"),
}

# OS / ABI
ELFOSABI_NONE: int = 0
ELFOSABI_HPUX: int = 1
ELFOSABI_NETBSD: int = 2
ELFOSABI_GNU: int = 3
ELFOSABI_SOLARIS: int = 6
ELFOSABI_AIX: int = 7
ELFOSABI_IRIX: int = 8
ELFOSABI_FREEBSD: int = 9
ELFOSABI_TRU64: int = 10
ELFOSABI_MODESTO: int = 11
ELFOSABI_OPENBSD: int = 12
ELFOSABI_ARM_AEABI: int = 64
ELFOSABI_ARM: int = 97
ELFOSABI_STANDALONE: int = 255

# Aliases
ELFOSABI_SYSV: int = ELFOSABI_NONE
ELFOSABI_LINUX: int = ELFOSABI_GNU

_OSABI_NAMES: dict[int, tuple[str, str]] = {
    ELFOSABI_NONE: ("ELFOSABI_NONE", "UNIX - System V"),
    ELFOSABI_HPUX: ("ELFOSABI_HPUX", "HP-UX"),
    ELFOSABI_NETBSD: ("ELFOSABI_NETBSD", "NetBSD"),
    ELFOSABI_GNU: ("ELFOSABI_GNU", "GNU ELF"),
    ELFOSABI_SOLARIS: ("ELFOSABI_SOLARIS", "Sun Solaris"),
    ELFOSABI_AIX: ("ELFOSABI_AIX", "IBM AIX"),
    ELFOSABI_IRIX: ("ELFOSABI_IRIX", "SGI Irix"),
    ELFOSABI_FREEBSD: ("ELFOSABI_FREEBSD", "FreeBSD"),
    ELFOSABI_TRU64: ("ELFOSABI_TRU64", "Compaq TRU64 UNIX"),
    ELFOSABI_MODESTO: ("ELFOSABI_MODESTO", "Novell Modesto"),
    ELFOSABI_OPENBSD: ("ELFOSABI_OPENBSD", "OpenBSD"),
    ELFOSABI_ARM_AEABI: ("ELFOSABI_ARM_AEABI", "ARM EABI"),
    ELFOSABI_ARM: ("ELFOSABI_ARM", "ARM"),
    ELFOSABI_STANDALONE: ("ELFOSABI_STANDALONE", "Standalone (embedded) application"),
}

# ELF type
ET_NONE: int = 0
ET_REL: int = 1   # Relocatable
ET_EXEC: int = 2  # Executable
ET_DYN: int = 3   # Shared object / PIE
ET_CORE: int = 4  # Core dump
ET_LOPROC: int = 0xFF00
ET_HIPROC: int = 0xFFFF

_ET_NAMES: dict[int, tuple[str, str]] = {
    ET_NONE: ("ET_NONE", "NONE (No file type)"),
    ET_REL: ("ET_REL", "REL (Relocatable file)"),
    ET_EXEC: ("ET_EXEC", "EXEC (Executable file)"),
    ET_DYN: ("ET_DYN", "DYN (Shared object file)"),
    ET_CORE: ("ET_CORE", "CORE (Core file)"),
}

UNKNOWN: str = "UNKNOWN"
PROCESSOR_SPECIFIC: str = "PROCESSOR_SPECIFIC"


# ---------------------------------------------------------------------------
# Decoders
# ---------------------------------------------------------------------------

def _check_width(value: int, maximum: int, field: str) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{field} value {value} does not fit in its field")


def _lookup(table: dict[int, tuple[str, str]], value: int) -> FieldValue:
    try:
        name, display = table[value]
    except KeyError:
        return FieldValue(raw=value, name=UNKNOWN, display=f"Unknown({value})")
    return FieldValue(raw=value, name=name, display=display)


def decode_class(value: int) -> FieldValue:
    """Decode ``e_ident[EI_CLASS]``."""
    _check_width(value, 0xFF, "EI_CLASS")
    return _lookup(_CLASS_NAMES, value)


def decode_data_encoding(value: int) -> FieldValue:
    """Decode ``e_ident[EI_DATA]``."""
    _check_width(value, 0xFF, "EI_DATA")
    return _lookup(_DATA_NAMES, value)


def decode_version(value: int) -> FieldValue:
    """Decode ``e_ident[EI_VERSION]``."""
    _check_width(value, 0xFF, "EI_VERSION")
    return _lookup(_VERSION_NAMES, value)


def decode_os_abi(value: int) -> FieldValue:
    """Decode ``e_ident[EI_OSABI]``.

    The fourteen values listed in the ELF specification are named; any
    other byte decodes to ``Unknown(n)``.
    """
    _check_width(value, 0xFF, "EI_OSABI")
    return _lookup(_OSABI_NAMES, value)


def decode_header_type(value: int) -> FieldValue:
    """Decode ``e_type``.

    Values 0-4 are the standard file types.  The closed range
    ``ET_LOPROC..ET_HIPROC`` is processor-specific; everything else is
    ``Unknown file type``.

    Args:
        value: The 16-bit ``e_type`` value.

    Returns:
        The decoded field.

    Raises:
        ValueError: If *value* does not fit in 16 bits.
    """
    _check_width(value, 0xFFFF, "e_type")
    if value in _ET_NAMES:
        name, display = _ET_NAMES[value]
        return FieldValue(raw=value, name=name, display=display)
    if ET_LOPROC <= value <= ET_HIPROC:
        return FieldValue(raw=value, name=PROCESSOR_SPECIFIC, display="Processor-specific")
    return FieldValue(raw=value, name=UNKNOWN, display="Unknown file type")
