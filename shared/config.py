"""
elfpeek Configuration Management
=================================

Centralized configuration for the elfpeek tools using Python dataclasses
and TOML-based persistence.

Architecture follows the Twelve-Factor App methodology for configuration
management (Wiggins, 2011), separating config from code.  The config file
location can be overridden with the ``ELFPEEK_CONFIG`` environment
variable.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"

CONFIG_ENV_VAR: str = "ELFPEEK_CONFIG"

OUTPUT_FORMATS: tuple[str, ...] = ("text", "json")


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class ReadelfConfig:
    """Configuration for the ELF header reader."""

    output_format: str = "text"


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared across elfpeek tools.

    Controls logging verbosity and the optional log file.  An empty
    ``log_file`` disables file logging.
    """

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class ElfPeekConfig:
    """Master configuration aggregating tool-specific and global settings.

    Usage:
        >>> config = ElfPeekConfig.load()                  # from default path
        >>> config = ElfPeekConfig.load("custom.toml")     # from custom path
        >>> print(config.readelf.output_format)
        'text'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    readelf: ReadelfConfig = field(default_factory=ReadelfConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> ElfPeekConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader consults ``$ELFPEEK_CONFIG`` and
        then ``config.toml`` in the project root.  Missing keys fall back
        to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`ElfPeekConfig` instance.

        Raises:
            FileNotFoundError: If the path was given explicitly (argument
                or environment variable) and does not exist.
            ValueError: If ``readelf.output_format`` is not supported.
        """
        explicit = path if path is not None else os.environ.get(CONFIG_ENV_VAR) or None
        config_path = Path(explicit) if explicit is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if explicit is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        config = cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            readelf=cls._build_section(ReadelfConfig, raw.get("readelf", {})),
        )
        if config.readelf.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output_format {config.readelf.output_format!r}; "
                f"expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        return config

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)
