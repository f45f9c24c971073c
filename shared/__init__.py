"""
elfpeek Shared Module
=====================

Configuration, logging and console helpers shared across elfpeek tools.
"""

from shared.config import ElfPeekConfig
from shared.console import ToolConsole
from shared.logger import ToolLogger

__all__ = ["ElfPeekConfig", "ToolConsole", "ToolLogger"]
