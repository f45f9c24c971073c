"""
elfpeek Output Module
======================

Text and JSON report rendering.
"""

from elfpeek.output.report import render_json, render_text, write_report

__all__ = [
    "render_json",
    "render_text",
    "write_report",
]
