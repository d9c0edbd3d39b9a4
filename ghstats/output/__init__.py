"""Output layer: diagnostics console and report rendering."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .render import REPORT_TEMPLATE, ReportTemplate, render_report, render_to_string

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
    "Style",
    "REPORT_TEMPLATE",
    "ReportTemplate",
    "render_report",
    "render_to_string",
]
