"""Render a release report as colored text.

The layout is Rich console markup. Each colored span is closed by a single
``[/]``. When color is off, Rich drops the markup and writes plain text:

    GitHub owner/repo
    v1.0: (First)
    <tab>bin.tar.gz: 42

Rich expands tabs to spaces, so the asset indent is written to the stream
directly and only the rest of the line goes through the console.
"""

from __future__ import annotations

import io
import re
from dataclasses import dataclass
from typing import TextIO

from rich.console import Console
from rich.errors import MarkupError
from rich.markup import escape
from rich.markup import render as render_markup

from ghstats.core.config import ColorMode
from ghstats.core.errors import OutputError
from ghstats.core.result import Err, Ok, Result
from ghstats.github.model import Report

__all__ = ["ReportTemplate", "REPORT_TEMPLATE", "render_report", "render_to_string"]

_TAG = re.compile(r"(?<!\\)\[(/?)([a-z ]*)\]")


@dataclass(frozen=True, slots=True)
class ReportTemplate:
    """Markup for the three line kinds of a report, plus the raw asset indent."""

    header: str
    release: str
    asset: str
    indent: str = "\t"

    @classmethod
    def compile(
        cls, header: str, release: str, asset: str, indent: str = "\t"
    ) -> ReportTemplate:
        """Validate the markup once, before any report is rendered.

        Raises:
            MarkupError: If a line has broken or unbalanced markup.
            KeyError: If a line uses an unknown placeholder.
        """
        template = cls(header=header, release=release, asset=asset, indent=indent)
        for line in (
            template.header_line("owner", "repo"),
            template.release_line("tag", "name"),
            template.asset_line("asset", 0),
        ):
            render_markup(line)
            opened = sum(1 for m in _TAG.finditer(line) if not m.group(1))
            closed = sum(1 for m in _TAG.finditer(line) if m.group(1))
            if opened != closed:
                raise MarkupError(f"unbalanced markup in report template: {line!r}")
        return template

    def header_line(self, owner: str, name: str) -> str:
        return self.header.format(owner=escape(owner), name=escape(name))

    def release_line(self, tag: str, name: str) -> str:
        return self.release.format(tag=escape(tag), name=escape(name))

    def asset_line(self, name: str, count: int) -> str:
        return self.asset.format(name=escape(name), count=count)


REPORT_TEMPLATE = ReportTemplate.compile(
    header="GitHub [yellow]{owner}/{name}[/]",
    release="[bold]{tag}:[/] ({name})",
    asset="[red]{name}[/]: {count}",
)


def _console_for(stream: TextIO, color: ColorMode) -> Console:
    match color:
        case ColorMode.ALWAYS:
            return Console(
                file=stream,
                force_terminal=True,
                color_system="standard",
                no_color=False,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )
        case ColorMode.NEVER:
            return Console(
                file=stream,
                force_terminal=False,
                color_system=None,
                highlight=False,
                emoji=False,
                soft_wrap=True,
            )
        case _:
            return Console(file=stream, highlight=False, emoji=False, soft_wrap=True)


def render_report(
    report: Report,
    stream: TextIO,
    color: ColorMode = ColorMode.AUTO,
    template: ReportTemplate = REPORT_TEMPLATE,
) -> Result[None, OutputError]:
    """Write report to stream, releases and assets in received order."""
    console = _console_for(stream, color)
    coordinate = report.coordinate
    try:
        console.print(template.header_line(coordinate.owner, coordinate.name))
        for release in report.releases:
            console.print(template.release_line(release.tag, release.display_name))
            for asset in release.assets:
                stream.write(template.indent)
                console.print(template.asset_line(asset.name, asset.download_count))
    except (OSError, ValueError) as e:
        return Err(OutputError(f"failed to write report: {e}"))
    return Ok(None)


def render_to_string(report: Report, color: ColorMode = ColorMode.NEVER) -> str:
    buf = io.StringIO()
    render_report(report, buf, color)
    return buf.getvalue()
