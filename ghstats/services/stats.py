from __future__ import annotations

from pathlib import Path
from typing import TextIO

from ghstats.core.config import ColorMode, Config
from ghstats.core.errors import AppError
from ghstats.core.result import Err, Ok, Result
from ghstats.git.remotes import GitRemoteLister, RemoteLister, resolve_remote
from ghstats.github.http import HttpClient, RealHttpClient
from ghstats.github.model import Report
from ghstats.github.releases import fetch_report, releases_url
from ghstats.output.console import ConsoleProtocol
from ghstats.output.errors import print_advisories
from ghstats.output.render import render_report


class StatsService:
    """Resolve the project's remote, fetch its releases, render the report.

    Stages run strictly in sequence; the first failure stops the pipeline.
    Remote advisories are printed to the console as they are found.
    """

    def __init__(
        self,
        *,
        config: Config,
        console: ConsoleProtocol,
        lister: RemoteLister | None = None,
        http: HttpClient | None = None,
    ) -> None:
        self._config = config
        self._console = console
        self._lister = lister or GitRemoteLister(timeout=config.remotes.timeout)
        self._http = http or RealHttpClient(
            timeout=config.github.timeout,
            token=config.github.token,
        )

    def collect(self, path: Path) -> Result[Report, AppError]:
        """Resolve and fetch, without rendering."""
        resolution = resolve_remote(
            path,
            self._lister,
            host=self._config.github.host,
            preferred=self._config.remotes.preferred,
        )
        print_advisories(resolution.warnings, self._console)
        if isinstance(resolution.result, Err):
            return resolution.result

        coordinate = resolution.result.value
        self._console.info(f"using remote {resolution.remote_name!r}: {coordinate.slug}")

        api_url = self._config.github.api_url
        self._console.info(f"GET {releases_url(coordinate, api_url)}")
        fetched = fetch_report(self._http, coordinate, api_url)
        if isinstance(fetched, Ok):
            self._console.info(f"{len(fetched.value.releases)} release(s)")
        return fetched

    def show(self, path: Path, stream: TextIO, color: ColorMode) -> Result[Report, AppError]:
        collected = self.collect(path)
        if isinstance(collected, Err):
            return collected

        written = render_report(collected.value, stream, color)
        if isinstance(written, Err):
            return written
        return collected
