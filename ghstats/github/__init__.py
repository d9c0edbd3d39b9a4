"""GitHub Releases API access and release data model."""

from ghstats.github.http import HttpClient, HttpError, MockHttpClient, RealHttpClient
from ghstats.github.model import Asset, Release, Report, RepositoryCoordinate
from ghstats.github.releases import decode_releases, fetch_report, releases_url

__all__ = [
    # Model
    "Asset",
    "Release",
    "Report",
    "RepositoryCoordinate",
    # HTTP
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
    # Releases
    "decode_releases",
    "fetch_report",
    "releases_url",
]
