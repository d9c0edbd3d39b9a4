"""Fetch and decode the releases of a GitHub repository.

A single GET against ``/repos/{owner}/{repo}/releases``; no retries and no
pagination. Transport and HTTP failures become ``NetworkError``; a body that
is not the expected JSON shape becomes ``DecodeError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ghstats.core.config import DEFAULT_API_URL
from ghstats.core.errors import DecodeError, FetchError, NetworkError
from ghstats.core.result import Err, Ok, Result
from ghstats.core.structured import as_obj_list, as_str_dict
from ghstats.github.model import Asset, Release, Report, RepositoryCoordinate

if TYPE_CHECKING:
    from ghstats.github.http import HttpClient

__all__ = ["RELEASES_ENDPOINT", "decode_releases", "fetch_report", "releases_url"]

RELEASES_ENDPOINT = "{api_url}/repos/{owner}/{repo}/releases"


def releases_url(coordinate: RepositoryCoordinate, api_url: str = DEFAULT_API_URL) -> str:
    return RELEASES_ENDPOINT.format(
        api_url=api_url.rstrip("/"),
        owner=coordinate.owner,
        repo=coordinate.name,
    )


def _decode_asset(obj: object, where: str) -> Result[Asset, str]:
    data = as_str_dict(obj)
    if data is None:
        return Err(f"{where}: expected an object")

    name = data.get("name")
    count = data.get("download_count")
    if not isinstance(name, str):
        return Err(f"{where}: missing asset name")
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        return Err(f"{where}: invalid download_count for {name!r}")
    return Ok(Asset(name=name, download_count=count))


def _decode_release(obj: object, where: str) -> Result[Release, str]:
    data = as_str_dict(obj)
    if data is None:
        return Err(f"{where}: expected an object")

    tag = data.get("tag_name")
    if not isinstance(tag, str):
        return Err(f"{where}: missing tag_name")

    # Draft releases may come back with a null name.
    name = data.get("name")
    if name is None:
        name = ""
    if not isinstance(name, str):
        return Err(f"{where}: invalid name for {tag!r}")

    raw_assets = as_obj_list(data.get("assets", []))
    if raw_assets is None:
        return Err(f"{where}: assets must be a list")

    assets: list[Asset] = []
    for i, raw in enumerate(raw_assets):
        decoded = _decode_asset(raw, f"{where}.assets[{i}]")
        if isinstance(decoded, Err):
            return decoded
        assets.append(decoded.value)

    return Ok(Release(tag=tag, display_name=name, assets=tuple(assets)))


def decode_releases(data: object) -> Result[tuple[Release, ...], str]:
    """Turn the decoded JSON body into releases, keeping API order.

    Returns:
        Ok(releases), or Err(message) describing the first schema violation
    """
    items = as_obj_list(data)
    if items is None:
        return Err("expected a JSON array of releases")

    releases: list[Release] = []
    for i, item in enumerate(items):
        decoded = _decode_release(item, f"releases[{i}]")
        if isinstance(decoded, Err):
            return decoded
        releases.append(decoded.value)
    return Ok(tuple(releases))


def fetch_report(
    http: HttpClient,
    coordinate: RepositoryCoordinate,
    api_url: str = DEFAULT_API_URL,
) -> Result[Report, FetchError]:
    """Fetch every release of coordinate in one request.

    Args:
        http: HTTP client to use
        coordinate: Repository to query
        api_url: API base URL

    Returns:
        Ok(Report) (possibly with no releases), or Err(NetworkError | DecodeError)
    """
    url = releases_url(coordinate, api_url)
    response = http.get_json(url)
    if isinstance(response, Err):
        e = response.error
        if e.decode:
            return Err(DecodeError(url=url, message=e.message))
        return Err(NetworkError(url=url, status=e.status, message=e.message))

    decoded = decode_releases(response.value)
    match decoded:
        case Err(message):
            return Err(DecodeError(url=url, message=message))
        case Ok(releases):
            return Ok(Report(coordinate=coordinate, releases=releases))
