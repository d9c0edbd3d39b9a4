"""Tests for github/releases.py and the release data model."""

from __future__ import annotations

import pytest

from ghstats.core.errors import DecodeError, NetworkError
from ghstats.core.result import Err, Ok
from ghstats.github.http import HttpError, MockHttpClient
from ghstats.github.model import Asset, Release, Report, RepositoryCoordinate
from ghstats.github.releases import decode_releases, fetch_report, releases_url

COORD = RepositoryCoordinate(owner="cassava", name="repoctl")
URL = "https://api.github.com/repos/cassava/repoctl/releases"


class TestModel:
    def test_coordinate_slug(self) -> None:
        assert COORD.slug == "cassava/repoctl"
        assert str(COORD) == "cassava/repoctl"

    @pytest.mark.parametrize(("owner", "name"), [("", "repo"), ("owner", "")])
    def test_coordinate_rejects_empty(self, owner: str, name: str) -> None:
        with pytest.raises(ValueError):
            RepositoryCoordinate(owner=owner, name=name)

    def test_coordinate_frozen(self) -> None:
        with pytest.raises(AttributeError):
            COORD.owner = "other"  # type: ignore[misc]


class TestReleasesUrl:
    def test_default_endpoint(self) -> None:
        assert releases_url(COORD) == URL

    def test_custom_api_url_trailing_slash(self) -> None:
        url = releases_url(COORD, "https://ghe.example.com/api/v3/")
        assert url == "https://ghe.example.com/api/v3/repos/cassava/repoctl/releases"


class TestDecodeReleases:
    def test_example_response(self) -> None:
        data = [
            {
                "tag_name": "v1.0",
                "name": "First",
                "assets": [{"name": "bin.tar.gz", "download_count": 42}],
            }
        ]

        assert decode_releases(data) == Ok(
            (Release(tag="v1.0", display_name="First", assets=(Asset("bin.tar.gz", 42),)),)
        )

    def test_empty_array(self) -> None:
        assert decode_releases([]) == Ok(())

    def test_order_preserved(self) -> None:
        data = [
            {"tag_name": "v3", "name": "", "assets": []},
            {"tag_name": "v1", "name": "", "assets": []},
            {"tag_name": "v2", "name": "", "assets": []},
        ]

        result = decode_releases(data)

        assert isinstance(result, Ok)
        assert [r.tag for r in result.value] == ["v3", "v1", "v2"]

    def test_null_name_and_missing_assets(self) -> None:
        result = decode_releases([{"tag_name": "v1", "name": None}])

        assert result == Ok((Release(tag="v1", display_name="", assets=()),))

    def test_extra_fields_ignored(self) -> None:
        data = [
            {
                "tag_name": "v1",
                "name": "x",
                "draft": False,
                "assets": [{"name": "a", "download_count": 1, "size": 99}],
            }
        ]
        assert isinstance(decode_releases(data), Ok)

    @pytest.mark.parametrize(
        "data",
        [
            {"message": "Not Found"},
            "text",
            [1],
            [{"name": "no tag"}],
            [{"tag_name": "v1", "name": 5}],
            [{"tag_name": "v1", "name": "", "assets": {}}],
            [{"tag_name": "v1", "name": "", "assets": [{"download_count": 1}]}],
            [{"tag_name": "v1", "name": "", "assets": [{"name": "a", "download_count": "1"}]}],
            [{"tag_name": "v1", "name": "", "assets": [{"name": "a", "download_count": -1}]}],
            [{"tag_name": "v1", "name": "", "assets": [{"name": "a", "download_count": True}]}],
        ],
    )
    def test_schema_violations(self, data: object) -> None:
        assert isinstance(decode_releases(data), Err)


class TestFetchReport:
    def test_success(self) -> None:
        http = MockHttpClient()
        http.set_json(
            URL,
            [{"tag_name": "v1.0", "name": "First", "assets": [{"name": "x", "download_count": 2}]}],
        )

        result = fetch_report(http, COORD)

        assert isinstance(result, Ok)
        assert result.value.coordinate == COORD
        assert result.value.releases[0].assets == (Asset("x", 2),)
        assert http.calls == [URL]

    def test_single_request(self) -> None:
        http = MockHttpClient()
        http.set_json(URL, [])

        fetch_report(http, COORD)

        assert len(http.calls) == 1

    def test_no_releases(self) -> None:
        http = MockHttpClient()
        http.set_json(URL, [])

        assert fetch_report(http, COORD) == Ok(Report(coordinate=COORD, releases=()))

    def test_transport_failure_is_network_error(self) -> None:
        http = MockHttpClient()
        http.set_json(URL, HttpError(url=URL, status=0, message="Connection refused"))

        result = fetch_report(http, COORD)

        assert result == Err(NetworkError(url=URL, status=0, message="Connection refused"))

    def test_http_status_is_network_error(self) -> None:
        result = fetch_report(MockHttpClient(), COORD)

        assert isinstance(result, Err)
        assert isinstance(result.error, NetworkError)
        assert result.error.status == 404

    def test_invalid_json_is_decode_error(self) -> None:
        http = MockHttpClient()
        http.set_json(URL, HttpError(url=URL, status=0, message="JSON parse error", decode=True))

        result = fetch_report(http, COORD)

        assert result == Err(DecodeError(url=URL, message="JSON parse error"))

    def test_wrong_shape_is_decode_error(self) -> None:
        http = MockHttpClient()
        http.set_json(URL, {"message": "Moved Permanently"})

        result = fetch_report(http, COORD)

        assert isinstance(result, Err)
        assert isinstance(result.error, DecodeError)
        assert "JSON array" in result.error.message
