"""HTTP client abstraction for the GitHub API.

This module provides:
- HttpClient: Protocol for HTTP operations (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Canned responses for testing
"""

from __future__ import annotations

import http.client
import json
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ghstats import __version__
from ghstats.core.config import DEFAULT_TIMEOUT_SECONDS
from ghstats.core.result import Err, Ok, Result

__all__ = [
    "HttpClient",
    "HttpError",
    "RealHttpClient",
    "MockHttpClient",
]


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
        decode: True when the body arrived but was not valid JSON
    """

    url: str
    status: int
    message: str
    decode: bool = False

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations.

    Allows injecting mock clients so unit tests never hit the network.
    """

    def get_json(self, url: str) -> Result[object, HttpError]:
        """Fetch URL and parse the body as JSON (any JSON value)."""
        ...


class RealHttpClient:
    """HTTP client using urllib with the system certificate store."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = f"ghstats/{__version__}",
        token: str | None = None,
    ) -> None:
        """Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
            token: Optional GitHub token sent as a bearer credential
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.token = token
        self._ssl_context = ssl.create_default_context()

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/vnd.github+json",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(self, url: str) -> Result[bytes, HttpError]:
        """GET url and return the raw body; only HTTP errors carry a status."""
        reason: object
        try:
            req = urllib.request.Request(url, headers=self._headers())
            with urllib.request.urlopen(req, timeout=self.timeout, context=self._ssl_context) as resp:
                return Ok(resp.read())
        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=str(e.reason)))
        except urllib.error.URLError as e:
            reason = e.reason
        except TimeoutError:
            reason = "Request timed out"
        except (http.client.HTTPException, OSError, ValueError) as e:
            # IncompleteRead, BadStatusLine, reset connections, malformed URLs
            reason = str(e) or type(e).__name__
        return Err(HttpError(url=url, status=0, message=str(reason)))

    def get_json(self, url: str) -> Result[object, HttpError]:
        result = self._request(url)
        if isinstance(result, Err):
            return result

        try:
            data: object = json.loads(result.value.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(HttpError(url=url, status=0, message=f"JSON parse error: {e}", decode=True))
        return Ok(data)


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_json("https://api.github.com/repos/o/r/releases", [])
        result = client.get_json("https://api.github.com/repos/o/r/releases")
        assert result == Ok([])
    """

    def __init__(self) -> None:
        self._json_responses: dict[str, object | HttpError] = {}
        self.calls: list[str] = []

    def set_json(self, url: str, response: object | HttpError) -> None:
        """Set JSON response (or error) for URL."""
        self._json_responses[url] = response

    def get_json(self, url: str) -> Result[object, HttpError]:
        self.calls.append(url)

        if url not in self._json_responses:
            return Err(HttpError(url=url, status=404, message="Not Found (mock)"))

        response = self._json_responses[url]
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)
