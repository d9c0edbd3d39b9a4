"""Resolve the GitHub coordinate of a local git checkout.

``git remote -v`` prints one line per remote and direction:

    origin	git@github.com:cassava/repoctl.git (fetch)
    origin	git@github.com:cassava/repoctl.git (push)

Lines mentioning the host marker are matched against ``REMOTE_PATTERNS``.
Lines that mention the host but match no pattern become ``ParseWarning``
advisories. When several remotes parse, the preferred remote ("origin") wins;
otherwise the lexicographically first name is used and an
``AmbiguousRemoteWarning`` is recorded.

Usage:
    resolution = resolve_remote(Path.cwd())
    for warning in resolution.warnings:
        console.warning(str(warning))
    match resolution.result:
        case Ok(coordinate):
            print(coordinate.slug)
        case Err(error):
            ...
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from ghstats.core.config import DEFAULT_HOST, DEFAULT_PREFERRED_REMOTE, DEFAULT_TIMEOUT_SECONDS
from ghstats.core.errors import ExecutionError, NoRemoteFoundError, ResolveError
from ghstats.core.result import Err, Ok, Result
from ghstats.github.model import RepositoryCoordinate
from ghstats.platform.process import run as run_process

__all__ = [
    "REMOTE_PATTERNS",
    "AmbiguousRemoteWarning",
    "GitRemoteLister",
    "ParseWarning",
    "RemoteAdvisory",
    "RemoteCandidate",
    "RemoteLister",
    "RemotePattern",
    "RemoteResolution",
    "choose_candidate",
    "parse_remote_lines",
    "parse_remote_url",
    "resolve_remote",
]


@dataclass(frozen=True, slots=True)
class RemotePattern:
    """One accepted remote URL format.

    The regex must define ``host``, ``owner`` and ``repo`` groups and is
    matched against the URL field of a remote line (direction suffix removed).
    """

    name: str
    regex: re.Pattern[str]

    def match(self, url: str) -> tuple[str, RepositoryCoordinate] | None:
        """Return the host and coordinate of url, or None."""
        m = self.regex.fullmatch(url)
        if m is None:
            return None
        return m.group("host"), RepositoryCoordinate(owner=m.group("owner"), name=m.group("repo"))


_SEGMENT = r"[A-Za-z0-9_.-]+"

REMOTE_PATTERNS: tuple[RemotePattern, ...] = (
    RemotePattern(
        "scp",
        re.compile(rf"git@(?P<host>[^:/\s]+):(?P<owner>{_SEGMENT})/(?P<repo>{_SEGMENT}?)\.git"),
    ),
    RemotePattern(
        "http",
        re.compile(
            rf"https?://(?P<host>[^/\s]+)/(?P<owner>{_SEGMENT})/(?P<repo>{_SEGMENT}?)\.git"
        ),
    ),
    RemotePattern(
        "ssh",
        re.compile(
            rf"ssh://git@(?P<host>[^/\s]+)/(?P<owner>{_SEGMENT})/(?P<repo>{_SEGMENT}?)\.git"
        ),
    ),
)

# "<url>" optionally followed by " (fetch)" / " (push)"
_DIRECTION_SUFFIX = re.compile(r"\s*(\([^)]*\))?\s*$")


@dataclass(frozen=True, slots=True)
class RemoteCandidate:
    remote_name: str
    coordinate: RepositoryCoordinate
    url: str


@dataclass(frozen=True, slots=True)
class ParseWarning:
    """A remote line mentions the host but its URL is not recognized."""

    line: str

    def __str__(self) -> str:
        return f"could not parse remote line: {self.line!r}"


@dataclass(frozen=True, slots=True)
class AmbiguousRemoteWarning:
    """Several remotes matched and none is the preferred one."""

    chosen: str
    candidates: tuple[str, ...]

    def __str__(self) -> str:
        others = ", ".join(self.candidates)
        return f"multiple GitHub remotes ({others}), using {self.chosen!r}"


type RemoteAdvisory = ParseWarning | AmbiguousRemoteWarning


@dataclass(frozen=True, slots=True)
class RemoteResolution:
    """Outcome of resolution: a fatal result plus non-fatal advisories.

    Attributes:
        result: Ok(coordinate) or Err(ExecutionError | NoRemoteFoundError)
        warnings: Advisories collected along the way, in order
        remote_name: Name of the remote the coordinate came from
    """

    result: Result[RepositoryCoordinate, ResolveError]
    warnings: tuple[RemoteAdvisory, ...] = field(default_factory=tuple)
    remote_name: str | None = None


@runtime_checkable
class RemoteLister(Protocol):
    """Produces the text of ``git remote -v`` for a directory."""

    def list_remotes(self, path: Path) -> Result[str, ExecutionError]: ...


class GitRemoteLister:
    """Lists remotes by running git in the target directory."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self.timeout = timeout

    def list_remotes(self, path: Path) -> Result[str, ExecutionError]:
        cmd = ["git", "remote", "-v"]
        result = run_process(cmd, cwd=path, timeout=self.timeout)
        match result:
            case Err(e):
                return Err(
                    ExecutionError(
                        command=" ".join(cmd),
                        message=e.message,
                        returncode=e.returncode,
                    )
                )
            case Ok(stdout):
                return Ok(stdout)


def _match_url(
    url: str, patterns: tuple[RemotePattern, ...]
) -> tuple[str, RepositoryCoordinate] | None:
    for pattern in patterns:
        found = pattern.match(url)
        if found is not None:
            return found
    return None


def parse_remote_url(
    url: str,
    host: str = DEFAULT_HOST,
    patterns: tuple[RemotePattern, ...] = REMOTE_PATTERNS,
) -> RepositoryCoordinate | None:
    """Match a URL against the known formats, first match wins.

    The URL's host must contain the host marker; an owner or repository
    that merely mentions it does not count.
    """
    found = _match_url(url, patterns)
    if found is None or host not in found[0]:
        return None
    return found[1]


def parse_remote_lines(
    output: str,
    host: str = DEFAULT_HOST,
    patterns: tuple[RemotePattern, ...] = REMOTE_PATTERNS,
) -> tuple[dict[str, RemoteCandidate], list[ParseWarning]]:
    """Parse ``git remote -v`` output into candidates keyed by remote name.

    A later line for the same remote replaces the earlier one. Lines whose
    URL parses but points at another host are skipped without a warning.
    """
    candidates: dict[str, RemoteCandidate] = {}
    warnings: list[ParseWarning] = []

    for raw in output.splitlines():
        line = raw.rstrip()
        if not line.strip() or host not in line:
            continue

        name, sep, rest = line.partition("\t")
        url = _DIRECTION_SUFFIX.sub("", rest)
        found = _match_url(url, patterns) if sep and name else None
        if found is None:
            warnings.append(ParseWarning(line))
            continue

        url_host, coordinate = found
        if host not in url_host:
            continue

        candidates[name] = RemoteCandidate(remote_name=name, coordinate=coordinate, url=url)

    return candidates, warnings


def choose_candidate(
    candidates: dict[str, RemoteCandidate],
    host: str = DEFAULT_HOST,
    preferred: str = DEFAULT_PREFERRED_REMOTE,
) -> tuple[Result[RemoteCandidate, NoRemoteFoundError], AmbiguousRemoteWarning | None]:
    """Pick the authoritative candidate.

    Returns:
        The chosen candidate (or NoRemoteFoundError) and an optional
        ambiguity advisory.
    """
    if not candidates:
        return Err(NoRemoteFoundError(host=host)), None

    if len(candidates) == 1:
        return Ok(next(iter(candidates.values()))), None

    if preferred in candidates:
        return Ok(candidates[preferred]), None

    names = tuple(sorted(candidates))
    chosen = names[0]
    return Ok(candidates[chosen]), AmbiguousRemoteWarning(chosen=chosen, candidates=names)


def resolve_remote(
    path: Path,
    lister: RemoteLister | None = None,
    *,
    host: str = DEFAULT_HOST,
    preferred: str = DEFAULT_PREFERRED_REMOTE,
    patterns: tuple[RemotePattern, ...] = REMOTE_PATTERNS,
) -> RemoteResolution:
    """Resolve the single GitHub coordinate of the checkout at path."""
    lister = lister or GitRemoteLister()

    listed = lister.list_remotes(path)
    if isinstance(listed, Err):
        return RemoteResolution(result=listed)

    candidates, parse_warnings = parse_remote_lines(listed.value, host, patterns)
    warnings: list[RemoteAdvisory] = list(parse_warnings)

    chosen, ambiguity = choose_candidate(candidates, host, preferred)
    if ambiguity is not None:
        warnings.append(ambiguity)

    match chosen:
        case Err() as failed:
            return RemoteResolution(
                result=failed,
                warnings=tuple(warnings),
            )
        case Ok(candidate):
            return RemoteResolution(
                result=Ok(candidate.coordinate),
                warnings=tuple(warnings),
                remote_name=candidate.remote_name,
            )
