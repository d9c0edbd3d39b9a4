"""Git remote discovery.

Usage:
    from ghstats.git import resolve_remote

    resolution = resolve_remote(Path.cwd())
    if isinstance(resolution.result, Ok):
        print(resolution.result.value.slug)
"""

from ghstats.git.remotes import (
    REMOTE_PATTERNS,
    AmbiguousRemoteWarning,
    GitRemoteLister,
    ParseWarning,
    RemoteAdvisory,
    RemoteCandidate,
    RemoteLister,
    RemotePattern,
    RemoteResolution,
    choose_candidate,
    parse_remote_lines,
    parse_remote_url,
    resolve_remote,
)

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
