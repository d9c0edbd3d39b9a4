from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["RepositoryCoordinate", "Asset", "Release", "Report"]


@dataclass(frozen=True, slots=True)
class RepositoryCoordinate:
    """Owner/name pair identifying a project on GitHub."""

    owner: str
    name: str

    def __post_init__(self) -> None:
        if not self.owner or not self.name:
            raise ValueError(f"owner and name must be non-empty: {self.owner!r}/{self.name!r}")

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.slug


@dataclass(frozen=True, slots=True)
class Asset:
    name: str
    download_count: int


@dataclass(frozen=True, slots=True)
class Release:
    tag: str
    display_name: str
    # API order, kept for display
    assets: tuple[Asset, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class Report:
    """Everything the renderer needs: the coordinate and its releases."""

    coordinate: RepositoryCoordinate
    releases: tuple[Release, ...] = field(default_factory=tuple)
