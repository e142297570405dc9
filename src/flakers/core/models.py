"""Domain models for flakers.

All models are **frozen** dataclasses — immutable value objects with no
I/O and no dependencies on external packages.  Derived URLs are plain
string formatting over the stored fields.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

SHORT_COMMIT_LENGTH: int = 8
"""Number of leading revision characters shown in rendered output."""


# ---------------------------------------------------------------------------
# Flake references
# ---------------------------------------------------------------------------

class FlakeRefType(enum.Enum):
    """Forge hosting a flake input, keyed by its flake URL scheme."""

    GITHUB = "github"
    GITLAB = "gitlab"

    @property
    def base_url(self) -> str:
        return _BASE_URLS[self]

    @property
    def path_prefix(self) -> str:
        """Segment GitLab puts in front of ``commit``/``compare`` routes."""
        return "/-" if self is FlakeRefType.GITLAB else ""


_BASE_URLS: dict[FlakeRefType, str] = {
    FlakeRefType.GITHUB: "https://github.com",
    FlakeRefType.GITLAB: "https://gitlab.com",
}


@dataclass(frozen=True, slots=True)
class FlakeRef:
    """A pinned ``<scheme>:<owner>/<repo>/<rev>`` flake reference."""

    ref_type: FlakeRefType
    """Hosting forge."""

    repo: str
    """``owner/name`` path of the repository."""

    commit: str
    """Full revision identifier as written in the lock message."""

    @property
    def repo_url(self) -> str:
        return f"{self.ref_type.base_url}/{self.repo}"

    @property
    def short_commit(self) -> str:
        return self.commit[:SHORT_COMMIT_LENGTH]

    @property
    def commit_url(self) -> str:
        return f"{self.repo_url}{self.ref_type.path_prefix}/commit/{self.commit}"

    def same_repo(self, other: FlakeRef) -> bool:
        return self.ref_type is other.ref_type and self.repo == other.repo


@dataclass(frozen=True, slots=True)
class DatedFlakeRef:
    """A flake reference plus the ``(date)`` suffix nix prints after it."""

    flake_ref: FlakeRef
    date: str
    """Verbatim text between the parentheses, normally ``YYYY-MM-DD``."""


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class UpdateEntry:
    """One ``• Updated input 'name':`` block."""

    name: str
    old: DatedFlakeRef
    new: DatedFlakeRef

    @property
    def old_revision(self) -> str:
        return self.old.flake_ref.commit

    @property
    def new_revision(self) -> str:
        return self.new.flake_ref.commit

    @property
    def source_url(self) -> str:
        """Repository URL of the input before the update."""
        return self.old.flake_ref.repo_url

    @property
    def compare_url(self) -> str | None:
        """Compare view between both revisions, ``None`` across repositories."""
        old, new = self.old.flake_ref, self.new.flake_ref
        if not old.same_repo(new):
            return None
        return (
            f"{old.repo_url}{old.ref_type.path_prefix}"
            f"/compare/{old.commit}...{new.commit}"
        )


@dataclass(frozen=True, slots=True)
class AddedEntry:
    """One ``• Added input 'name':`` block.

    Exactly one of :attr:`source` and :attr:`follows` is set.
    """

    name: str
    source: DatedFlakeRef | None = None
    follows: str | None = None

    def __post_init__(self) -> None:
        if (self.source is None) == (self.follows is None):
            raise ValueError("AddedEntry needs exactly one of source or follows")


@dataclass(frozen=True, slots=True)
class RemovedEntry:
    """One ``• Removed input 'name'`` line."""

    name: str


Entry = Union[UpdateEntry, AddedEntry, RemovedEntry]


# ---------------------------------------------------------------------------
# Parse results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SkippedLine:
    """A line the parser could not attribute to any entry."""

    lineno: int
    """1-based line number in the input."""

    text: str
    reason: str


@dataclass(frozen=True, slots=True)
class Document:
    """Immutable, ordered collection of parsed entries.

    Entry order is input order.  ``raw`` keeps the original message so
    it can be echoed back alongside the summary.
    """

    entries: tuple[Entry, ...]
    raw: str = ""
    skipped: tuple[SkippedLine, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return len(self.entries) > 0
