"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
derived URLs, and document behaviour.
"""

from __future__ import annotations

import pytest

from flakers.core.models import (
    AddedEntry,
    DatedFlakeRef,
    Document,
    FlakeRef,
    FlakeRefType,
    RemovedEntry,
    UpdateEntry,
)


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------

def _ref(**overrides: object) -> FlakeRef:
    defaults: dict[str, object] = {
        "ref_type": FlakeRefType.GITHUB,
        "repo": "nixos/nixpkgs",
        "commit": "dc704e6102e76aad573f63b74c742cd96f8f1e6c",
    }
    defaults.update(overrides)
    return FlakeRef(**defaults)  # type: ignore[arg-type]


def _dated(date: str = "2025-10-02", **overrides: object) -> DatedFlakeRef:
    return DatedFlakeRef(flake_ref=_ref(**overrides), date=date)


# ---------------------------------------------------------------------------
# FlakeRef
# ---------------------------------------------------------------------------

class TestFlakeRef:
    def test_github_repo_url(self) -> None:
        assert _ref().repo_url == "https://github.com/nixos/nixpkgs"

    def test_gitlab_repo_url(self) -> None:
        ref = _ref(ref_type=FlakeRefType.GITLAB, repo="veloren/veloren")
        assert ref.repo_url == "https://gitlab.com/veloren/veloren"

    def test_short_commit_is_eight_chars(self) -> None:
        assert _ref().short_commit == "dc704e61"

    def test_short_commit_of_short_revision(self) -> None:
        assert _ref(commit="abc").short_commit == "abc"

    def test_github_commit_url(self) -> None:
        assert _ref(commit="abc").commit_url == (
            "https://github.com/nixos/nixpkgs/commit/abc"
        )

    def test_gitlab_commit_url(self) -> None:
        ref = _ref(ref_type=FlakeRefType.GITLAB, repo="a/b", commit="abc")
        assert ref.commit_url == "https://gitlab.com/a/b/-/commit/abc"

    def test_frozen(self) -> None:
        ref = _ref()
        with pytest.raises(AttributeError):
            ref.repo = "other/repo"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# UpdateEntry
# ---------------------------------------------------------------------------

class TestUpdateEntry:
    def test_revisions_and_source(self) -> None:
        entry = UpdateEntry(
            name="nixpkgs",
            old=_dated(commit="aaa"),
            new=_dated(commit="bbb"),
        )
        assert entry.old_revision == "aaa"
        assert entry.new_revision == "bbb"
        assert entry.source_url == "https://github.com/nixos/nixpkgs"

    def test_github_compare_url(self) -> None:
        entry = UpdateEntry(
            name="nixpkgs",
            old=_dated(commit="aaa"),
            new=_dated(commit="bbb"),
        )
        assert entry.compare_url == (
            "https://github.com/nixos/nixpkgs/compare/aaa...bbb"
        )

    def test_gitlab_compare_url(self) -> None:
        entry = UpdateEntry(
            name="x",
            old=_dated(ref_type=FlakeRefType.GITLAB, repo="a/b", commit="aaa"),
            new=_dated(ref_type=FlakeRefType.GITLAB, repo="a/b", commit="bbb"),
        )
        assert entry.compare_url == "https://gitlab.com/a/b/-/compare/aaa...bbb"

    def test_no_compare_url_across_repos(self) -> None:
        entry = UpdateEntry(
            name="nixpkgs",
            old=_dated(repo="nixos/nixpkgs"),
            new=_dated(repo="me/nixpkgs"),
        )
        assert entry.compare_url is None

    def test_no_compare_url_across_hosts(self) -> None:
        entry = UpdateEntry(
            name="x",
            old=_dated(repo="a/b"),
            new=_dated(ref_type=FlakeRefType.GITLAB, repo="a/b"),
        )
        assert entry.compare_url is None


# ---------------------------------------------------------------------------
# AddedEntry / RemovedEntry
# ---------------------------------------------------------------------------

class TestAddedEntry:
    def test_with_source(self) -> None:
        entry = AddedEntry(name="utils", source=_dated())
        assert entry.follows is None

    def test_with_follows(self) -> None:
        entry = AddedEntry(name="a/b", follows="c/d")
        assert entry.source is None

    def test_requires_exactly_one(self) -> None:
        with pytest.raises(ValueError):
            AddedEntry(name="a")
        with pytest.raises(ValueError):
            AddedEntry(name="a", source=_dated(), follows="c/d")


class TestRemovedEntry:
    def test_frozen(self) -> None:
        entry = RemovedEntry(name="old")
        with pytest.raises(AttributeError):
            entry.name = "new"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

class TestDocument:
    def test_len(self) -> None:
        doc = Document(entries=(RemovedEntry("a"), RemovedEntry("b")))
        assert len(doc) == 2

    def test_empty_is_falsy(self) -> None:
        doc = Document(entries=())
        assert not doc
        assert len(doc) == 0

    def test_non_empty_is_truthy(self) -> None:
        assert Document(entries=(RemovedEntry("a"),))

    def test_frozen(self) -> None:
        doc = Document(entries=())
        with pytest.raises(AttributeError):
            doc.entries = ()  # type: ignore[misc]
