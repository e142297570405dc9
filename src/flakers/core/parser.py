"""Line grammar for ``nix flake update`` commit messages.

The parser is a single forward pass over the input lines.  It never
raises on malformed input; anything it cannot attribute to an entry is
recorded as a :class:`~flakers.core.models.SkippedLine` and ignored.

Recognised shapes::

    Flake lock file updates:

    • Updated input 'nixpkgs':
        'github:nixos/nixpkgs/dc704e61…' (2025-10-02)
      → 'github:nixos/nixpkgs/2dad7af7…' (2025-10-09)
    • Added input 'utils':
        'github:numtide/flake-utils/11707dc2…' (2024-11-13)
    • Added input 'a/b':
        follows 'c/d'
    • Removed input 'old'

plus a compact single-line update form::

    nixpkgs: 'github:nixos/nixpkgs/dc704e61…' (2025-10-02) -> 'github:…' (2025-10-09)
    nixpkgs: 'a1b2c3d' (2024-01-01) -> 'd4e5f6' (2024-02-01)

A bare revision takes its repository from the other side of the arrow
when that is a flake URL, else from
:data:`~flakers.core.flake_ref.KNOWN_SOURCES` by input name.
"""

from __future__ import annotations

import re

from flakers.core.flake_ref import is_bare_revision, lookup_flake_ref, parse_flake_ref
from flakers.core.models import (
    AddedEntry,
    DatedFlakeRef,
    Document,
    Entry,
    FlakeRef,
    RemovedEntry,
    SkippedLine,
    UpdateEntry,
)
from flakers.exceptions import FlakeRefError

HEADER: str = "Flake lock file updates:"

_ARROW = r"(?:→|->)"

_HEADING_RE = re.compile(
    r"^\s*•\s*(?P<kind>Updated|Added|Removed) input '(?P<name>[^']+)':?\s*$"
)
_DATED_REF_RE = re.compile(
    rf"^\s*(?P<arrow>{_ARROW}\s*)?'(?P<url>[^']*)'\s+\((?P<date>[^)]*)\)\s*$"
)
_FOLLOWS_RE = re.compile(r"^\s*follows\s+'(?P<target>[^']*)'\s*$")
_COMPACT_RE = re.compile(
    r"^\s*(?P<name>[^\s':][^':]*?)\s*:\s*"
    r"'(?P<old_url>[^']*)'\s+\((?P<old_date>[^)]*)\)\s*"
    rf"{_ARROW}\s*"
    r"'(?P<new_url>[^']*)'\s+\((?P<new_date>[^)]*)\)\s*$"
)


class _Unrecognized(Exception):
    """Internal signal: the block at the cursor is not a valid entry.

    ``consumed`` is how many lines the caller should skip; structural
    mismatches consume only the heading so the following lines get
    their own chance to match.
    """

    def __init__(self, reason: str, consumed: int = 1) -> None:
        super().__init__(reason)
        self.reason = reason
        self.consumed = consumed


def _dated_ref(url: str, date: str, consumed: int) -> DatedFlakeRef:
    try:
        flake_ref = parse_flake_ref(url)
    except FlakeRefError as exc:
        raise _Unrecognized(str(exc), consumed) from exc
    return DatedFlakeRef(flake_ref=flake_ref, date=date)


def _compact_ref(name: str, url: str, date: str, other_url: str) -> DatedFlakeRef:
    if not is_bare_revision(url):
        return _dated_ref(url, date, 1)
    try:
        if is_bare_revision(other_url):
            flake_ref = lookup_flake_ref(name, url)
        else:
            other = parse_flake_ref(other_url)
            flake_ref = FlakeRef(ref_type=other.ref_type, repo=other.repo, commit=url)
    except FlakeRefError as exc:
        raise _Unrecognized(str(exc)) from exc
    return DatedFlakeRef(flake_ref=flake_ref, date=date)


class NixLockMessageParser:
    """Parses the message ``nix flake update --commit-lock-file`` writes.

    Stateless; one instance can parse any number of messages.
    Satisfies :class:`~flakers.core.protocols.EntryParser`.
    """

    def parse(self, text: str) -> Document:
        lines = text.splitlines()
        entries: list[Entry] = []
        skipped: list[SkippedLine] = []

        index = 0
        while index < len(lines):
            line = lines[index]
            if not line.strip() or line.strip() == HEADER:
                index += 1
                continue
            try:
                entry, consumed = self._parse_at(lines, index)
            except _Unrecognized as exc:
                skipped.append(
                    SkippedLine(lineno=index + 1, text=line, reason=exc.reason),
                )
                index += exc.consumed
                continue
            entries.append(entry)
            index += consumed

        return Document(entries=tuple(entries), raw=text, skipped=tuple(skipped))

    # ------------------------------------------------------------------
    # Block parsers
    # ------------------------------------------------------------------

    def _parse_at(self, lines: list[str], index: int) -> tuple[Entry, int]:
        """Parse the entry starting at *index*; return it and its line count."""
        line = lines[index]

        heading = _HEADING_RE.match(line)
        if heading is not None:
            name = heading["name"]
            kind = heading["kind"]
            if kind == "Removed":
                return RemovedEntry(name=name), 1
            follow_up = lines[index + 1:index + 3]
            if kind == "Updated":
                return self._parse_updated(name, follow_up)
            return self._parse_added(name, follow_up)

        compact = _COMPACT_RE.match(line)
        if compact is not None:
            name = compact["name"]
            entry = UpdateEntry(
                name=name,
                old=_compact_ref(name, compact["old_url"], compact["old_date"], compact["new_url"]),
                new=_compact_ref(name, compact["new_url"], compact["new_date"], compact["old_url"]),
            )
            return entry, 1

        raise _Unrecognized("not part of an update entry")

    def _parse_updated(self, name: str, follow_up: list[str]) -> tuple[Entry, int]:
        if len(follow_up) < 2:
            raise _Unrecognized(f"update of {name!r} is truncated")
        old = _DATED_REF_RE.match(follow_up[0])
        new = _DATED_REF_RE.match(follow_up[1])
        if old is None or old["arrow"] or new is None or not new["arrow"]:
            raise _Unrecognized(f"update of {name!r} lacks 'old' → 'new' lines")
        entry = UpdateEntry(
            name=name,
            old=_dated_ref(old["url"], old["date"], 3),
            new=_dated_ref(new["url"], new["date"], 3),
        )
        return entry, 3

    def _parse_added(self, name: str, follow_up: list[str]) -> tuple[Entry, int]:
        if not follow_up:
            raise _Unrecognized(f"addition of {name!r} is truncated")
        follows = _FOLLOWS_RE.match(follow_up[0])
        if follows is not None:
            return AddedEntry(name=name, follows=follows["target"]), 2
        source = _DATED_REF_RE.match(follow_up[0])
        if source is None or source["arrow"]:
            raise _Unrecognized(f"addition of {name!r} lacks a source line")
        return AddedEntry(name=name, source=_dated_ref(source["url"], source["date"], 2)), 2


def parse_message(text: str) -> Document:
    """Parse *text* with the default :class:`NixLockMessageParser`."""
    return NixLockMessageParser().parse(text)
