"""Flake URL parsing.

Pure string handling — no I/O.  Only pinned forge references of the
form ``<scheme>:<owner>/<repo>/<rev>[?query]`` are understood; the
query string (``?shallow=1``, ``?narHash=…``) is ignored.
"""

from __future__ import annotations

from flakers.core.models import FlakeRef, FlakeRefType
from flakers.exceptions import FlakeRefError


def parse_ref_type(scheme: str) -> FlakeRefType:
    """Map a flake URL scheme to :class:`FlakeRefType`.

    Raises
    ------
    FlakeRefError
        If *scheme* is not a supported forge.
    """
    try:
        return FlakeRefType(scheme)
    except ValueError:
        raise FlakeRefError(f"unsupported flake ref type {scheme!r}") from None


def parse_flake_ref(url: str) -> FlakeRef:
    """Parse ``github:owner/repo/rev`` style *url* into a :class:`FlakeRef`.

    Raises
    ------
    FlakeRefError
        If the scheme is missing or unsupported, or the path does not
        have exactly the ``owner/repo/rev`` shape.
    """
    scheme, sep, rest = url.partition(":")
    if not sep:
        raise FlakeRefError(f"flake ref {url!r} has no scheme")
    ref_type = parse_ref_type(scheme)

    path = rest.split("?", 1)[0]
    if path.count("/") != 2:
        raise FlakeRefError(
            f"flake ref {url!r} is not of the form {scheme}:owner/repo/rev",
        )
    repo, _, commit = path.rpartition("/")
    if not commit or repo.startswith("/") or repo.endswith("/"):
        raise FlakeRefError(f"flake ref {url!r} has an empty path segment")

    return FlakeRef(ref_type=ref_type, repo=repo, commit=commit)


# ---------------------------------------------------------------------------
# Bare revisions
# ---------------------------------------------------------------------------

KNOWN_SOURCES: dict[str, tuple[FlakeRefType, str]] = {
    "nixpkgs": (FlakeRefType.GITHUB, "NixOS/nixpkgs"),
    "home-manager": (FlakeRefType.GITHUB, "nix-community/home-manager"),
    "nix-darwin": (FlakeRefType.GITHUB, "nix-darwin/nix-darwin"),
    "flake-utils": (FlakeRefType.GITHUB, "numtide/flake-utils"),
    "flake-parts": (FlakeRefType.GITHUB, "hercules-ci/flake-parts"),
    "disko": (FlakeRefType.GITHUB, "nix-community/disko"),
}
"""Well-known input names whose repository is implied by the name."""


def is_bare_revision(value: str) -> bool:
    """Return ``True`` for a revision written without any flake URL around it."""
    return bool(value) and ":" not in value and "/" not in value


def lookup_flake_ref(name: str, commit: str) -> FlakeRef:
    """Build a :class:`FlakeRef` for a bare *commit* of the input *name*.

    Only the last path segment of *name* is looked up, so a nested
    input such as ``foo/nixpkgs`` resolves like ``nixpkgs``.

    Raises
    ------
    FlakeRefError
        If *name* has no known source repository.
    """
    source = KNOWN_SOURCES.get(name.rsplit("/", 1)[-1])
    if source is None:
        raise FlakeRefError(f"no known source repository for input {name!r}")
    ref_type, repo = source
    return FlakeRef(ref_type=ref_type, repo=repo, commit=commit)
