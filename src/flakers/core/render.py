"""Markdown rendering for parsed entries.

Every function in this module is a **pure** transformation — no I/O,
fully deterministic.  Output is GitHub-flavoured markdown meant to be
pasted into a pull request comment or a CI job summary.
"""

from __future__ import annotations

from functools import singledispatch

from flakers.core.models import AddedEntry, Document, Entry, RemovedEntry, UpdateEntry

ARROW: str = "➡️"
RAW_SUMMARY: str = "Raw output"


def _code(text: str) -> str:
    return f"`{text}`"


def _link(text: str, url: str) -> str:
    return f"[{text}]({url})"


def _sub(text: str) -> str:
    return f"<sub>({text})</sub>"


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------

@singledispatch
def render_entry(entry: Entry) -> str:
    """Render one entry as a markdown bullet (no trailing newline)."""
    raise TypeError(f"cannot render {type(entry).__name__}")


@render_entry.register
def _render_update(entry: UpdateEntry) -> str:
    old, new = entry.old.flake_ref, entry.new.flake_ref
    name = _link(_code(entry.name), entry.source_url)
    compare_url = entry.compare_url
    if compare_url is not None:
        revisions = _link(
            f"{_code(old.short_commit)} {ARROW} {_code(new.short_commit)}",
            compare_url,
        )
    else:
        # Moved to another repository: no single compare view exists.
        revisions = (
            f"{_link(_code(old.short_commit), old.commit_url)} {ARROW} "
            f"{_link(_code(new.short_commit), new.commit_url)}"
        )
    dates = _sub(f"{entry.old.date} to {entry.new.date}")
    return f"- Updated input {name}: {revisions} {dates}"


@render_entry.register
def _render_added(entry: AddedEntry) -> str:
    if entry.source is None:
        return f"- Added input {_code(entry.name)} (follows {_code(entry.follows or '')})"
    flake_ref = entry.source.flake_ref
    name = _link(_code(entry.name), flake_ref.repo_url)
    return (
        f"- Added input {name}: "
        f"{_link(_code(flake_ref.short_commit), flake_ref.commit_url)} "
        f"{_sub(entry.source.date)}"
    )


@render_entry.register
def _render_removed(entry: RemovedEntry) -> str:
    return f"- Removed input {_code(entry.name)}"


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

def _fence_for(text: str) -> str:
    """Return a backtick fence longer than any run inside *text*."""
    longest = run = 0
    for char in text:
        run = run + 1 if char == "`" else 0
        longest = max(longest, run)
    return "`" * max(3, longest + 1)


def render_raw_block(raw: str) -> str:
    """Wrap *raw* in a collapsed ``<details>`` block with a code fence."""
    fence = _fence_for(raw)
    body = raw if raw.endswith("\n") else raw + "\n"
    return (
        f"<details><summary>{RAW_SUMMARY}</summary><p>\n"
        f"\n{fence}\n{body}{fence}\n"
        f"\n</p></details>\n"
    )


def render_document(document: Document, *, include_raw: bool = True) -> str:
    """Render *document* as markdown.

    Returns an empty string when the document has no entries, so that
    an unrecognised message never produces a stray raw block.  The
    result is newline-terminated otherwise.
    """
    if not document:
        return ""
    bullets = "".join(f"{render_entry(entry)}\n" for entry in document.entries)
    if not include_raw:
        return bullets
    return f"{render_raw_block(document.raw)}\n{bullets}"
