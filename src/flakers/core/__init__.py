"""Core / service layer — pure parsing and rendering.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from flakers.core.models import (
    AddedEntry,
    DatedFlakeRef,
    Document,
    FlakeRef,
    FlakeRefType,
    RemovedEntry,
    SkippedLine,
    UpdateEntry,
)
from flakers.core.parser import NixLockMessageParser, parse_message
from flakers.core.protocols import EntryParser
from flakers.core.translator import CommitMessageTranslator

__all__: list[str] = [
    "AddedEntry",
    "CommitMessageTranslator",
    "DatedFlakeRef",
    "Document",
    "EntryParser",
    "FlakeRef",
    "FlakeRefType",
    "NixLockMessageParser",
    "RemovedEntry",
    "SkippedLine",
    "UpdateEntry",
    "parse_message",
]
