"""Core translation service — commit message in, markdown out.

This is the central service class consumed by the CLI layer.  It
depends on an :class:`~flakers.core.protocols.EntryParser` injected at
construction time, so the grammar can be swapped without touching the
rendering.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``.
* Never raises on unrecognised input; an empty document renders to
  an empty string.
* Deterministic: identical input yields identical output.
"""

from __future__ import annotations

from flakers.core.models import Document
from flakers.core.parser import NixLockMessageParser
from flakers.core.protocols import EntryParser
from flakers.core.render import render_document


class CommitMessageTranslator:
    """Stateless service that turns a lock-update message into markdown.

    Parameters
    ----------
    parser:
        Any object satisfying the :class:`EntryParser` protocol.
        Defaults to :class:`NixLockMessageParser`.
    include_raw:
        Prefix the summary with the original message in a collapsed
        ``<details>`` block.
    """

    def __init__(
        self,
        parser: EntryParser | None = None,
        *,
        include_raw: bool = True,
    ) -> None:
        self._parser: EntryParser = parser if parser is not None else NixLockMessageParser()
        self._include_raw: bool = include_raw

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, text: str) -> Document:
        """Parse *text* without rendering it."""
        return self._parser.parse(text)

    def render(self, document: Document) -> str:
        return render_document(document, include_raw=self._include_raw)

    def translate(self, text: str) -> str:
        """Parse and render *text* in one step."""
        return self.render(self.parse(text))
