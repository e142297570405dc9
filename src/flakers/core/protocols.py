"""Protocols (interfaces) consumed by the core layer.

The commit message grammar belongs to an external tool (``nix flake
update``) and may drift, so the translator depends only on this
contract and never on a concrete parser.
"""

from __future__ import annotations

from typing import Protocol

from flakers.core.models import Document


class EntryParser(Protocol):
    """Contract for commit-message grammars.

    Any object that implements :meth:`parse` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def parse(self, text: str) -> Document:
        """Parse *text* into a :class:`Document`.

        Implementations must never raise on unrecognised input: lines
        they cannot attribute to an entry are recorded in
        :attr:`Document.skipped` and otherwise ignored.  Entry order
        must match input order.
        """
        ...  # pragma: no cover
