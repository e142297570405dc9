"""Read the whole of standard input as UTF-8 text.

The commit message is read in one go; there is no streaming and no
partial result.  A failure anywhere in the read means nothing is
rendered.
"""

from __future__ import annotations

import sys
from typing import BinaryIO

from flakers.exceptions import InputReadError

ENCODING: str = "utf-8-sig"
"""UTF-8, dropping a leading byte-order mark if present."""


def read_stdin(stream: BinaryIO | None = None) -> str:
    """Return the full contents of *stream* (default: ``sys.stdin.buffer``).

    Bytes are decoded strictly as UTF-8; a leading byte-order mark is
    dropped.

    Raises
    ------
    InputReadError
        If the stream cannot be read or is not valid UTF-8.
    """
    if stream is None:
        if sys.stdin is None:
            raise InputReadError(
                "standard input is not available",
                hint="Pipe the commit message in, e.g. git log -1 --format=%b | flakers",
            )
        stream = getattr(sys.stdin, "buffer", None)
        if stream is None:
            raise InputReadError(
                "standard input is a text stream without a byte buffer",
            )

    try:
        data = stream.read()
    except OSError as exc:
        raise InputReadError(f"failed to read standard input: {exc}") from exc

    try:
        return data.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise InputReadError(
            f"standard input is not valid UTF-8 (byte {exc.start})",
        ) from exc
