"""Infrastructure layer — process I/O.

Every raw OS or codec exception must be caught here and re-raised as a
:class:`~flakers.exceptions.FlakersError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from flakers.infra.stdin_reader import read_stdin

__all__: list[str] = ["read_stdin"]
