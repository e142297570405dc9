"""flakers — markdown summaries of nix flake lock update commits.

Reads the ``Flake lock file updates:`` message on stdin and writes a
list of compare links on stdout.
"""

from flakers.version import __version__

__all__: list[str] = ["__version__"]
