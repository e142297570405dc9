"""Allow ``python -m flakers`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m flakers`` behaves identically to the ``flakers`` console
script.
"""

from __future__ import annotations

from flakers.cli.app import cli

if __name__ == "__main__":
    cli()
