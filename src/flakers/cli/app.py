"""CLI application entry point for flakers.

This module is the **sole error boundary** for the entire application.
It catches :class:`~flakers.exceptions.FlakersError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — parsing and rendering are delegated to
  the core layer, stdin handling to the infrastructure layer.
* stdout carries only the markdown document; every diagnostic goes to
  the stderr console.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from flakers.cli import exit_codes
from flakers.cli.console import console, escape
from flakers.core.models import Document
from flakers.core.translator import CommitMessageTranslator
from flakers.exceptions import FlakersError, OutputWriteError
from flakers.infra.stdin_reader import read_stdin
from flakers.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    No argument is required: ``flakers < message.txt`` is the normal
    invocation.
    """
    parser = argparse.ArgumentParser(
        prog="flakers",
        description=(
            "Read a 'Flake lock file updates:' commit message on stdin and "
            "write a markdown summary with compare links to stdout."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--no-raw",
        dest="include_raw",
        action="store_false",
        help="Omit the collapsed block echoing the original message.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report skipped lines on stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------

def _report_skipped(document: Document) -> None:
    for skipped in document.skipped:
        console.print(
            f"[yellow]Skipped line {skipped.lineno}:[/yellow] "
            f"{escape(skipped.reason)}\n  [dim]{escape(skipped.text)}[/dim]"
        )
    console.print(
        f"[bold]{len(document)}[/bold] entries, "
        f"[bold]{len(document.skipped)}[/bold] skipped lines"
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, stdout: TextIO | None = None) -> int:
    """Run the flakers CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    stdout:
        Destination for the markdown document; defaults to ``sys.stdout``.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    InputReadError
        If stdin cannot be read.  Nothing is written in that case.
    OutputWriteError
        If stdout is closed early, e.g. when piped into ``head``.
    """
    args = _build_parser().parse_args(argv)

    text = read_stdin()
    translator = CommitMessageTranslator(include_raw=args.include_raw)
    document = translator.parse(text)

    if args.verbose:
        _report_skipped(document)

    output = stdout if stdout is not None else sys.stdout
    try:
        output.write(translator.render(document))
        output.flush()
    except OSError as exc:
        raise OutputWriteError(f"failed to write standard output: {exc}") from exc
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except FlakersError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
