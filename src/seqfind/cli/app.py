"""CLI application entry point and command routing for seqfind.

This module is the **sole error boundary** for the entire application.
It catches :class:`~seqfind.exceptions.SeqfindError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from seqfind.cli import exit_codes
from seqfind.cli.console import console, output
from seqfind.core.finder import find, find_all
from seqfind.core.loader import FileBackedArrayLoader
from seqfind.core.models import IntegerArray
from seqfind.core.protocols import ResourceResolver
from seqfind.exceptions import SeqfindError
from seqfind.infra.resources import (
    DirectoryResourceResolver,
    FileByteReader,
    PackageResourceResolver,
)
from seqfind.settings import Settings, Strategy
from seqfind.utils.logging import configure_root
from seqfind.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_source_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("name", help="Resource name without extension (e.g. 'numbers').")
    parser.add_argument(
        "--strategy",
        choices=[member.value for member in Strategy],
        default=None,
        help="Error-handling strategy (default: $SEQFIND_STRATEGY or 'classified').",
    )
    parser.add_argument(
        "--resource-dir",
        default=None,
        help="Directory holding resources (default: $SEQFIND_RESOURCE_DIR or bundled data).",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``seqfind load <name>``        — print the loaded array
    * ``seqfind find <name> <key>``  — print the key's position
    * ``seqfind --version``
    """
    parser = argparse.ArgumentParser(
        prog="seqfind",
        description="Look up integers in JSON array resources.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress at INFO level.",
    )
    subparsers = parser.add_subparsers(dest="command")

    load_parser = subparsers.add_parser("load", help="Load and print an integer array.")
    _add_source_options(load_parser)

    find_parser = subparsers.add_parser("find", help="Find a key in an integer array.")
    _add_source_options(find_parser)
    find_parser.add_argument("key", type=int, help="Integer to search for.")
    find_parser.add_argument(
        "--all",
        action="store_true",
        help="Report every matching position instead of the first.",
    )
    return parser


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def _build_loader(settings: Settings) -> FileBackedArrayLoader:
    """Instantiate the infra adapters selected by *settings*."""
    resolver: ResourceResolver
    if settings.resource_dir is not None:
        resolver = DirectoryResourceResolver(settings.resource_dir, settings.resource_ext)
    else:
        resolver = PackageResourceResolver(extension=settings.resource_ext)
    return FileBackedArrayLoader(resolver, FileByteReader())


def _load(loader: FileBackedArrayLoader, name: str, strategy: Strategy) -> IntegerArray:
    logger.info("Loading %r with %s strategy", name, strategy.value)
    if strategy is Strategy.RECOVER:
        return loader.load_or_empty(name)
    if strategy is Strategy.OPAQUE:
        return loader.load_opaque(name)
    return loader.load(name)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_load(args: argparse.Namespace, settings: Settings) -> int:
    array = _load(_build_loader(settings), args.name, settings.strategy)
    output.print(json.dumps(list(array)), markup=False)
    return exit_codes.SUCCESS


def _handle_find(args: argparse.Namespace, settings: Settings) -> int:
    array = _load(_build_loader(settings), args.name, settings.strategy)

    if args.all:
        positions = find_all(array, args.key)
        if not positions:
            output.print(f"{args.key} not found", markup=False)
            return exit_codes.NOT_FOUND
        joined = ", ".join(str(position) for position in positions)
        output.print(f"{args.key} found at positions {joined}", markup=False)
        return exit_codes.SUCCESS

    result = find(array, args.key)
    if not result.found:
        output.print(f"{args.key} not found", markup=False)
        return exit_codes.NOT_FOUND
    output.print(f"{args.key} found at position {result.unwrap()}", markup=False)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the seqfind CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_root(logging.INFO if args.verbose else logging.WARNING)

    settings = Settings.from_env().with_overrides(
        resource_dir=args.resource_dir,
        strategy=args.strategy,
    )

    if args.command == "load":
        return _handle_load(args, settings)
    return _handle_find(args, settings)


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
    except SeqfindError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
