"""Command-line front door for dirbrowse.

Acts as a minimal non-interactive host: it creates one ``DirectoryBrowser``,
replays ``--select`` choices as accept actions, and prints the resulting
listing.
"""

from __future__ import annotations

import argparse
import dataclasses
import functools
import logging
import os
import sys
from pathlib import Path

from .actions import ActionKind, DirectiveKind
from .browser import DirectoryBrowser
from .config import load_settings
from .launcher import launch_detached
from .matching import tokenize

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(verbose: bool) -> None:
    """Attach one stderr handler to the package logger."""
    logger = logging.getLogger("dirbrowse")
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _find_index(browser: DirectoryBrowser, name: str) -> int | None:
    for idx, entry in enumerate(browser.entries):
        if entry.name == name:
            return idx
    return None


def write_output(text: str) -> None:
    """Write ``text`` to stdout, passing undecodable filename bytes through unchanged."""
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(text)
        return
    sys.stdout.flush()
    buffer.write(os.fsencode(text))
    buffer.flush()


def render_listing(browser: DirectoryBrowser, query: str = "") -> str:
    """Return display rows for entries matching ``query``, one per line."""
    tokens = tokenize(query)
    rows = [
        browser.display_text(idx)
        for idx in range(browser.entry_count())
        if not tokens or browser.matches(idx, tokens)
    ]
    return "".join(f"{row}\n" for row in rows)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and drive one browsing session.

    Without PATH the browser starts at the home directory. Each ``--select``
    accepts the named entry in the current listing; opening a file ends the
    run before the listing is printed.
    """
    parser = argparse.ArgumentParser(
        description="List a directory, descend into subdirectories, and open files with xdg-open."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to start in. Defaults to home.")
    parser.add_argument("--filter", default="", metavar="QUERY", help="Only list entries matching QUERY.")
    parser.add_argument(
        "--select",
        action="append",
        default=[],
        metavar="NAME",
        help="Accept the entry named NAME (repeatable, applied in order).",
    )
    parser.add_argument("--dry-run", action="store_true", help="Print the open command instead of running it.")
    parser.add_argument("--show-parent", action="store_true", help="List a '..' entry for the parent directory.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    settings = load_settings()
    if args.show_parent:
        settings = dataclasses.replace(settings, show_parent_entry=True)

    home_directory = Path.home
    if args.path is not None:
        start = Path(args.path).expanduser()
        if not start.is_dir():
            raise SystemExit(f"Not a directory: {start}")
        home_directory = functools.partial(Path, start.resolve())

    def print_command(working_dir: Path, command: str) -> None:
        write_output(f"{command}\n")

    browser = DirectoryBrowser(
        settings=settings,
        home_directory=home_directory,
        launch_detached=print_command if args.dry_run else launch_detached,
    )
    browser.init()
    try:
        for name in args.select:
            idx = _find_index(browser, name)
            if idx is None:
                raise SystemExit(f"No entry named {name!r} in {browser.current_root}")
            directive = browser.handle_action(ActionKind.ACCEPT, idx)
            if directive.kind is DirectiveKind.MODE_EXIT:
                return
        write_output(render_listing(browser, args.filter))
    finally:
        browser.destroy()


if __name__ == "__main__":
    main()
