# File: fsvisitor/cli.py

import sys
import logging
import argparse
from typing import List, Optional

from fsvisitor.core.common.enums import EntryKind
from fsvisitor.core.config.settings import settings
from fsvisitor.features.traversal.domain.models import VisitEvent
from fsvisitor.features.traversal.domain.predicates import has_extension
from fsvisitor.features.traversal.service.visitor import FileSystemVisitor

logger = logging.getLogger("fsvisitor.demo")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _log(action: str, event: VisitEvent) -> None:
    logger.info(f"{action}: {event.path}")


def build_visitor(extensions: List[str], stop_after: Optional[int]) -> FileSystemVisitor:
    """Wires console logging listeners onto a fresh visitor."""
    visitor = FileSystemVisitor(has_extension(*extensions) if extensions else None)

    visitor.on_start(lambda _: logger.info("Start"))
    visitor.on_finish(lambda _: logger.info("Finish"))
    visitor.on_entry_found(lambda e: _log("DirectoryFound", e), kind=EntryKind.DIRECTORY)
    visitor.on_filtered_entry_found(lambda e: _log("FilteredFileFound", e), kind=EntryKind.FILE)
    visitor.on_filtered_entry_found(lambda e: _log("FilteredDirectoryFound", e), kind=EntryKind.DIRECTORY)

    if stop_after is not None:
        seen = {"files": 0}

        @visitor.on_entry_found(kind=EntryKind.FILE)
        def _stop_after(event: VisitEvent) -> None:
            if seen["files"] == stop_after:
                event.stop_search = True
            seen["files"] += 1

    return visitor


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Walk a directory tree and log every notification the visitor fires."
    )
    parser.add_argument("root", help="Directory to search")
    parser.add_argument(
        "--ext",
        action="append",
        default=[],
        help="Only yield entries with this extension (repeatable, e.g. --ext .cs)"
    )
    parser.add_argument(
        "--stop-after",
        type=int,
        default=None,
        help="Stop the walk at the first file found after this many files"
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )
    args = parser.parse_args(argv)

    if args.stop_after is not None and args.stop_after < 0:
        parser.error("--stop-after must be zero or positive")

    logging.basicConfig(level=args.log_level, format=settings.LOG_FORMAT, stream=sys.stderr)

    visitor = build_visitor(args.ext, args.stop_after)

    try:
        paths = visitor.search(args.root)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid search root: {e}")
        return 1

    for path in paths:
        print(path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
