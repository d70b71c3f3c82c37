"""CLI entry point for printing a triples hierarchy."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from pydantic import ValidationError

from .models import FILTERS, HierarchyConfig, UnknownFilterSelector
from .services import HierarchyService, IngestError
from .storage import HierarchyGraphError


logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Print the class/property hierarchy of a triples file as an indented tree."
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help="Triples file to read (default: $RDF_HIERARCHY_SOURCE or ies.rdf)",
    )
    # Validated by HierarchyConfig so unknown names get the same message as the env var path.
    parser.add_argument(
        "--filter",
        dest="filter_name",
        default=None,
        help=f"Filter applied to top level items, one of [{', '.join(FILTERS)}] (default: all)",
    )
    parser.add_argument(
        "--depth",
        dest="max_depth",
        type=int,
        default=None,
        help="Maximum depth to display (default: unbounded)",
    )
    parser.add_argument(
        "--indent",
        dest="indent_width",
        type=int,
        default=None,
        help="Spaces per depth level (default: 2)",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("RDF_HIERARCHY_LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostics level written to stderr (default: WARNING)",
    )
    return parser.parse_args(argv)


def _describe(error: ValidationError) -> str:
    """Collapse pydantic errors into one line, e.g. 'max_depth: Input should be ...'."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Load the triples file and print its hierarchy."""
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = HierarchyConfig.from_env(
            source=args.source,
            filter_name=args.filter_name,
            max_depth=args.max_depth,
            indent_width=args.indent_width,
        )
    except UnknownFilterSelector as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    except ValidationError as e:
        print(f"Error: invalid configuration: {_describe(e)}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        count = HierarchyService(config).run()
    except (IngestError, HierarchyGraphError) as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    logger.info(f"Printed {count} lines")
    sys.exit(0)


if __name__ == "__main__":
    main()
