"""Command line interface: sectionize an HTML fragment from a file, URL or stdin."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

from sectionize.config import (
    SECTIONIZE_ENABLE_ROOT_SECTION,
    SECTIONIZE_ID_PROPERTY_NAME,
    SECTIONIZE_PARSER,
    SECTIONIZE_RANK_PROPERTY_NAME,
)
from sectionize.exceptions import SectionizeError
from sectionize.html_parser import parse_fragment
from sectionize.html_serializer import render_nodes
from sectionize.http_utils import fetch_html
from sectionize.schemas import dump_nodes
from sectionize.sections import format_section_tree
from sectionize.sectionizer import Sectionizer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sectionize",
        description="Wrap headings and the content below them in nested <section> elements.",
    )
    parser.add_argument("file", nargs="?", help="HTML fragment file (reads stdin if omitted)")
    parser.add_argument("--url", help="Fetch the fragment from a URL instead")
    parser.add_argument(
        "--root-section",
        action=argparse.BooleanOptionalAction,
        default=SECTIONIZE_ENABLE_ROOT_SECTION,
        help="Wrap the whole output in a rank-0 root section",
    )
    parser.add_argument(
        "--rank-property",
        default=SECTIONIZE_RANK_PROPERTY_NAME,
        help="Metadata key for section ranks (default: %(default)s)",
    )
    parser.add_argument(
        "--id-property",
        default=SECTIONIZE_ID_PROPERTY_NAME,
        help="Metadata key for promoted heading ids (default: %(default)s)",
    )
    parser.add_argument(
        "--property",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Static metadata added to every section (repeatable; JSON values allowed)",
    )
    parser.add_argument(
        "--no-metadata",
        action="store_true",
        help="Do not write section metadata as HTML attributes",
    )
    parser.add_argument(
        "--format",
        choices=("html", "json", "tree"),
        default="html",
        help="Output format (default: %(default)s)",
    )
    parser.add_argument(
        "--parser",
        default=SECTIONIZE_PARSER,
        help="BeautifulSoup tree builder (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    return parser


def main(argv: list[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.file and args.url:
        parser.error("Provide either FILE or --url, not both")

    properties = {}
    for item in args.property:
        key, sep, value = item.partition("=")
        if not sep or not key:
            parser.error(f"Invalid --property {item!r}; expected KEY=VALUE")
        properties[key] = _parse_value(value)

    _configure_logging(args.verbose)
    out = stdout or sys.stdout

    try:
        sectionizer = Sectionizer(
            {
                "properties": properties,
                "enableRootSection": args.root_section,
                "rankPropertyName": args.rank_property,
                "idPropertyName": args.id_property,
            }
        )
        html = load_html(url=args.url, file_path=args.file, stdin=stdin or sys.stdin)
        nodes = parse_fragment(html, features=args.parser)
        result = sectionizer.run(nodes)
    except (SectionizeError, OSError, ValueError) as exc:
        logger.debug("sectionize failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.format == "json":
        out.write(json.dumps(dump_nodes(result), indent=2, ensure_ascii=False))
    elif args.format == "tree":
        out.write(format_section_tree(result))
    else:
        out.write(render_nodes(result, include_metadata=not args.no_metadata))
    out.write("\n")
    return 0


def load_html(*, url: str | None, file_path: str | None, stdin: TextIO) -> str:
    if url:
        return asyncio.run(fetch_html(url))
    if file_path:
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"HTML file not found: {path}")
        return path.read_text(encoding="utf-8")
    return stdin.read()


def _parse_value(value: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
