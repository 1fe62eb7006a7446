#!/usr/bin/env python3
"""Guidebook command line.

Commands:
    render FILE [-o OUT]      Convert a markup file to an HTML fragment
    list [--index FILE]       Print the registered guides
    serve [--host] [--port]   Run the web app (development server)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from guidebook.errors import RegistryError
from guidebook.markup import render_markup
from guidebook.registry import load_registry

logger = logging.getLogger(__name__)


def cmd_render(args: argparse.Namespace) -> int:
    path = Path(args.file)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {path}: {e}", file=sys.stderr)
        return 1

    html = render_markup(source)

    if args.output:
        out = Path(args.output)
        out.write_text(html + "\n", encoding="utf-8")
        logger.info(f"Rendered {path} -> {out} ({len(html):,} chars)")
    else:
        print(html)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    try:
        registry = load_registry(args.index)
    except RegistryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for guide in registry:
        print(f"{guide.id}\t{guide.title}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from guidebook.webapp import create_app

    app = create_app()
    app.run(debug=args.debug, host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guidebook",
        description="Render lightweight-markup guides as HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Convert a markup file to HTML")
    render.add_argument("file", help="Markup source file")
    render.add_argument("--output", "-o", help="Write HTML here instead of stdout")
    render.set_defaults(func=cmd_render)

    list_cmd = subparsers.add_parser("list", help="List registered guides")
    list_cmd.add_argument("--index", help="JSON guide index (default: built-in guides)")
    list_cmd.set_defaults(func=cmd_list)

    serve = subparsers.add_parser("serve", help="Run the web app")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=5000)
    serve.add_argument("--debug", action="store_true")
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the `guidebook` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
