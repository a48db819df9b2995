"""Wren CLI: inspect the template hierarchy for a hand-built request.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"

Example::

    wren resolve --single --singular --post-type post --post-name hello-world
"""

import argparse
import logging
import sys

# Flag -> RequestContext field
FLAG_OPTIONS: tuple[tuple[str, str], ...] = (
    ("--embed", "is_embed"),
    ("--404", "is_404"),
    ("--search", "is_search"),
    ("--front-page", "is_front_page"),
    ("--home", "is_home"),
    ("--post-type-archive", "is_post_type_archive"),
    ("--tax", "is_tax"),
    ("--attachment", "is_attachment"),
    ("--single", "is_single"),
    ("--page", "is_page"),
    ("--singular", "is_singular"),
    ("--category", "is_category"),
    ("--tag", "is_tag"),
    ("--author", "is_author"),
    ("--date", "is_date"),
    ("--archive", "is_archive"),
)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren: template hierarchy resolution.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    subparsers = parser.add_subparsers(dest="command")

    # -- wren resolve -----------------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve", help="Print the candidate templates for a request"
    )
    flags = resolve_parser.add_argument_group("classification")
    for option, dest in FLAG_OPTIONS:
        flags.add_argument(option, dest=dest, action="store_true")

    obj = resolve_parser.add_argument_group("queried object")
    obj.add_argument("--id", type=int, default=0, help="Post, user or term id")
    obj.add_argument("--post-type", default="", help="Post type of the queried post")
    obj.add_argument("--post-name", default="", help="Slug of the queried post")
    obj.add_argument("--mime-type", default="", help="Mime type (makes the object an attachment)")
    obj.add_argument("--term-slug", default="", help="Slug (makes the object a term)")
    obj.add_argument("--taxonomy", default="", help="Taxonomy of the queried term")
    obj.add_argument("--user-nicename", default="", help="Nicename (makes the object a user)")

    query = resolve_parser.add_argument_group("query")
    query.add_argument(
        "--query-post-type",
        dest="query_post_types",
        action="append",
        default=[],
        help="post_type query var (repeatable)",
    )
    query.add_argument(
        "--has-archive",
        action="store_true",
        help="The queried post type declares an archive",
    )
    query.add_argument("--pagename", default="", help="pagename query var")
    query.add_argument("--page-template", default="", help="Explicit template override")
    query.add_argument("--post-format", default="", help="Post format of the queried post")

    resolve_parser.add_argument("--extension", default="twig", help="Template file extension")
    resolve_parser.add_argument(
        "--categories",
        action="store_true",
        help="Also print the active categories",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "resolve":
        from wren.cli._resolve import run_resolve

        run_resolve(args)
