"""``wren resolve``: print the hierarchy for a context built from flags."""

import argparse

from wren.cli import FLAG_OPTIONS
from wren.config import HierarchyConfig
from wren.context import Attachment, Post, PostType, QueriedObject, RequestContext, Term, User
from wren.hierarchy import Hierarchy


def object_from_args(args: argparse.Namespace) -> QueriedObject:
    """Pick the queried-object variant implied by the given options.

    Attachment wins over term, term over user, user over post.
    """
    if args.mime_type:
        return Attachment(id=args.id, post_name=args.post_name, mime_type=args.mime_type)
    if args.term_slug:
        return Term(term_id=args.id, slug=args.term_slug, taxonomy=args.taxonomy)
    if args.user_nicename:
        return User(id=args.id, user_nicename=args.user_nicename)
    if args.post_type:
        return Post(id=args.id, post_type=args.post_type, post_name=args.post_name)
    return None


def context_from_args(args: argparse.Namespace) -> RequestContext:
    """Build a ``RequestContext`` from parsed ``wren resolve`` options."""
    flags = {dest: getattr(args, dest) for _, dest in FLAG_OPTIONS}
    post_types = tuple(args.query_post_types)
    post_type_object = None
    if post_types:
        post_type_object = PostType(name=post_types[0], has_archive=args.has_archive)
    return RequestContext(
        **flags,
        queried_object=object_from_args(args),
        query_post_types=post_types,
        post_type_object=post_type_object,
        pagename=args.pagename,
        page_template=args.page_template,
        post_format=args.post_format,
    )


def run_resolve(args: argparse.Namespace) -> None:
    """Print one candidate per line, most specific first."""
    hierarchy = Hierarchy(HierarchyConfig(extension=args.extension))
    ctx = context_from_args(args)

    if args.categories:
        active = [category.value for category in hierarchy.active_categories(ctx)]
        print("# categories: " + ", ".join([*active, "index"]))

    for name in hierarchy.resolve(ctx):
        print(name)
