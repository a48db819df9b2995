"""Category resolvers: one pure function per hierarchy category.

Each resolver takes a ``RequestContext`` and returns that category's
bare candidate names, most specific first. Resolvers never raise:
missing or mismatched data only shortens the list.

Percent-encoded slugs get an extra, higher-priority candidate with the
decoded value, emitted only when decoding actually changes the slug::

    >>> category(RequestContext(queried_object=Term(3, "caf%C3%A9")))
    ['category-café', 'category-caf%C3%A9', 'category-3', 'category']

Extensions and extension callbacks are applied by ``wren.hierarchy``.
"""

from urllib.parse import unquote_plus

from wren.context import Attachment, Post, RequestContext, Term, User


class Override(str):
    """A candidate taken verbatim from an explicit template assignment.

    Still carries whatever file suffix it was stored with; the composer
    swaps that suffix for the configured one and validates single-item
    overrides.
    """

    __slots__ = ()


def _decoded_variants(prefix: str, value: str) -> list[str]:
    """``prefix-decoded`` (when it differs) followed by ``prefix-value``."""
    names: list[str] = []
    decoded = unquote_plus(value)
    if decoded != value:
        names.append(f"{prefix}-{decoded}")
    names.append(f"{prefix}-{value}")
    return names


def index(ctx: RequestContext) -> list[str]:
    """``[index]``, the universal fallback."""
    return ["index"]


def not_found(ctx: RequestContext) -> list[str]:
    """``[404]``"""
    return ["404"]


def archive(ctx: RequestContext) -> list[str]:
    """``[archive-{post_type}, archive]``

    The typed candidate appears only when exactly one post type is queried.
    """
    post_types = [pt for pt in ctx.query_post_types if pt]
    names: list[str] = []
    if len(post_types) == 1:
        names.append(f"archive-{post_types[0]}")
    names.append("archive")
    return names


def post_type_archive(ctx: RequestContext) -> list[str]:
    """The archive ladder, or nothing when the post type has no archive.

    Unknown post types count as having no archive.
    """
    obj = ctx.post_type_object
    if obj is None or not obj.has_archive:
        return []
    return archive(ctx)


def author(ctx: RequestContext) -> list[str]:
    """``[author-{user_nicename}, author-{id}, author]``"""
    user = ctx.resolve_object()
    names: list[str] = []
    if isinstance(user, User):
        names.append(f"author-{user.user_nicename}")
        names.append(f"author-{user.id}")
    names.append("author")
    return names


def _term_ladder(prefix: str, ctx: RequestContext) -> list[str]:
    term = ctx.resolve_object()
    names: list[str] = []
    if isinstance(term, Term) and term.slug:
        names.extend(_decoded_variants(prefix, term.slug))
        names.append(f"{prefix}-{term.term_id}")
    names.append(prefix)
    return names


def category(ctx: RequestContext) -> list[str]:
    """``[category-{decoded}, category-{slug}, category-{term_id}, category]``"""
    return _term_ladder("category", ctx)


def tag(ctx: RequestContext) -> list[str]:
    """``[tag-{decoded}, tag-{slug}, tag-{term_id}, tag]``"""
    return _term_ladder("tag", ctx)


def taxonomy(ctx: RequestContext) -> list[str]:
    """``[taxonomy-{tax}-{decoded}, taxonomy-{tax}-{slug}, taxonomy-{tax}, taxonomy]``"""
    term = ctx.resolve_object()
    names: list[str] = []
    if isinstance(term, Term) and term.slug:
        names.extend(_decoded_variants(f"taxonomy-{term.taxonomy}", term.slug))
        names.append(f"taxonomy-{term.taxonomy}")
    names.append("taxonomy")
    return names


def date(ctx: RequestContext) -> list[str]:
    """``[date]``"""
    return ["date"]


def home(ctx: RequestContext) -> list[str]:
    """``[home, index]``"""
    return ["home", "index"]


def front_page(ctx: RequestContext) -> list[str]:
    """``[front-page]``"""
    return ["front-page"]


def page(ctx: RequestContext) -> list[str]:
    """``[{override}, page-{decoded}, page-{pagename}, page-{id}, page]``

    The pagename falls back to the queried post's slug when the query var
    is empty.
    """
    names: list[str] = []
    page_id = ctx.queried_object_id
    pagename = ctx.pagename
    if not pagename and page_id:
        obj = ctx.resolve_object()
        if isinstance(obj, (Post, Attachment)):
            pagename = obj.post_name

    if ctx.page_template:
        names.append(Override(ctx.page_template))
    if pagename:
        names.extend(_decoded_variants("page", pagename))
    if page_id:
        names.append(f"page-{page_id}")
    names.append("page")
    return names


def search(ctx: RequestContext) -> list[str]:
    """``[search]``"""
    return ["search"]


def single(ctx: RequestContext) -> list[str]:
    """``[{override}, single-{type}-{decoded}, single-{type}-{name}, single-{type}, single]``

    The override is returned unvalidated; the composer drops it when it
    is not a safe relative name.
    """
    obj = ctx.resolve_object()
    names: list[str] = []
    if isinstance(obj, (Post, Attachment)) and obj.post_type:
        if ctx.page_template:
            names.append(Override(ctx.page_template))
        names.extend(_decoded_variants(f"single-{obj.post_type}", obj.post_name))
        names.append(f"single-{obj.post_type}")
    names.append("single")
    return names


def embed(ctx: RequestContext) -> list[str]:
    """``[embed-{post_type}-{post_format}, embed-{post_type}, embed]``"""
    obj = ctx.resolve_object()
    names: list[str] = []
    if isinstance(obj, (Post, Attachment)) and obj.post_type:
        if ctx.post_format:
            names.append(f"embed-{obj.post_type}-{ctx.post_format}")
        names.append(f"embed-{obj.post_type}")
    names.append("embed")
    return names


def singular(ctx: RequestContext) -> list[str]:
    """``[singular]``"""
    return ["singular"]


def attachment(ctx: RequestContext) -> list[str]:
    """``[{type}-{subtype}, {subtype}, {type}, attachment]``

    ``image/jpeg`` yields ``image-jpeg``, ``jpeg``, ``image``. A mime type
    without a subtype yields only ``{type}``.
    """
    obj = ctx.resolve_object()
    names: list[str] = []
    if isinstance(obj, Attachment) and obj.mime_type:
        mime_type, _, subtype = obj.mime_type.partition("/")
        subtype = subtype.partition("/")[0]
        if subtype:
            names.append(f"{mime_type}-{subtype}")
            names.append(subtype)
        if mime_type:
            names.append(mime_type)
    names.append("attachment")
    return names
