"""Template categories and the activation order.

Each category names one rung family of the hierarchy (``page``,
``single``, ``taxonomy`` ...). Its value is the key extension callbacks
are registered under. ``GLOBAL`` is the empty key: its callbacks run
once over the fully composed list.
"""

from collections.abc import Callable
from enum import StrEnum

from wren.context import RequestContext


class Category(StrEnum):
    """Closed set of hierarchy categories plus the global key."""

    GLOBAL = ""
    INDEX = "index"
    NOT_FOUND = "404"
    ARCHIVE = "archive"
    POST_TYPE_ARCHIVE = "post_type_archive"
    AUTHOR = "author"
    CATEGORY = "category"
    TAG = "tag"
    TAXONOMY = "taxonomy"
    DATE = "date"
    HOME = "home"
    FRONT_PAGE = "front_page"
    PAGE = "page"
    SEARCH = "search"
    SINGLE = "single"
    EMBED = "embed"
    SINGULAR = "singular"
    ATTACHMENT = "attachment"


# Most specific first. Several may fire for one request; each active
# category contributes, and INDEX is always appended after all of them.
ACTIVATION_ORDER: tuple[tuple[Category, Callable[[RequestContext], bool]], ...] = (
    (Category.EMBED, lambda ctx: ctx.is_embed),
    (Category.NOT_FOUND, lambda ctx: ctx.is_404),
    (Category.SEARCH, lambda ctx: ctx.is_search),
    (Category.FRONT_PAGE, lambda ctx: ctx.is_front_page),
    (Category.HOME, lambda ctx: ctx.is_home),
    (Category.POST_TYPE_ARCHIVE, lambda ctx: ctx.is_post_type_archive),
    (Category.TAXONOMY, lambda ctx: ctx.is_tax),
    (Category.ATTACHMENT, lambda ctx: ctx.is_attachment),
    (Category.SINGLE, lambda ctx: ctx.is_single),
    (Category.PAGE, lambda ctx: ctx.is_page),
    (Category.SINGULAR, lambda ctx: ctx.is_singular),
    (Category.CATEGORY, lambda ctx: ctx.is_category),
    (Category.TAG, lambda ctx: ctx.is_tag),
    (Category.AUTHOR, lambda ctx: ctx.is_author),
    (Category.DATE, lambda ctx: ctx.is_date),
    (Category.ARCHIVE, lambda ctx: ctx.is_archive),
)


def coerce_category(key: Category | str) -> Category:
    """Map a category or its string key to a ``Category``.

    Accepts the enum member, its value (``"front_page"``, ``"404"``,
    ``""`` for global) or its member name in any case (``"NOT_FOUND"``).
    """
    from wren.errors import UnknownCategoryError

    if isinstance(key, Category):
        return key
    if isinstance(key, str):
        try:
            return Category(key)
        except ValueError:
            member = Category.__members__.get(key.upper())
            if member is not None:
                return member
    raise UnknownCategoryError(key)
