"""Request context and queried-object models.

Immutable frozen dataclasses describing one request's classification.
Built once per resolution by the caller (usually via
``wren.adapter.build_context``), read-only inside the resolver, and
discarded afterwards.

The classification flags are independent: one URL can be a page, a
singular item and the front page at the same time. The composer's fixed
activation order decides the final candidate ordering, not exclusivity.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True, slots=True)
class Post:
    """A single content item (post, page, or custom post type).

    Attributes:
        id: Numeric post id.
        post_type: Post type name (``"post"``, ``"page"``, ``"product"``).
        post_name: URL slug; may be percent-encoded.
    """

    id: int
    post_type: str
    post_name: str = ""


@dataclass(frozen=True, slots=True)
class Attachment:
    """A media item. Also a post, with ``post_type="attachment"``."""

    id: int
    post_name: str = ""
    mime_type: str = ""
    post_type: str = "attachment"


@dataclass(frozen=True, slots=True)
class Term:
    """A taxonomy term (category, tag, or custom taxonomy)."""

    term_id: int
    slug: str
    taxonomy: str = ""


@dataclass(frozen=True, slots=True)
class User:
    """An author."""

    id: int
    user_nicename: str


QueriedObject = Union[Post, Attachment, Term, User, None]

# A queried object, or a zero-argument callable producing one on demand
ObjectSource = Union[QueriedObject, Callable[[], QueriedObject]]


@dataclass(frozen=True, slots=True)
class PostType:
    """Post type metadata consulted by post-type archives."""

    name: str
    has_archive: bool = False


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Immutable snapshot of a request's classification.

    All fields have defaults so tests and callers set only what applies::

        ctx = RequestContext(
            is_single=True,
            is_singular=True,
            queried_object=Post(42, "post", "hello-world"),
        )

    ``queried_object`` may be a zero-argument callable; it is evaluated at
    most once, the first time a resolver asks for it.
    """

    # Classification flags
    is_embed: bool = False
    is_404: bool = False
    is_search: bool = False
    is_front_page: bool = False
    is_home: bool = False
    is_post_type_archive: bool = False
    is_tax: bool = False
    is_attachment: bool = False
    is_single: bool = False
    is_page: bool = False
    is_singular: bool = False
    is_category: bool = False
    is_tag: bool = False
    is_author: bool = False
    is_date: bool = False
    is_archive: bool = False

    # Collaborator data, already resolved by the caller
    queried_object: ObjectSource = None
    query_post_types: tuple[str, ...] = ()
    post_type_object: PostType | None = None
    pagename: str = ""
    page_template: str = ""
    post_format: str = ""

    _resolved: list[QueriedObject] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def resolve_object(self) -> QueriedObject:
        """Return the queried object, evaluating a lazy source once."""
        if self._resolved:
            return self._resolved[0]
        source = self.queried_object
        obj = source() if callable(source) else source
        self._resolved.append(obj)
        return obj

    @property
    def queried_object_id(self) -> int:
        """Numeric id of the queried object, or ``0`` when there is none."""
        obj = self.resolve_object()
        if isinstance(obj, Term):
            return obj.term_id
        if isinstance(obj, (Post, Attachment, User)):
            return obj.id
        return 0
