"""Classifier protocol and context builder.

A classifier is any object exposing the content system's request
predicates and lookups. No base class required; the builder checks the
shape, not the lineage::

    class SiteQuery:
        def is_single(self) -> bool: ...
        def queried_object(self) -> QueriedObject: ...
        ...

    ctx = build_context(SiteQuery())

The queried object and everything derived from it are fetched lazily, so
a request that only needs ``404`` never loads a post.
"""

from typing import Any, Protocol

from wren.context import PostType, QueriedObject, RequestContext

# Flag name on RequestContext -> predicate name on the classifier
PREDICATES: tuple[tuple[str, str], ...] = (
    ("is_embed", "is_embed"),
    ("is_404", "is_404"),
    ("is_search", "is_search"),
    ("is_front_page", "is_front_page"),
    ("is_home", "is_home"),
    ("is_post_type_archive", "is_post_type_archive"),
    ("is_tax", "is_tax"),
    ("is_attachment", "is_attachment"),
    ("is_single", "is_single"),
    ("is_page", "is_page"),
    ("is_singular", "is_singular"),
    ("is_category", "is_category"),
    ("is_tag", "is_tag"),
    ("is_author", "is_author"),
    ("is_date", "is_date"),
    ("is_archive", "is_archive"),
)


class Classifier(Protocol):
    """Boundary to the content system's request classification."""

    def is_embed(self) -> bool: ...
    def is_404(self) -> bool: ...
    def is_search(self) -> bool: ...
    def is_front_page(self) -> bool: ...
    def is_home(self) -> bool: ...
    def is_post_type_archive(self) -> bool: ...
    def is_tax(self) -> bool: ...
    def is_attachment(self) -> bool: ...
    def is_single(self) -> bool: ...
    def is_page(self) -> bool: ...
    def is_singular(self) -> bool: ...
    def is_category(self) -> bool: ...
    def is_tag(self) -> bool: ...
    def is_author(self) -> bool: ...
    def is_date(self) -> bool: ...
    def is_archive(self) -> bool: ...

    def queried_object(self) -> QueriedObject: ...

    def query_var(self, name: str) -> Any: ...

    def post_type_object(self, name: str) -> PostType | None: ...

    def page_template(self, obj: QueriedObject) -> str: ...

    def post_format(self, obj: QueriedObject) -> str: ...


def _as_post_types(value: Any) -> tuple[str, ...]:
    """Normalize the ``post_type`` query var (string, list, or empty)."""
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value if v)


def build_context(classifier: Classifier) -> RequestContext:
    """Snapshot *classifier* into an immutable ``RequestContext``.

    Predicates are evaluated once. Object-dependent lookups (page
    template, post format) run only when the request is singular or an
    embed, the only categories that read them.
    """
    flags = {field: bool(getattr(classifier, name)()) for field, name in PREDICATES}

    post_types = _as_post_types(classifier.query_var("post_type"))
    post_type_object = None
    if flags["is_post_type_archive"] and post_types:
        post_type_object = classifier.post_type_object(post_types[0])

    page_template = ""
    post_format = ""
    obj: QueriedObject = None
    needs_object = flags["is_singular"] or flags["is_single"] or flags["is_page"] or flags["is_embed"]
    if needs_object:
        obj = classifier.queried_object()
        page_template = classifier.page_template(obj) or ""
        if flags["is_embed"]:
            post_format = classifier.post_format(obj) or ""
        source: Any = obj
    else:
        source = classifier.queried_object

    return RequestContext(
        **flags,
        queried_object=source,
        query_post_types=post_types,
        post_type_object=post_type_object,
        pagename=str(classifier.query_var("pagename") or ""),
        page_template=page_template,
        post_format=post_format,
    )
