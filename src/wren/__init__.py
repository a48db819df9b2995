"""Wren: template hierarchy resolution.

Maps an already-classified request to an ordered list of candidate
template names, most specific first, ending in ``index``. A renderer
tries each name in turn and uses the first that exists.

Basic usage::

    from wren import Hierarchy, Post, RequestContext

    hierarchy = Hierarchy()

    @hierarchy.filter("single")
    def prefer_amp(names: list[str]) -> list[str]:
        return [f"amp/{n}" for n in names] + names

    ctx = RequestContext(is_single=True, queried_object=Post(42, "post", "hello-world"))
    hierarchy.resolve(ctx)

Rendering with kida::

    from wren.rendering import render_hierarchy
    html = render_hierarchy(env, hierarchy, ctx, {"title": "Hello"})
"""

__version__ = "0.1.0-dev"
__all__ = [
    "Attachment",
    "CallbackError",
    "Category",
    "ConfigurationError",
    "ExtensionRegistry",
    "Hierarchy",
    "HierarchyConfig",
    "Post",
    "PostType",
    "RequestContext",
    "TemplateNotResolvedError",
    "Term",
    "UnknownCategoryError",
    "User",
    "WrenError",
    "build_context",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "Hierarchy":
        from wren.hierarchy import Hierarchy

        return Hierarchy

    if name == "HierarchyConfig":
        from wren.config import HierarchyConfig

        return HierarchyConfig

    if name == "ExtensionRegistry":
        from wren.registry import ExtensionRegistry

        return ExtensionRegistry

    if name == "Category":
        from wren.categories import Category

        return Category

    if name in ("Attachment", "Post", "PostType", "RequestContext", "Term", "User"):
        from wren import context as _ctx

        return getattr(_ctx, name)

    if name == "build_context":
        from wren.adapter import build_context

        return build_context

    if name in (
        "CallbackError",
        "ConfigurationError",
        "TemplateNotResolvedError",
        "UnknownCategoryError",
        "WrenError",
    ):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
