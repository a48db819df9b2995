"""Hierarchy composer: the ordered candidate list for a request.

Walks the fixed activation order, lets every active category contribute
its candidates (suffixed, then passed through that category's callbacks),
appends the ``index`` fallback, and finally runs the global callbacks::

    hierarchy = Hierarchy(HierarchyConfig(extension="twig"))
    hierarchy.resolve(RequestContext(is_404=True))
    # ['404.twig', 'index.twig']

A less specific category that is still active (``archive`` after
``taxonomy``) is not suppressed: it contributes trailing fallbacks.

Thread safety:
    ``Hierarchy`` holds only its config and registry. Configure both
    (``set_extension()``, ``filter()``) before serving; resolution reads
    them and never writes.
"""

import logging
from collections.abc import Callable

from wren import resolvers
from wren.categories import ACTIVATION_ORDER, Category, coerce_category
from wren.config import HierarchyConfig
from wren.context import RequestContext
from wren.errors import UnknownCategoryError
from wren.registry import Callback, ExtensionRegistry

logger = logging.getLogger("wren.hierarchy")

RESOLVERS: dict[Category, Callable[[RequestContext], list[str]]] = {
    Category.INDEX: resolvers.index,
    Category.NOT_FOUND: resolvers.not_found,
    Category.ARCHIVE: resolvers.archive,
    Category.POST_TYPE_ARCHIVE: resolvers.post_type_archive,
    Category.AUTHOR: resolvers.author,
    Category.CATEGORY: resolvers.category,
    Category.TAG: resolvers.tag,
    Category.TAXONOMY: resolvers.taxonomy,
    Category.DATE: resolvers.date,
    Category.HOME: resolvers.home,
    Category.FRONT_PAGE: resolvers.front_page,
    Category.PAGE: resolvers.page,
    Category.SEARCH: resolvers.search,
    Category.SINGLE: resolvers.single,
    Category.EMBED: resolvers.embed,
    Category.SINGULAR: resolvers.singular,
    Category.ATTACHMENT: resolvers.attachment,
}


class Hierarchy:
    """Template hierarchy for one application.

    Args:
        config: Extension and override validation settings.
        registry: Extension callbacks. A fresh empty registry if omitted.
    """

    __slots__ = ("_config", "registry")

    def __init__(
        self,
        config: HierarchyConfig | None = None,
        registry: ExtensionRegistry | None = None,
    ) -> None:
        self._config = config or HierarchyConfig()
        self.registry = registry if registry is not None else ExtensionRegistry()

    # -- Configuration ------------------------------------------------------

    @property
    def config(self) -> HierarchyConfig:
        return self._config

    @property
    def extension(self) -> str:
        return self._config.extension

    def set_extension(self, extension: str) -> None:
        """Change the suffix for every candidate produced after this call.

        A leading ``.`` is stripped: ``".html"`` and ``"html"`` are equal.
        """
        self._config = self._config.with_extension(extension)

    def filter(self, category: Category | str) -> Callable[[Callback], Callback]:
        """Register an extension callback. Shortcut for ``registry.filter()``."""
        return self.registry.filter(category)

    def file(self, name: str) -> str:
        """Combine a bare candidate name with the configured extension."""
        if not self._config.extension:
            return name
        return f"{name}.{self._config.extension}"

    # -- Resolution ---------------------------------------------------------

    def resolve(self, ctx: RequestContext) -> list[str]:
        """Ordered candidate names for *ctx*, ending in the index fallback."""
        templates: list[str] = []
        for category in self.active_categories(ctx):
            templates.extend(self.resolve_category(category, ctx))
        templates.extend(self.resolve_category(Category.INDEX, ctx))
        templates = self.registry.apply(Category.GLOBAL, templates)
        logger.debug("Resolved hierarchy: %s", templates)
        return templates

    def active_categories(self, ctx: RequestContext) -> list[Category]:
        """Categories that fire for *ctx*, in activation order (index excluded)."""
        return [category for category, is_active in ACTIVATION_ORDER if is_active(ctx)]

    def resolve_category(self, category: Category | str, ctx: RequestContext) -> list[str]:
        """One category's suffixed candidates after its callbacks have run.

        Raises:
            UnknownCategoryError: For ``Category.GLOBAL`` or an unknown key.
        """
        key = coerce_category(category)
        if key is Category.GLOBAL:
            raise UnknownCategoryError(key.value)

        if key is Category.POST_TYPE_ARCHIVE:
            # Delegates to the archive category, archive callbacks included
            templates: list[str] = []
            if resolvers.post_type_archive(ctx):
                templates = self.resolve_category(Category.ARCHIVE, ctx)
        else:
            templates = [self._finish(name, key) for name in RESOLVERS[key](ctx)]
            templates = [name for name in templates if name is not None]

        return self.registry.apply(key, templates)

    def _finish(self, name: str, category: Category) -> str | None:
        """Suffix a bare name; normalize and validate explicit overrides."""
        if not isinstance(name, resolvers.Override):
            return self.file(name)

        bare = str(name)
        for suffix in (*self._config.strip_override_suffixes, f".{self._config.extension}"):
            if suffix != "." and bare.endswith(suffix):
                bare = bare.removesuffix(suffix)
                break
        if not bare:
            return None
        if category is Category.SINGLE and not self._config.validate_template(bare):
            logger.debug("Excluded unsafe template override %r", str(name))
            return None
        return self.file(bare)

    # -- Direct access ------------------------------------------------------

    def index(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.INDEX, ctx)

    def not_found(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.NOT_FOUND, ctx)

    def archive(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.ARCHIVE, ctx)

    def post_type_archive(self, ctx: RequestContext) -> list[str]:
        """Archive candidates, or ``[]`` when the post type has no archive."""
        return self.resolve_category(Category.POST_TYPE_ARCHIVE, ctx)

    def author(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.AUTHOR, ctx)

    def category(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.CATEGORY, ctx)

    def tag(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.TAG, ctx)

    def taxonomy(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.TAXONOMY, ctx)

    def date(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.DATE, ctx)

    def home(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.HOME, ctx)

    def front_page(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.FRONT_PAGE, ctx)

    def page(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.PAGE, ctx)

    def search(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.SEARCH, ctx)

    def single(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.SINGLE, ctx)

    def embed(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.EMBED, ctx)

    def singular(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.SINGULAR, ctx)

    def attachment(self, ctx: RequestContext) -> list[str]:
        return self.resolve_category(Category.ATTACHMENT, ctx)
