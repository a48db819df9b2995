"""Extension point registry: ordered callback chains per category.

Callbacks are plain functions ``(list[str]) -> list[str]``. Each one
receives the previous callback's output and may reorder, filter, add to
or replace the list wholesale::

    registry = ExtensionRegistry()

    @registry.filter(Category.PAGE)
    def prefer_landing(names: list[str]) -> list[str]:
        return ["landing.twig", *names]

Thread safety:
    Registration happens during startup. Once requests are being served
    the chains are only read, so no lock is taken. Registering while
    another thread resolves is unsupported.
"""

import logging
from collections.abc import Callable

from wren.categories import Category, coerce_category
from wren.errors import CallbackError, ConfigurationError

logger = logging.getLogger("wren.registry")

# Type alias for extension callbacks
Callback = Callable[[list[str]], list[str]]


class ExtensionRegistry:
    """Category-keyed callback chains, applied in registration order."""

    __slots__ = ("_callbacks",)

    def __init__(self) -> None:
        self._callbacks: dict[Category, list[Callback]] = {}

    def register(self, category: Category | str, callback: Callback) -> None:
        """Append *callback* to the chain for *category*.

        Use ``Category.GLOBAL`` (or ``""``) for the chain that runs over the
        fully composed list.

        Raises:
            UnknownCategoryError: If *category* is not a hierarchy category.
            ConfigurationError: If *callback* is not callable.
        """
        key = coerce_category(category)
        if not callable(callback):
            msg = f"Extension callback for {key.value or 'global'!r} must be callable"
            raise ConfigurationError(msg)
        self._callbacks.setdefault(key, []).append(callback)
        logger.debug("Registered %s for %r", getattr(callback, "__qualname__", callback), key.value)

    def filter(self, category: Category | str) -> Callable[[Callback], Callback]:
        """Decorator form of ``register()``. Returns the callback unchanged."""

        def decorator(func: Callback) -> Callback:
            self.register(category, func)
            return func

        return decorator

    def apply(self, category: Category | str, candidates: list[str]) -> list[str]:
        """Run the chain for *category* over *candidates*.

        With no callbacks registered this is the identity (on a copy).
        """
        key = coerce_category(category)
        result = list(candidates)
        for callback in self._callbacks.get(key, ()):
            result = callback(result)
            if not isinstance(result, list) or not all(isinstance(n, str) for n in result):
                raise CallbackError(key.value, callback, result)
        return result

    def callbacks(self, category: Category | str) -> tuple[Callback, ...]:
        """Registered callbacks for *category*, in order."""
        return tuple(self._callbacks.get(coerce_category(category), ()))

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._callbacks.values())

    def __contains__(self, category: object) -> bool:
        if not isinstance(category, str):
            return False
        try:
            key = coerce_category(category)
        except ConfigurationError:
            return False
        return bool(self._callbacks.get(key))
