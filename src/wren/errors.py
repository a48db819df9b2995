"""Wren exception hierarchy.

Resolution itself never raises on missing data. These types cover
misconfiguration at startup, callbacks that break the candidate-list
contract, and the rendering seam giving up.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a hierarchy or registry is configured incorrectly.

    Typically surfaces at startup, while callbacks are being registered.
    """


class UnknownCategoryError(ConfigurationError):
    """A category key that is not part of the hierarchy."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"Unknown template category: {key!r}")


class CallbackError(WrenError):
    """An extension callback returned something other than a list of names."""

    def __init__(self, category: str, callback: object, result: object) -> None:
        self.category = category
        self.callback = callback
        self.result = result
        name = getattr(callback, "__qualname__", repr(callback))
        label = category or "global"
        super().__init__(
            f"Callback {name} for {label!r} must return a list of template names, "
            f"got {type(result).__name__}"
        )


class TemplateNotResolvedError(WrenError):
    """No candidate in the hierarchy could be loaded by the template environment."""

    def __init__(self, candidates: tuple[str, ...] = ()) -> None:
        self.candidates = candidates
        super().__init__(*candidates)

    def __str__(self) -> str:
        if self.candidates:
            return "No template found. Tried: " + ", ".join(self.candidates)
        return "No template found: the candidate list is empty"
