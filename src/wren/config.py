"""Hierarchy configuration.

HierarchyConfig is a frozen dataclass: immutable after creation, passed to
``Hierarchy`` at construction, no process-wide state.
"""

from collections.abc import Callable
from dataclasses import dataclass, replace

from wren.paths import is_safe_template_name


def normalize_extension(extension: str) -> str:
    """Strip leading separators so ``".twig"`` and ``"twig"`` are equivalent."""
    return extension.lstrip(".")


@dataclass(frozen=True, slots=True)
class HierarchyConfig:
    """Hierarchy configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = HierarchyConfig(extension="html")
    """

    # File suffix appended to every candidate name
    extension: str = "twig"

    # Validator for explicit single-item template overrides
    validate_template: Callable[[str], bool] = is_safe_template_name

    # Suffixes stored on template overrides that are replaced by `extension`
    strip_override_suffixes: tuple[str, ...] = (".php",)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extension", normalize_extension(self.extension))

    def with_extension(self, extension: str) -> "HierarchyConfig":
        """Return a copy of this config using *extension*."""
        return replace(self, extension=extension)
