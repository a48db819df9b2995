"""Tests for wren.errors: exception hierarchy and error messages."""

from wren.errors import (
    CallbackError,
    ConfigurationError,
    TemplateNotResolvedError,
    UnknownCategoryError,
    WrenError,
)


class TestHierarchy:
    def test_configuration_error_is_wren_error(self) -> None:
        assert issubclass(ConfigurationError, WrenError)

    def test_unknown_category_is_configuration_error(self) -> None:
        assert issubclass(UnknownCategoryError, ConfigurationError)

    def test_callback_error_is_wren_error(self) -> None:
        assert issubclass(CallbackError, WrenError)

    def test_not_resolved_is_wren_error(self) -> None:
        assert issubclass(TemplateNotResolvedError, WrenError)


class TestMessages:
    def test_unknown_category(self) -> None:
        err = UnknownCategoryError("paged")
        assert err.key == "paged"
        assert str(err) == "Unknown template category: 'paged'"

    def test_callback_error_names_callback(self) -> None:
        def broken(names: list[str]) -> list[str]:
            return names

        err = CallbackError("page", broken, None)
        assert "broken" in str(err)
        assert "'page'" in str(err)
        assert "NoneType" in str(err)

    def test_callback_error_global_label(self) -> None:
        err = CallbackError("", len, 3)
        assert "'global'" in str(err)

    def test_not_resolved_lists_candidates(self) -> None:
        err = TemplateNotResolvedError(("single.twig", "index.twig"))
        assert err.candidates == ("single.twig", "index.twig")
        assert str(err) == "No template found. Tried: single.twig, index.twig"

    def test_not_resolved_empty(self) -> None:
        assert "empty" in str(TemplateNotResolvedError())
