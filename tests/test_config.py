"""Tests for ContextVar-based doclet options."""

from __future__ import annotations

from threading import Thread

import pytest

from memberdoc import (
    DocletOptions,
    PropertyWriter,
    doclet_options_context,
    get_doclet_options,
    reset_doclet_options,
    set_doclet_options,
)
from memberdoc.model import TypeElement


class TestDocletOptionsDataclass:
    def test_default_values(self) -> None:
        options = DocletOptions()
        assert options.summarize_overridden_methods is False
        assert options.link_external_public is False
        assert options.javafx is True
        assert options.doc_root == ""

    def test_immutability(self) -> None:
        options = DocletOptions()
        with pytest.raises(AttributeError):
            options.javafx = False  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        options = DocletOptions.from_dict(
            {"summarize_overridden_methods": True, "unknown_key": "ignored"}
        )
        assert options.summarize_overridden_methods is True
        assert not hasattr(options, "unknown_key")

    def test_localization_is_not_an_option(self) -> None:
        # Translated labels come from the Resources passed to the writer.
        assert "locale" not in DocletOptions.__dataclass_fields__
        assert DocletOptions.from_dict({"locale": "de"}) == DocletOptions()


class TestContextVarFunctions:
    def teardown_method(self) -> None:
        reset_doclet_options()

    def test_set_and_get(self) -> None:
        set_doclet_options(DocletOptions(doc_root="/api"))
        assert get_doclet_options().doc_root == "/api"

    def test_reset(self) -> None:
        set_doclet_options(DocletOptions(doc_root="/api"))
        reset_doclet_options()
        assert get_doclet_options() == DocletOptions()

    def test_context_manager_restores(self) -> None:
        with doclet_options_context(DocletOptions(javafx=False)):
            assert get_doclet_options().javafx is False
        assert get_doclet_options().javafx is True

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with doclet_options_context(DocletOptions(javafx=False)):
                raise RuntimeError("boom")
        assert get_doclet_options().javafx is True

    def test_writer_uses_context_default(self) -> None:
        with doclet_options_context(DocletOptions(summarize_overridden_methods=True)):
            writer = PropertyWriter(TypeElement("Circle"))
        assert writer.options.summarize_overridden_methods is True
        assert writer.classifier.options is writer.options

    def test_explicit_options_win(self) -> None:
        explicit = DocletOptions(doc_root="/docs")
        with doclet_options_context(DocletOptions(doc_root="/api")):
            writer = PropertyWriter(TypeElement("Circle"), options=explicit)
        assert writer.options is explicit

    def test_thread_isolation(self) -> None:
        set_doclet_options(DocletOptions(doc_root="/api"))
        seen: list[str] = []

        thread = Thread(target=lambda: seen.append(get_doclet_options().doc_root))
        thread.start()
        thread.join()

        assert seen == [""]
