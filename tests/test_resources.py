"""Tests for Resources and Contents."""

from __future__ import annotations

from pathlib import Path

import pytest

from memberdoc.errors import MemberdocError, MissingResourceError
from memberdoc.resources import DEFAULT_MESSAGES, Contents, Resources


class TestResources:
    """Message table lookups."""

    @pytest.mark.parametrize(
        ("key", "text"),
        [
            ("doclet.Properties_Declared_In_Class", "Properties declared in class"),
            ("doclet.Properties_Declared_In_Interface", "Properties declared in interface"),
            ("doclet.Properties_Inherited_From_Class", "Properties inherited from class"),
            ("doclet.Properties_Inherited_From_Interface", "Properties inherited from interface"),
        ],
    )
    def test_inherited_label_keys(self, key: str, text: str) -> None:
        assert Resources().get_text(key) == text

    def test_overrides_win(self) -> None:
        resources = Resources({"doclet.Properties": "Eigenschaften"})
        assert resources.get_text("doclet.Properties") == "Eigenschaften"
        assert resources.get_text("doclet.Type") == "Type"

    def test_with_overrides_leaves_original(self) -> None:
        base = Resources()
        derived = base.with_overrides({"doclet.Type": "Typ"})
        assert derived.get_text("doclet.Type") == "Typ"
        assert base.get_text("doclet.Type") == "Type"

    def test_format_arguments(self) -> None:
        resources = Resources({"doclet.Greeting": "{0} of {1}"})
        assert resources.get_text("doclet.Greeting", "color", "Shape") == "color of Shape"

    def test_missing_key(self) -> None:
        with pytest.raises(MissingResourceError) as exc_info:
            Resources().get_text("doclet.Nope")
        assert exc_info.value.key == "doclet.Nope"
        assert isinstance(exc_info.value, KeyError)
        assert isinstance(exc_info.value, MemberdocError)
        assert str(exc_info.value) == "No resource for key 'doclet.Nope'"

    def test_contains(self) -> None:
        assert "doclet.Properties" in Resources()
        assert "doclet.Nope" not in Resources()

    def test_from_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "messages_de.toml"
        path.write_text('[messages]\n"doclet.Property_Details" = "Eigenschaftsdetails"\n')

        resources = Resources.from_toml(path)

        assert resources.get_text("doclet.Property_Details") == "Eigenschaftsdetails"
        assert resources.get_text("doclet.Properties") == DEFAULT_MESSAGES["doclet.Properties"]


class TestContents:
    """Prebuilt labels."""

    def test_labels(self) -> None:
        contents = Contents(Resources())
        assert contents.properties.text == "Properties"
        assert contents.property_details_label.text == "Property Details"
        assert contents.descfrm_class_label.text == "Description copied from class:"
        assert contents.descfrm_interface_label.text == "Description copied from interface:"

    def test_labels_follow_overrides(self) -> None:
        contents = Contents(Resources({"doclet.Type": "Typ"}))
        assert contents.type_label.text == "Typ"
