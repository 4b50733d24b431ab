import pytest

from configdef.definition import ConfigurationDefinition
from configdef.domain import OptionAssignment
from configdef.errors import ConfigurationError


@pytest.fixture
def definition() -> ConfigurationDefinition:
    return ConfigurationDefinition("test")


def test_new_definition_is_empty(definition):
    assert definition.name == "test"
    assert definition.description == ""
    assert dict(definition.slots) == {}
    assert definition.options == ()
    assert not definition.frozen


def test_description_can_be_replaced(definition):
    definition.description = "first"
    definition.description = "second"

    assert definition.description == "second"


def test_slot_entries_preserve_append_order(definition):
    definition.add_slot_entry("reporter", "pkg.TextReporter")
    definition.add_slot_entry("logger", "pkg.FileLogger")
    definition.add_slot_entry("reporter", "pkg.XmlReporter")
    definition.add_slot_entry("reporter", "pkg.TextReporter")

    assert list(definition.slots.items()) == [
        ("reporter", ("pkg.TextReporter", "pkg.XmlReporter", "pkg.TextReporter")),
        ("logger", ("pkg.FileLogger",)),
    ]


def test_option_log_keeps_duplicates_in_order(definition):
    definition.add_option("x", "1")
    definition.add_option("y", "a")
    definition.add_option("x", "2")

    assert definition.options == (
        OptionAssignment("x", "1"),
        OptionAssignment("y", "a"),
        OptionAssignment("x", "2"),
    )


def test_slots_view_is_read_only(definition):
    definition.add_slot_entry("logger", "pkg.FileLogger")

    with pytest.raises(TypeError):
        definition.slots["logger"] = ("pkg.Other",)

    assert definition.slots["logger"] == ("pkg.FileLogger",)


def test_frozen_definition_rejects_changes(definition):
    definition.add_slot_entry("logger", "pkg.FileLogger")
    definition.freeze()
    definition.freeze()

    with pytest.raises(ConfigurationError, match="'test' is frozen"):
        definition.add_slot_entry("logger", "pkg.Other")
    with pytest.raises(ConfigurationError, match="'test' is frozen"):
        definition.add_option("x", "1")
    with pytest.raises(ConfigurationError, match="'test' is frozen"):
        definition.description = "late"

    assert definition.slots["logger"] == ("pkg.FileLogger",)
    assert definition.options == ()


def test_repr_summarises_contents(definition):
    definition.add_slot_entry("logger", "pkg.FileLogger")
    definition.add_option("x", "1")
    definition.add_option("x", "2")

    assert repr(definition) == "ConfigurationDefinition(name='test', slots=1, options=2)"
