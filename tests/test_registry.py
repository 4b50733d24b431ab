import pytest

from configdef.domain import Option, TypeDescriptor
from configdef.errors import ConfigurationError
from configdef.options import attribute_setter, declared_options, option
from configdef.registry import TypeRegistry, inferred_identifier


@pytest.fixture
def registry():
    return TypeRegistry()


@pytest.fixture
def type_finder(registry):
    def find(identifier: str) -> TypeDescriptor:
        return next(t for t in registry.registered_types() if t.identifier == identifier)

    return find


class Unregistered:
    pass


def test_class_is_registered_under_explicit_identifier(registry, type_finder):
    @registry.provides("pkg.FileLogger")
    class FileLogger:
        """Logs to a file.

        More detail.
        """

    descriptor = type_finder("pkg.FileLogger")
    assert descriptor.factory is FileLogger
    assert descriptor.description == "Logs to a file."
    assert descriptor.options == ()
    assert "pkg.FileLogger" in registry


def test_identifier_inferred_from_class_name():
    assert inferred_identifier(Unregistered) == f"{__name__}.Unregistered"


def test_identifier_inferred_from_function_name(registry, type_finder):
    @registry.provides()
    def make_reporter() -> dict:
        return {}

    assert type_finder("reporter").factory() == {}


def test_declared_options_are_registered_in_declaration_order(registry, type_finder):
    extra = Option("extra", int, attribute_setter("extra"))

    @registry.provides("pkg.Thing", options=[extra])
    @option("first")
    @option("second", parser=int)
    class Thing:
        pass

    assert [o.name for o in type_finder("pkg.Thing").options] == ["first", "second", "extra"]


def test_subclass_inherits_options(registry, type_finder):
    @option("base-option")
    class Base:
        pass

    @registry.provides("pkg.Derived")
    @option("derived-option")
    class Derived(Base):
        pass

    assert [o.name for o in type_finder("pkg.Derived").options] == [
        "base-option",
        "derived-option",
    ]
    assert [o.name for o in declared_options(Base)] == ["base-option"]


def test_duplicate_identifier_raises(registry):
    registry.provides("pkg.Thing")(Unregistered)

    with pytest.raises(ConfigurationError, match="Duplicate type identifier 'pkg.Thing'"):
        registry.provides("pkg.Thing")(Unregistered)


def test_factory_requiring_arguments_is_rejected(registry):
    with pytest.raises(ConfigurationError, match="must be callable without arguments"):

        @registry.provides()
        def make_foo(bar):
            pass


def test_non_callable_target_is_rejected(registry):
    with pytest.raises(ConfigurationError, match="is not a class or function"):
        registry.provides("pkg.Number")(42)


def test_resolve_unknown_identifier_names_slot(registry):
    with pytest.raises(
        ConfigurationError,
        match="Could not find type pkg.Missing for config object name logger",
    ):
        registry.resolve("pkg.Missing", "logger")


def test_instantiate_creates_new_instance_each_time(registry):
    registry.provides("pkg.Unregistered")(Unregistered)
    descriptor = registry.resolve("pkg.Unregistered")

    first = registry.instantiate(descriptor)
    second = registry.instantiate(descriptor)

    assert isinstance(first, Unregistered)
    assert first is not second


def test_instantiate_wraps_factory_failure(registry):
    failure = RuntimeError("boom")

    @registry.provides("pkg.Broken")
    def broken():
        raise failure

    with pytest.raises(
        ConfigurationError,
        match="Could not instantiate type pkg.Broken for config object name logger: boom",
    ) as error:
        registry.instantiate(registry.resolve("pkg.Broken"), "logger")

    assert error.value.cause is failure
    assert error.value.__cause__ is failure


def test_instantiate_rejects_uncallable_factory(registry):
    registry.register(TypeDescriptor("pkg.Constant", "not callable"))

    with pytest.raises(ConfigurationError, match="Could not access type pkg.Constant"):
        registry.instantiate(registry.resolve("pkg.Constant"))
