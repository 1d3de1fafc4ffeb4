import pytest

from gof_patterns.exceptions import (
    ConfigurationError,
    ServiceNotFoundError,
    UnknownVariantError,
)
from gof_patterns.factories import ConcreteFactory1, ConcreteFactory2, VariantFactoryRegistry
from gof_patterns.interfaces.factory import IAbstractFactory
from gof_patterns.products import (
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
)


class DummyFactory(IAbstractFactory):
    variant = "dummy"

    def create_product_a(self):
        return ConcreteProductA2()

    def create_product_b(self):
        return ConcreteProductB1()


def test_factory1_builds_variant1_family():
    factory = ConcreteFactory1()
    product_a = factory.create_product_a()
    product_b = factory.create_product_b()

    assert isinstance(product_a, ConcreteProductA1)
    assert isinstance(product_b, ConcreteProductB1)
    assert product_a.useful_function_a() == "result of product A1."
    assert product_b.useful_function_b() == "result of product B1."


def test_factory2_builds_variant2_family():
    factory = ConcreteFactory2()
    product_a = factory.create_product_a()
    product_b = factory.create_product_b()

    assert isinstance(product_a, ConcreteProductA2)
    assert isinstance(product_b, ConcreteProductB2)
    assert product_a.useful_function_a() == "result of product A2."
    assert product_b.useful_function_b() == "result of product B2."


@pytest.mark.parametrize("factory_cls", [ConcreteFactory1, ConcreteFactory2])
def test_repeated_creation_yields_fresh_equal_instances(factory_cls):
    factory = factory_cls()
    first, second = factory.create_product_a(), factory.create_product_a()
    assert first == second
    assert first is not second

    first_b, second_b = factory.create_product_b(), factory.create_product_b()
    assert first_b == second_b
    assert first_b is not second_b


@pytest.mark.parametrize("factory_cls", [ConcreteFactory1, ConcreteFactory2])
def test_factory_products_share_variant(factory_cls):
    factory = factory_cls()
    assert factory.create_product_a().variant == factory.variant
    assert factory.create_product_b().variant == factory.variant


def test_registry_defaults(registry):
    assert registry.get_supported_providers() == ["1", "2"]
    assert isinstance(registry.create("1"), ConcreteFactory1)
    assert isinstance(registry.create(" 2 "), ConcreteFactory2)


def test_registry_unknown_variant(registry):
    with pytest.raises(UnknownVariantError) as exc_info:
        registry.create("3")

    err = exc_info.value
    assert isinstance(err, ServiceNotFoundError)
    assert err.variant == "3"
    assert err.available == ["1", "2"]
    assert err.error_code == "unknown_variant"
    assert "Available: 1, 2" in str(err)


def test_registry_registration(registry):
    registry.register_provider("Dummy", DummyFactory)
    assert "dummy" in registry.get_supported_providers()
    assert isinstance(registry.create("DUMMY"), DummyFactory)


def test_registry_rejects_duplicates_and_non_factories(registry):
    with pytest.raises(ConfigurationError):
        registry.register_provider("1", DummyFactory)
    with pytest.raises(ConfigurationError):
        registry.register_provider("bogus", ConcreteProductA1)  # type: ignore[arg-type]
    with pytest.raises(ConfigurationError):
        registry.register_provider("   ", DummyFactory)


def test_registry_rejects_unexpected_arguments(registry):
    with pytest.raises(ConfigurationError):
        registry.create("1", colour="red")


def test_fresh_registries_do_not_share_registrations():
    first = VariantFactoryRegistry()
    first.register_provider("dummy", DummyFactory)
    assert "dummy" not in VariantFactoryRegistry().get_supported_providers()
