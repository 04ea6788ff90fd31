"""Tests for the bean registry and bean references."""

import pytest

from filelang.expressions import BeanExpression, BeanLanguage, BeanRegistry, bean
from filelang.expressions.beans import split_reference


@pytest.fixture(autouse=True)
def clear_registry():
    BeanRegistry.clear()
    yield
    BeanRegistry.clear()


class TestBeanRegistry:
    def test_register_and_get(self):
        instance = object()
        BeanRegistry.register("thing", instance)

        assert BeanRegistry.get("thing") is instance
        assert BeanRegistry.is_registered("thing")

    def test_register_replaces(self):
        BeanRegistry.register("thing", 1)
        BeanRegistry.register("thing", 2)
        assert BeanRegistry.get("thing") == 2

    def test_get_unregistered_raises(self):
        with pytest.raises(ValueError) as exc_info:
            BeanRegistry.get("nope")
        assert "not registered" in str(exc_info.value)

    def test_list_registered_is_sorted(self):
        BeanRegistry.register("b", 1)
        BeanRegistry.register("a", 2)
        assert BeanRegistry.list_registered() == ["a", "b"]

    def test_clear(self):
        BeanRegistry.register("a", 1)
        BeanRegistry.clear()
        assert not BeanRegistry.is_registered("a")


class TestBeanDecorator:
    def test_class_is_instantiated(self):
        @bean("namer")
        class Namer:
            def name(self, exchange):
                return "n"

        registered = BeanRegistry.get("namer")
        assert isinstance(registered, Namer)

    def test_function_is_registered_as_is(self):
        @bean("stamp")
        def stamp(exchange):
            return "s"

        assert BeanRegistry.get("stamp") is stamp

    def test_decorator_returns_target(self):
        def fn(exchange):
            return None

        assert bean("fn")(fn) is fn


class TestReferences:
    @pytest.mark.parametrize(
        "reference,expected",
        [
            ("myBean.method", ("myBean", "method")),
            ("com.acme.Namer.next", ("com.acme.Namer", "next")),
            ("myBean?method=go", ("myBean", "go")),
            ("my.bean?method=go", ("my.bean", "go")),
            ("myBean", ("myBean", None)),
            ("myBean.", ("myBean", None)),
            ("myBean?method=", ("myBean", None)),
            (".hidden", (".hidden", None)),
        ],
    )
    def test_split_reference(self, reference, expected):
        assert split_reference(reference) == expected

    def test_language_keeps_reference_verbatim(self):
        expression = BeanLanguage().create_expression("myBean?method=go")
        assert expression == BeanExpression(
            reference="myBean?method=go", bean_name="myBean", method="go"
        )
        assert str(expression) == "bean:myBean?method=go"
