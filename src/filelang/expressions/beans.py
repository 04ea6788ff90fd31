"""Bean registry and bean language for ``bean:`` expressions.

A bean is any object registered under a name. A ``bean:`` reference names
the bean and, optionally, the method to invoke with the exchange:

    bean:orderNamer.next_name       # method after the last dot
    bean:orderNamer?method=next_name
    bean:orderNamer                 # the bean itself must be callable

Beans are looked up when an expression is evaluated, not when it is
compiled, so patterns can be compiled before the beans are registered.
"""

from collections.abc import Callable
from typing import Any

from filelang.expressions.types import BeanExpression

METHOD_OPTION = "?method="


class BeanRegistry:
    """Registry for beans callable from ``bean:`` expressions.

    Example:
        @bean("orderNamer")
        class OrderNamer:
            def next_name(self, exchange):
                ...
    """

    _beans: dict[str, Any] = {}

    @classmethod
    def register(cls, name: str, instance: Any) -> None:
        """Register a bean instance by name, replacing any previous one."""
        cls._beans[name] = instance

    @classmethod
    def get(cls, name: str) -> Any:
        """Get a registered bean by name.

        Raises:
            ValueError: If no bean is registered under the name
        """
        if name not in cls._beans:
            raise ValueError(
                f"Bean '{name}' is not registered. "
                "Beans must be registered before expressions using them are evaluated."
            )
        return cls._beans[name]

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a bean is registered."""
        return name in cls._beans

    @classmethod
    def list_registered(cls) -> list[str]:
        """List all registered bean names."""
        return sorted(cls._beans.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations. Primarily for testing."""
        cls._beans.clear()


def bean(name: str) -> Callable[[Any], Any]:
    """Decorator to register a bean.

    Classes are instantiated with no arguments; functions are registered
    as-is and called with the exchange.
    """

    def decorator(target: Any) -> Any:
        instance = target() if isinstance(target, type) else target
        BeanRegistry.register(name, instance)
        return target

    return decorator


def split_reference(reference: str) -> tuple[str, str | None]:
    """Split a bean reference into ``(bean_name, method)``."""
    if METHOD_OPTION in reference:
        bean_name, method = reference.split(METHOD_OPTION, 1)
        return bean_name, method or None

    idx = reference.rfind(".")
    if idx > 0:
        return reference[:idx], reference[idx + 1:] or None
    return reference, None


class BeanLanguage:
    """Builds bean expressions from ``bean:`` references."""

    def create_expression(self, reference: str) -> BeanExpression:
        bean_name, method = split_reference(reference)
        return BeanExpression(reference=reference, bean_name=bean_name, method=method)
