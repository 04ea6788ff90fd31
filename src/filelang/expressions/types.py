"""Expression types for the filelang routing language.

Every compiled pattern is one of these immutable expression variants:
- FileAttributeExpression: a builtin file attribute (name, parent, path, ...)
- DateExpression: a formatted timestamp (now, or file last-modified)
- BeanExpression: a method call on a registered bean
- SimpleExpression: text handed to the templating language

Expressions capture only their parameters; evaluation happens later against
a FileExchange.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

from filelang.expressions import dateformat

if TYPE_CHECKING:
    from filelang.exchange import FileExchange


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------


class ExpressionSyntaxError(Exception):
    """A pattern could not be compiled.

    Attributes:
        pattern: The full offending pattern
    """

    def __init__(self, pattern: str, message: str):
        self.pattern = pattern
        super().__init__(f"Illegal syntax: {pattern} {message}")


class ExpressionEvaluationError(Exception):
    """Error while evaluating a compiled expression."""
    pass


# -----------------------------------------------------------------------------
# Expression variants
# -----------------------------------------------------------------------------


class FileAttribute(Enum):
    """File attributes reachable through the ``file:`` prefix."""

    NAME = "name"
    NAME_NO_EXT = "name.noext"
    PARENT = "parent"
    PATH = "path"
    ABSOLUTE = "absolute"
    CANONICAL_PATH = "canonical.path"


@dataclass(frozen=True)
class Expression:
    """Base class for compiled expressions."""

    def evaluate(self, exchange: FileExchange) -> Any:
        raise NotImplementedError


def _strip_ext(name: str) -> str:
    dot = name.rfind(".")
    if dot == -1:
        return name
    return name[:dot]


_FILE_ATTRIBUTE_READERS: dict[FileAttribute, Callable[[Path], str]] = {
    FileAttribute.NAME: lambda f: f.name,
    FileAttribute.NAME_NO_EXT: lambda f: _strip_ext(f.name),
    FileAttribute.PARENT: lambda f: str(f.parent),
    FileAttribute.PATH: lambda f: str(f),
    # absolute() keeps ".." segments and links; resolve() normalizes both
    FileAttribute.ABSOLUTE: lambda f: str(f.absolute()),
    FileAttribute.CANONICAL_PATH: lambda f: str(f.resolve()),
}


@dataclass(frozen=True)
class FileAttributeExpression(Expression):
    """Reads one attribute of the exchange's file."""

    attribute: FileAttribute

    def evaluate(self, exchange: FileExchange) -> str:
        if exchange.file is None:
            raise ExpressionEvaluationError(
                f"file:{self.attribute.value} requires an exchange with a file"
            )
        return _FILE_ATTRIBUTE_READERS[self.attribute](exchange.file)

    def __str__(self) -> str:
        return f"file:{self.attribute.value}"


@dataclass(frozen=True)
class DateExpression(Expression):
    """Formats a timestamp chosen by ``command`` using a date ``pattern``.

    Commands:
        now: the current local time
        file: the last-modified time of the exchange's file
    """

    command: str
    pattern: str

    def evaluate(self, exchange: FileExchange) -> str:
        return dateformat.format_date(self._timestamp(exchange), self.pattern)

    def _timestamp(self, exchange: FileExchange) -> datetime:
        if self.command == "now":
            return dateformat.now()
        if self.command == "file":
            if exchange.last_modified is None:
                raise ExpressionEvaluationError(
                    "date:file requires an exchange with a file or last_modified"
                )
            return exchange.last_modified
        raise ExpressionEvaluationError(
            f"Command not supported for dateExpression: {self.command}"
        )

    def __str__(self) -> str:
        return f"date:{self.command}:{self.pattern}"


@dataclass(frozen=True)
class BeanExpression(Expression):
    """Invokes ``method`` on the bean registered as ``bean_name``.

    Attributes:
        reference: The reference exactly as written after ``bean:``
        bean_name: Registry name of the bean
        method: Method to call, or None to call the bean itself
    """

    reference: str
    bean_name: str
    method: str | None = None

    def evaluate(self, exchange: FileExchange) -> Any:
        from filelang.expressions.beans import BeanRegistry

        try:
            bean = BeanRegistry.get(self.bean_name)
        except ValueError as e:
            raise ExpressionEvaluationError(str(e)) from e

        if self.method is None:
            if not callable(bean):
                raise ExpressionEvaluationError(
                    f"Bean '{self.bean_name}' is not callable and no method was given"
                )
            return bean(exchange)

        target = getattr(bean, self.method, None)
        if target is None or not callable(target):
            raise ExpressionEvaluationError(
                f"Bean '{self.bean_name}' has no method '{self.method}'"
            )
        return target(exchange)

    def __str__(self) -> str:
        return f"bean:{self.reference}"


@dataclass(frozen=True)
class SimpleExpression(Expression):
    """Templating text, rendered by the templating language at evaluation."""

    text: str
    renderer: Any = field(default=None, compare=False, repr=False)

    def evaluate(self, exchange: FileExchange) -> Any:
        if self.renderer is None:
            raise ExpressionEvaluationError(
                f"No template renderer configured for simple expression: {self.text}"
            )
        return self.renderer.render(self.text, exchange)

    def __str__(self) -> str:
        return f"simple:{self.text}"


# -----------------------------------------------------------------------------
# Compile result
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class CompileResult:
    """Outcome of compiling a pattern: an expression or a syntax error.

    Attributes:
        pattern: The pattern that was compiled
        expression: The compiled expression, or None on error
        error: The syntax error, or None on success
    """

    pattern: str
    expression: Expression | None = None
    error: ExpressionSyntaxError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Expression:
        """Return the expression, raising the syntax error if there is one."""
        if self.error is not None:
            raise self.error
        assert self.expression is not None
        return self.expression

    def to_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"pattern": self.pattern, "ok": False, "error": str(self.error)}
        return {
            "pattern": self.pattern,
            "ok": True,
            "type": type(self.expression).__name__,
            "expression": str(self.expression),
        }
