"""Parser for the filelang pattern language.

Turns a pattern string into a compiled expression by trying literal
prefixes in a fixed order:

1. file:   builtin file attribute (name, name.noext, parent, path,
           absolute, canonical.path)
2. date:   date:command:pattern
3. bean:   bean reference, handed to the bean language
4. simple: templating text, handed to the templating language
5. anything else is templating text as a whole

An unknown attribute after ``file:`` is not an error. The ``file:`` step
simply produces nothing and the remaining steps see the original pattern,
so the whole string (``file:`` included) ends up as templating text.
"""

import logging

from filelang.expressions.beans import BeanLanguage
from filelang.expressions.builders import FILE_ATTRIBUTE_BUILDERS, date_expression
from filelang.expressions.simple import SimpleLanguage, TemplateRenderer
from filelang.expressions.types import (
    CompileResult,
    Expression,
    ExpressionSyntaxError,
)

logger = logging.getLogger(__name__)

FILE_PREFIX = "file:"
DATE_PREFIX = "date:"
BEAN_PREFIX = "bean:"
SIMPLE_PREFIX = "simple:"

PREFIX_ORDER = (FILE_PREFIX, DATE_PREFIX, BEAN_PREFIX, SIMPLE_PREFIX)

DATE_SYNTAX_HINT = "${date:command:pattern} is the correct syntax."


def match_prefix(pattern: str, prefix: str) -> str | None:
    """Return what follows ``prefix`` if ``pattern`` starts with it, else None."""
    if pattern.startswith(prefix):
        return pattern[len(prefix):]
    return None


def _split_date_remainder(remainder: str) -> list[str]:
    """Split on ':' dropping trailing empty parts, so 'now:' is one part."""
    parts = remainder.split(":")
    while len(parts) > 1 and parts[-1] == "":
        parts.pop()
    return parts


class FileLanguage:
    """Compiles patterns into expressions.

    The templating and bean languages are collaborators held by
    composition; ``simple:`` text and unprefixed patterns go to the
    templating language, ``bean:`` references to the bean language.

    Usage:
        language = FileLanguage(simple=SimpleLanguage(renderer))
        result = language.compile("date:now:yyyyMMdd")
        if result.ok:
            value = result.expression.evaluate(exchange)
    """

    def __init__(
        self,
        simple: SimpleLanguage | None = None,
        beans: BeanLanguage | None = None,
    ):
        self.simple = simple or SimpleLanguage()
        self.beans = beans or BeanLanguage()

    @classmethod
    def with_renderer(cls, renderer: TemplateRenderer) -> "FileLanguage":
        """Create a language whose simple expressions render with ``renderer``."""
        return cls(simple=SimpleLanguage(renderer))

    def compile(self, pattern: str) -> CompileResult:
        """Compile a pattern.

        Returns:
            CompileResult holding the expression, or the syntax error for a
            malformed ``date:`` pattern
        """
        remainder = match_prefix(pattern, FILE_PREFIX)
        if remainder is not None:
            expression = self._resolve_file_attribute(remainder)
            if expression is not None:
                return self._compiled(pattern, expression)
            logger.debug(
                "Unknown file attribute %r, treating %r as templating text",
                remainder,
                pattern,
            )

        remainder = match_prefix(pattern, DATE_PREFIX)
        if remainder is not None:
            return self._parse_date(pattern, remainder)

        remainder = match_prefix(pattern, BEAN_PREFIX)
        if remainder is not None:
            return self._compiled(pattern, self.beans.create_expression(remainder))

        remainder = match_prefix(pattern, SIMPLE_PREFIX)
        if remainder is not None:
            return self._compiled(pattern, self.simple.create_expression(remainder))

        return self._compiled(pattern, self.simple.create_expression(pattern))

    def create_expression(self, pattern: str) -> Expression:
        """Compile a pattern, raising ExpressionSyntaxError on failure."""
        return self.compile(pattern).unwrap()

    def _resolve_file_attribute(self, remainder: str) -> Expression | None:
        builder = FILE_ATTRIBUTE_BUILDERS.get(remainder)
        if builder is None:
            return None
        return builder()

    def _parse_date(self, pattern: str, remainder: str) -> CompileResult:
        parts = _split_date_remainder(remainder)
        if len(parts) != 2:
            error = ExpressionSyntaxError(pattern, DATE_SYNTAX_HINT)
            logger.debug("Rejected date pattern %r: %d part(s)", pattern, len(parts))
            return CompileResult(pattern=pattern, error=error)

        command, date_pattern = parts
        return self._compiled(pattern, date_expression(command, date_pattern))

    def _compiled(self, pattern: str, expression: Expression) -> CompileResult:
        logger.debug("Compiled %r as %s", pattern, type(expression).__name__)
        return CompileResult(pattern=pattern, expression=expression)


def compile_pattern(pattern: str, language: FileLanguage | None = None) -> CompileResult:
    """Convenience function to compile a pattern.

    Args:
        pattern: The pattern string
        language: Language to compile with; a default one when omitted

    Returns:
        The compile result
    """
    return (language or FileLanguage()).compile(pattern)
