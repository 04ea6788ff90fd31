"""Builtin expression constructors.

One constructor per file attribute, plus the date, bean and simple
builders the language dispatches to.
"""

from filelang.expressions.beans import BeanLanguage
from filelang.expressions.simple import SimpleLanguage
from filelang.expressions.types import (
    BeanExpression,
    DateExpression,
    FileAttribute,
    FileAttributeExpression,
    SimpleExpression,
)


def file_name_expression() -> FileAttributeExpression:
    return FileAttributeExpression(FileAttribute.NAME)


def file_name_no_extension_expression() -> FileAttributeExpression:
    return FileAttributeExpression(FileAttribute.NAME_NO_EXT)


def file_parent_expression() -> FileAttributeExpression:
    return FileAttributeExpression(FileAttribute.PARENT)


def file_path_expression() -> FileAttributeExpression:
    return FileAttributeExpression(FileAttribute.PATH)


def file_absolute_expression() -> FileAttributeExpression:
    return FileAttributeExpression(FileAttribute.ABSOLUTE)


def file_canonical_path_expression() -> FileAttributeExpression:
    return FileAttributeExpression(FileAttribute.CANONICAL_PATH)


FILE_ATTRIBUTE_BUILDERS = {
    "name": file_name_expression,
    "name.noext": file_name_no_extension_expression,
    "parent": file_parent_expression,
    "path": file_path_expression,
    "absolute": file_absolute_expression,
    "canonical.path": file_canonical_path_expression,
}


def date_expression(command: str, pattern: str) -> DateExpression:
    """Build a date expression. The command is checked at evaluation."""
    return DateExpression(command=command, pattern=pattern)


def bean_expression(reference: str) -> BeanExpression:
    return BeanLanguage().create_expression(reference)


def simple_expression(text: str) -> SimpleExpression:
    """Build a simple expression with no renderer bound."""
    return SimpleLanguage().create_expression(text)
