"""Pattern language for file routing rules.

This module provides:
- FileLanguage: Compiles patterns into expressions by prefix dispatch
- Expression types: file attributes, dates, beans, simple (templating) text
- BeanRegistry: Registry for beans invoked by bean: expressions
- format_date: SimpleDateFormat-style date formatting
"""

from filelang.expressions.beans import BeanLanguage, BeanRegistry, bean
from filelang.expressions.dateformat import DateFormatError, format_date
from filelang.expressions.parser import (
    PREFIX_ORDER,
    FileLanguage,
    compile_pattern,
    match_prefix,
)
from filelang.expressions.simple import SimpleLanguage, TemplateRenderer
from filelang.expressions.types import (
    BeanExpression,
    CompileResult,
    DateExpression,
    Expression,
    ExpressionEvaluationError,
    ExpressionSyntaxError,
    FileAttribute,
    FileAttributeExpression,
    SimpleExpression,
)

__all__ = [
    # Parser
    "FileLanguage",
    "PREFIX_ORDER",
    "compile_pattern",
    "match_prefix",
    # Types
    "BeanExpression",
    "CompileResult",
    "DateExpression",
    "Expression",
    "ExpressionEvaluationError",
    "ExpressionSyntaxError",
    "FileAttribute",
    "FileAttributeExpression",
    "SimpleExpression",
    # Collaborators
    "BeanLanguage",
    "BeanRegistry",
    "SimpleLanguage",
    "TemplateRenderer",
    "bean",
    # Dates
    "DateFormatError",
    "format_date",
]
