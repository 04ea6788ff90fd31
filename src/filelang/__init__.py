"""filelang: file-oriented pattern language for message routing rules.

Usage:
    from filelang import FileExchange, FileLanguage

    language = FileLanguage()
    expr = language.create_expression("file:name.noext")
    expr.evaluate(FileExchange(file=Path("inbox/order-42.xml")))  # "order-42"
"""

from filelang.exchange import FileExchange
from filelang.expressions import (
    CompileResult,
    Expression,
    ExpressionEvaluationError,
    ExpressionSyntaxError,
    FileLanguage,
    compile_pattern,
)

__version__ = "0.1.0"

__all__ = [
    "CompileResult",
    "Expression",
    "ExpressionEvaluationError",
    "ExpressionSyntaxError",
    "FileExchange",
    "FileLanguage",
    "compile_pattern",
]
