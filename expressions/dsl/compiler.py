"""
Line driver: compiles a whole document and executes the compiled lines.
"""
import logging
import math
from typing import Any, List, Union

from .ast_nodes import Node
from .diagnostics import Diagnostic
from .evaluator import Evaluator
from .parser import Parser
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)

ParseResult = Union[Node, Diagnostic]


def compile_line(line: str, line_number: int) -> ParseResult:
    """Tokenize and parse a single line. line_number is 1-based."""
    tokens = Tokenizer(line).generate_tokens()
    return Parser(tokens, line_number).parse()


def compile_document(document: str) -> List[ParseResult]:
    """
    Compile every line of a document independently.

    Returns one parse result per line, in document order. Blank lines
    compile to a VoidNode.
    """
    results = []
    for index, line in enumerate(document.split("\n")):
        result = compile_line(line, index + 1)
        if isinstance(result, Diagnostic):
            logger.debug(f"Compilation error: {result.message}")
        results.append(result)
    return results


def execute(results: List[ParseResult]) -> List[Any]:
    evaluator = Evaluator()
    return [evaluator.eval(result) for result in results]


def run_document(document: str) -> List[Any]:
    return execute(compile_document(document))


def format_value(value: Any) -> str:
    """Render an evaluated value as a single output line."""
    if value is None:
        return "null"
    if isinstance(value, float) and math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)
