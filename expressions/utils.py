"""
Helpers shared by the API view and the management command.
"""
import math
from typing import Any, Dict, List

from .dsl import compile_document, format_value, Evaluator


def json_safe(value: Any) -> Any:
    """
    Make an evaluated value safe for strict JSON output.

    Division by zero yields non-finite floats, which strict JSON cannot carry,
    so they are emitted as strings.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return format_value(value)
    return value


def evaluate_document(document: str) -> List[Dict[str, Any]]:
    """
    Compile and evaluate a document.

    Args:
        document: Newline separated source text

    Returns:
        One dict per input line with the line number, the parse result type,
        its rendered tree and its evaluated value
    """
    evaluator = Evaluator()
    lines = []
    for index, result in enumerate(compile_document(document)):
        lines.append({
            "line": index + 1,
            "type": result.type.value,
            "tree": result.render(),
            "value": evaluator.eval(result),
        })
    return lines
