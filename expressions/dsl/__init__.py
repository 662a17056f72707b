"""
Line oriented arithmetic expression compiler.

Each line of a document holds at most one expression made of number
literals and the operators + - * /. Lines are folded from right to left
with no operator precedence, so "10 - 2 / 4" evaluates as (4 / 2) - 10.
Lines that cannot be compiled produce a Diagnostic instead of a value.
"""

from .tokenizer import Tokenizer
from .parser import Parser
from .evaluator import Evaluator
from .diagnostics import CompilerError, Diagnostic
from .compiler import compile_document, compile_line, execute, run_document, format_value

__all__ = [
    'Tokenizer', 'Parser', 'Evaluator', 'CompilerError', 'Diagnostic',
    'compile_document', 'compile_line', 'execute', 'run_document', 'format_value',
]
