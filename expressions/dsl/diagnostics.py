"""
Compilation diagnostics.

A diagnostic is returned by the parser in place of a node when a line cannot
be compiled. It is plain data: evaluating it yields its message, so a list of
parse results can be executed without checking which entries failed.
"""
from enum import Enum

from .ast_nodes import ResultType


class CompilerError(Enum):
    INCOMPLETE_EXPRESSION = "Incomplete expression provided"
    INVALID_TOKEN = "Invalid token provided"
    INVALID_STACK = "Invalid stack element"
    MULTIPLE_EXPRESSIONS = "Multiple expressions on a single line"


class Diagnostic:
    type = ResultType.ERROR

    def __init__(self, error: CompilerError, expected: str, token: str, line_number: int):
        self.error = error
        self.expected = expected
        self.token = token
        self.line_number = line_number

    @property
    def message(self) -> str:
        return (
            f"[COMPILATION ERROR]: {self.error.value} => expected {self.expected}, "
            f"got '{self.token}' on line {self.line_number}"
        )

    def render(self):
        return self.message

    def __str__(self):
        return self.message

    def __repr__(self):
        return f"Diagnostic({self.error.name}, {self.token!r}, line={self.line_number})"
