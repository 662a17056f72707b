import math
from enum import Enum

# Largest magnitude below which every integer is exactly representable as a float
MAX_SAFE_INTEGER = 2 ** 53


class ResultType(Enum):
    VOID = "VOID"
    NUMBER = "NUMBER"
    BINARY_EXPRESSION = "BINARY_EXPRESSION"
    ERROR = "ERROR"


def native_number(value: float, integral: bool = True):
    """
    Return a float as an int when it holds an exactly representable integer.

    Numbers are computed as floats so that oversized literals and results
    saturate to inf instead of raising.
    """
    if integral and math.isfinite(value) and value.is_integer() and abs(value) <= MAX_SAFE_INTEGER:
        return int(value)
    return value


class Node:
    """Base class for parse tree nodes. Nodes are never mutated once built."""
    type = None

    def describe(self):
        raise NotImplementedError

    def render(self):
        return f"[ {self.type.value} {self.describe()} ]"

    def __str__(self):
        return self.render()


class VoidNode(Node):
    type = ResultType.VOID

    def describe(self):
        return "VOID"


class NumberNode(Node):
    type = ResultType.NUMBER

    def __init__(self, literal):
        self.literal = literal
        self.value = native_number(float(literal), integral="." not in literal)

    def describe(self):
        return self.literal


class BinaryExpressionNode(Node):
    type = ResultType.BINARY_EXPRESSION

    def __init__(self, op, left, right):
        self.op = op
        self.left = left
        self.right = right

    def describe(self):
        return f"{self.op}, {self.left.render()}, {self.right.render()}"
