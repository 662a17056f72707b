import math

from .ast_nodes import VoidNode, NumberNode, BinaryExpressionNode, native_number
from .diagnostics import Diagnostic


def _divide(left, right):
    if right == 0:
        # Follow IEEE 754 rather than raising ZeroDivisionError
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1, right)
    return left / right


OPERATIONS = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _divide,
}


class Evaluator:
    def eval(self, node):
        if isinstance(node, Diagnostic):
            return node.message

        if isinstance(node, VoidNode):
            return None

        if isinstance(node, NumberNode):
            return node.value

        if isinstance(node, BinaryExpressionNode):
            left = self.eval(node.left)
            right = self.eval(node.right)
            result = OPERATIONS[node.op](float(left), float(right))
            return native_number(result, integral=isinstance(left, int) and isinstance(right, int))

        raise TypeError(f"Invalid parse result: {node!r}")
