import logging

from .tokens import TokenType
from .ast_nodes import ResultType, VoidNode, NumberNode, BinaryExpressionNode
from .diagnostics import CompilerError, Diagnostic

logger = logging.getLogger(__name__)


class Parser:
    """
    Stack based parser for a single line of tokens.

    Tokens are consumed from the end of the line towards the start. The
    first (rightmost) token must be a number; after that every operator is
    paired with the number to its left and folded into the accumulated
    expression, which becomes the left operand. "1 + 2 * 3" therefore
    compiles to (3 * 2) + 1.

    parse() never raises: a line that cannot be compiled yields a Diagnostic.
    """

    def __init__(self, tokens, line_number):
        self.tokens = list(tokens)
        self.line_number = line_number
        self.stack = []

    def error(self, error, expected, token):
        return Diagnostic(error, expected, token, self.line_number)

    def parse(self):
        if not self.stack and (not self.tokens or (len(self.tokens) == 1 and self.tokens[0].value == "")):
            return VoidNode()

        while self.tokens:
            token = self.tokens.pop()

            if not self.stack:
                # Lines must end with a number literal
                if token.type != TokenType.NUMBER:
                    return self.error(CompilerError.INVALID_TOKEN, "a number literal", token.value)
                self.stack.append(NumberNode(token.value))
                continue

            result = self.fold(self.stack.pop(), token)
            if isinstance(result, Diagnostic):
                return result
            self.stack.append(result)

        if len(self.stack) > 1:
            return self.error(
                CompilerError.MULTIPLE_EXPRESSIONS,
                "a single token",
                ", ".join(fragment.render() for fragment in self.stack),
            )

        return self.stack.pop()

    def fold(self, acc, op_token):
        """Combine the accumulated expression with an operator and the number left of it."""
        if isinstance(acc, Diagnostic):
            return acc

        if acc.type not in (ResultType.NUMBER, ResultType.BINARY_EXPRESSION):
            logger.error(f"Parser stack invariant violated on line {self.line_number}: found {acc.type.value} fragment")
            return self.error(CompilerError.INVALID_STACK, "a number or an operation", acc.type.value)

        if op_token.type != TokenType.OPERATOR:
            return self.error(CompilerError.INVALID_TOKEN, "an operation token", op_token.value)

        if not self.tokens:
            return self.error(CompilerError.INCOMPLETE_EXPRESSION, "a number literal", "")

        operand = self.tokens.pop()
        if operand.type != TokenType.NUMBER:
            return self.error(CompilerError.INVALID_TOKEN, "a number literal", operand.value)

        return BinaryExpressionNode(op_token.value, acc, NumberNode(operand.value))
