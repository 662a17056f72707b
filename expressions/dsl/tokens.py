import re
from enum import Enum, auto

NUMBER_PATTERN = re.compile(r"([1-9][0-9]*|[0-9])(\.[0-9]+)?")
OPERATORS = ("+", "-", "*", "/")


class TokenType(Enum):
    NUMBER = auto()
    OPERATOR = auto()
    UNKNOWN = auto()


class Token:
    def __init__(self, type_, value):
        self.type = type_
        self.value = value

    @classmethod
    def classify(cls, text):
        """Build a token from raw text, tagging it by the grammar it matches."""
        if NUMBER_PATTERN.fullmatch(text):
            return cls(TokenType.NUMBER, text)
        if text in OPERATORS:
            return cls(TokenType.OPERATOR, text)
        return cls(TokenType.UNKNOWN, text)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __repr__(self):
        return f"Token({self.type}, {self.value!r})"
