from .tokens import Token


class Tokenizer:
    def __init__(self, text):
        self.text = text.strip() if text else ""

    def generate_tokens(self):
        # str.split() with no separator splits on whitespace runs and
        # yields nothing for an empty line
        return [Token.classify(part) for part in self.text.split()]
