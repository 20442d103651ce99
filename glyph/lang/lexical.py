"""Lexical analysis for the Glyph language: a Scanner over the raw source and a recursive-descent Parser on top of it.
See tree.py for the grammar.

There is no tokenization step: every token is a single character, so the Parser reads the Scanner one character at a
time and never backtracks.
"""

from glyph.lang.error import ParseError
from glyph.lang.tree import BinaryOp, Conditional, LetBinding, Literal


class Scanner:
    """Cursor over a Glyph source string. Only the cursor is mutable, and it only moves forward."""
    END = ""  # returned by peek/consume at end of input

    LITERAL = "_"
    OPEN = "("
    CLOSE = ")"
    LET = ":"
    CONDITIONAL = "%"

    OPERATORS = "+-*^%"
    STRUCTURAL = "():"
    ALPHABET = LITERAL + STRUCTURAL + OPERATORS

    def __init__(self, source):
        self.source = source
        self.pos = 0

    def peek(self):
        """Returns the character under the cursor without consuming it."""
        if self.pos >= len(self.source):
            return Scanner.END
        return self.source[self.pos]

    def consume(self):
        """Returns the character under the cursor and advances past it."""
        char = self.peek()
        if char != Scanner.END:
            self.pos += 1
        return char

    def expect(self, char):
        """Consumes the next character, raising a ParseError if it is not char."""
        pos = self.pos
        got = self.consume()
        if got != char:
            raise ParseError(f"expected '{char}' but got {Scanner.describe(got)}", self.source, pos)

    @property
    def remaining(self):
        return self.source[self.pos:]

    @staticmethod
    def describe(char):
        return "end of input" if char == Scanner.END else f"'{char}'"

    @staticmethod
    def is_operator(char):
        return len(char) == 1 and char in Scanner.OPERATORS

    @staticmethod
    def is_structural(char):
        return len(char) == 1 and char in Scanner.STRUCTURAL

    @staticmethod
    def is_valid_char(char):
        return len(char) == 1 and char in Scanner.ALPHABET


class Parser:
    """Recursive-descent parser. One call to parse_expression consumes exactly one expression from the Scanner."""

    def __init__(self, scanner):
        self.scanner = scanner

    def parse_expression(self):
        """Parses the expression starting at the cursor and leaves the cursor right after it."""
        start = self.scanner.pos
        char = self.scanner.peek()

        if char == Scanner.END:
            raise ParseError("unexpected end of input", self.scanner.source, start)

        if char == Scanner.LITERAL:
            self.scanner.consume()
            return Literal(start=start, end=self.scanner.pos)

        if char == Scanner.OPEN:
            self.scanner.consume()
            return self._parse_compound(start)

        raise ParseError(f"unexpected character '{char}'", self.scanner.source, start)

    def _parse_compound(self, start):
        """Parses what follows an opening parenthesis. The character after the operator decides between modulo and a
        conditional: "%(" always opens a conditional.
        """
        head = self.scanner.peek()

        if Scanner.is_operator(head):
            op = self.scanner.consume()

            if op == Scanner.CONDITIONAL and self.scanner.peek() == Scanner.OPEN:
                condition, then, otherwise = self._parse_operands(3)
                return Conditional(condition, then, otherwise, start=start, end=self.scanner.pos)

            left, right = self._parse_operands(2)
            return BinaryOp(op, left, right, start=start, end=self.scanner.pos)

        if head == Scanner.LET:
            self.scanner.consume()
            name, value, body = self._parse_operands(3)
            return LetBinding(name, value, body, start=start, end=self.scanner.pos)

        raise ParseError("invalid expression starting with '('", self.scanner.source, start)

    def _parse_operands(self, count):
        """Parses count expressions followed by the closing parenthesis."""
        operands = [self.parse_expression() for __ in range(count)]
        self.scanner.expect(Scanner.CLOSE)
        return operands
