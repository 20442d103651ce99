"""Glyph interpreter.

Glyph is a fully parenthesized prefix-notation arithmetic language written with nine characters: _ ( ) + - * ^ % :
Basic program flow:
    1. Validation: every character of the source must belong to the alphabet, otherwise nothing is parsed
    2. Parser: produces a Glyph AST by recursive descent over a Scanner (see glyph/lang/lexical.py)
        - For the node types and grammar, see glyph/lang/tree.py
    3. Evaluation: walks the AST under an initially empty environment and returns an integer

Nothing is kept between two calls to run.
"""

from glyph.lang.error import InvalidCharacter, ParseError
from glyph.lang.evaluator import Evaluator
from glyph.lang.lexical import Parser, Scanner


class GlyphInterpreter:
    """Chains validation, parsing and evaluation for single source strings. By default, anything following the first
    complete expression is ignored; a strict interpreter rejects it instead.
    """

    def __init__(self, strict=False):
        self.strict = strict

    @staticmethod
    def validate(source):
        """Raises InvalidCharacter for the first character of source that is not part of the alphabet."""
        for pos, char in enumerate(source):
            if not Scanner.is_valid_char(char):
                raise InvalidCharacter(char, source, pos)

    def parse(self, source):
        """Validates source and parses one expression from it. Returns the tree and the unparsed trailing text."""
        GlyphInterpreter.validate(source)

        scanner = Scanner(source)
        tree = Parser(scanner).parse_expression()

        return tree, scanner.remaining

    def check_trailing(self, source, trailing):
        """Raises a ParseError if this interpreter is strict and trailing is not empty."""
        if self.strict and trailing:
            raise ParseError("unexpected trailing input", source, len(source) - len(trailing))

    def evaluate(self, tree, source=""):
        return Evaluator(source).evaluate(tree, {})

    def run(self, source):
        """Returns the integer value of source."""
        tree, trailing = self.parse(source)
        self.check_trailing(source, trailing)

        return self.evaluate(tree, source)


def run(source, strict=False):
    """Runs source with a fresh interpreter."""
    return GlyphInterpreter(strict).run(source)
