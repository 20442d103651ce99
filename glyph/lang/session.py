"""Session control for the Glyph language. Runs source lines through the interpreter on behalf of the shell, the demo
and the command-line entry point, and keeps track of their results.
"""

from glyph.interpreter import GlyphInterpreter


class Session:
    """Governs a Glyph session. Lines are independent: no binding survives from one line to the next."""

    def __init__(self, error_handler, strict=False, show_tree=False):
        self.error_handler = error_handler
        self.interpreter = GlyphInterpreter(strict)
        self.show_tree = show_tree  # whether or not to print the parsed tree before evaluating it

        self.results = []  # results of successfully run lines, oldest first

    @staticmethod
    def preprocess_line(line):
        """Strips surrounding whitespace from a line typed in the shell or passed on the command line."""
        return line.strip()

    def run(self, line):
        """Parses and evaluates line, and returns its result. Errors are raised: it is up to the caller to run this
        inside self.error_handler.
        """
        line = Session.preprocess_line(line)

        tree, trailing = self.interpreter.parse(line)
        self.interpreter.check_trailing(line, trailing)

        if trailing:
            start = len(line) - len(trailing)
            self.error_handler.warn("'{}' has trailing input after the expression, which is ignored", line,
                                    start=start)

        if self.show_tree:
            print(tree.display())

        result = self.interpreter.evaluate(tree, line)
        self.results.append(result)
        return result

    def pop(self):
        """Returns and forgets the most recent result."""
        return self.results.pop()
