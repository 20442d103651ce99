import io
import re
import unittest
from contextlib import redirect_stdout

from glyph.lang.error import ErrorHandler, GlyphException, InvalidCharacter, ParseError, UnboundVariable


def plain(text):
    """Strips terminal color codes."""
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


class GlyphExceptionTestCase(unittest.TestCase):

    def test_messages(self):
        cases = {
            "'(+a_)' contains invalid character 'a'": InvalidCharacter("a", "(+a_)", 2),
            "expected ')' but got '_'": ParseError("expected ')' but got '_'", "(+___)", 4),
            "unbound variable: 3": UnboundVariable(3),
            "unknown error: '{}'": GlyphException("unknown error: '{}'", "{}"),
        }
        for msg, error in cases.items():
            self.assertEqual(msg, str(error))
            self.assertEqual(msg, plain(error.msg))

    def test_span(self):
        error = InvalidCharacter("a", "(+a_)", 2)
        self.assertEqual("(+a_)", error.expr)
        self.assertEqual((2, 3), (error.start, error.end))

        error = GlyphException("'{}' is wrong", "(+__)")
        self.assertEqual((0, 5), (error.start, error.end))


class ErrorHandlerTestCase(unittest.TestCase):

    def test_diagnose(self):
        cases = {
            "  (+a_)\n    ^": InvalidCharacter("a", "(+a_)", 2),
            "  (+_\n     ^": ParseError("unexpected end of input", "(+_", 3),
            "  (+__)\n  ^~~~~": GlyphException("'{}' is wrong", "(+__)"),
        }
        for expected, error in cases.items():
            self.assertEqual(expected, plain(ErrorHandler.diagnose(error)))

    def test_non_fatal(self):
        output = io.StringIO()
        with redirect_stdout(output):
            with ErrorHandler(fatal=False) as error_handler:
                raise ParseError("unexpected end of input", "(+_", 3)

        self.assertEqual(1, error_handler.errors)
        self.assertEqual("Error: unexpected end of input\n  (+_\n     ^\n", plain(output.getvalue()))

    def test_no_diagnosis(self):
        output = io.StringIO()
        with redirect_stdout(output):
            with ErrorHandler(fatal=False):
                raise UnboundVariable(4)

        self.assertEqual("Error: unbound variable: 4\n", plain(output.getvalue()))

    def test_fatal(self):
        output = io.StringIO()
        with redirect_stdout(output), self.assertRaises(SystemExit) as context:
            with ErrorHandler():
                raise UnboundVariable(4)

        self.assertEqual(1, context.exception.code)
        self.assertIn("Error: unbound variable: 4", plain(output.getvalue()))

    def test_recursion(self):
        output = io.StringIO()
        with redirect_stdout(output):
            with ErrorHandler(fatal=False):
                raise RecursionError("maximum recursion depth exceeded")

        self.assertIn("maximum nesting depth exceeded", plain(output.getvalue()))

    def test_internal(self):
        output = io.StringIO()
        with redirect_stdout(output), self.assertRaises(ValueError):
            with ErrorHandler(fatal=False):
                raise ValueError("boom")

        self.assertEqual("[internal] Error: unknown error: 'ValueError: boom'\n", plain(output.getvalue()))

    def test_system_exit(self):
        with self.assertRaises(SystemExit):
            with ErrorHandler(fatal=False):
                raise SystemExit(0)

    def test_warn(self):
        output = io.StringIO()
        with redirect_stdout(output):
            ErrorHandler().warn("'{}' has trailing input", "__", start=1)

        self.assertEqual("warning: '__' has trailing input\n  __\n   ^\n", plain(output.getvalue()))


if __name__ == '__main__':
    unittest.main()
