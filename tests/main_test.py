import io
import re
import unittest
from contextlib import redirect_stdout
from unittest import mock

from glyph import demo, main
from glyph.lang.error import ErrorHandler
from glyph.lang.session import Session


def plain(text):
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


class DemoTestCase(unittest.TestCase):

    def test_run_demo(self):
        output = io.StringIO()
        sess = Session(ErrorHandler(fatal=False))
        with redirect_stdout(output):
            demo.run_demo(sess)

        output = plain(output.getvalue())
        self.assertEqual(len(demo.PROGRAMS), output.count("Program: "))
        self.assertEqual(len(demo.PROGRAMS), output.count("  Result: "))
        self.assertIn("Program: (*(+__)(+(+__)_))\n  Desc: 2 * 3 = 6\n  Result: 6\n", output)
        self.assertEqual([], sess.results)

    def test_run_demo_errors(self):
        output = io.StringIO()
        with redirect_stdout(output):
            demo.run_demo(Session(ErrorHandler(fatal=False)), [("(+_", "broken"), ("_", "one")])

        output = plain(output.getvalue())
        self.assertIn("Program: (+_\n  Desc: broken\nError: unexpected end of input", output)
        self.assertIn("Program: _\n  Desc: one\n  Result: 1\n", output)


class MainTestCase(unittest.TestCase):

    def run_main(self, *argv):
        output = io.StringIO()
        with redirect_stdout(output):
            main.main(list(argv))
        return plain(output.getvalue())

    def test_program(self):
        self.assertEqual("6\n", self.run_main("(*(+__)(+(+__)_))"))

    def test_program_error(self):
        output = io.StringIO()
        with redirect_stdout(output), self.assertRaises(SystemExit) as context:
            main.main(["(%_(-__))"])

        self.assertEqual(1, context.exception.code)
        self.assertIn("Error: modulo by zero", plain(output.getvalue()))

    def test_strict(self):
        self.assertIn("warning: ", self.run_main("__"))

        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit):
            main.main(["--strict", "__"])

    def test_tree(self):
        self.assertEqual("Literal(expr='_')\n1\n", self.run_main("--tree", "_"))

    def test_shell_keyboard_interrupt(self):
        output = io.StringIO()
        with mock.patch.object(main, "Shell") as shell:
            shell.return_value.cmdloop.side_effect = KeyboardInterrupt
            with redirect_stdout(output), self.assertRaises(SystemExit) as context:
                main.main(["--no-demo"])

        self.assertEqual(1, context.exception.code)
        self.assertIn("Error: keyboard interrupt", plain(output.getvalue()))

    def test_shell(self):
        with mock.patch.object(main, "Shell") as shell:
            output = self.run_main("--no-demo")

        shell.return_value.cmdloop.assert_called_once_with()
        self.assertIn(demo.BANNER, output)
        self.assertNotIn("Program: ", output)

        with mock.patch.object(main, "Shell"):
            output = self.run_main()
        self.assertEqual(len(demo.PROGRAMS), output.count("Program: "))


if __name__ == '__main__':
    unittest.main()
