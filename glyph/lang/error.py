"""Error handling for the Glyph language. Only GlyphExceptions should be encountered while running a program: if another
type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

The interpreter core only raises; printing is left to ErrorHandler, which is used by the shell, the demo and the
command-line entry point.
"""

import sys

from termcolor import colored


class GlyphException(Exception):
    """Templates an error message so that it can be displayed with the offending part of the source highlighted."""

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        """msg is a format string whose placeholders are filled with exprs. exprs[0] should be the offending source."""
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        super().__init__(msg.format(*exprs))

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0]
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal


class InvalidCharacter(GlyphException):
    """Source contains a character outside of the nine-character alphabet."""

    def __init__(self, char, source, pos):
        super().__init__("'{}' contains invalid character '{}'", (source, char), start=pos, end=pos + 1)
        self.char = char
        self.pos = pos


class ParseError(GlyphException):
    """Malformed structure. pos is the cursor position at which parsing failed."""

    def __init__(self, msg, source, pos):
        super().__init__(msg.replace("{", "{{").replace("}", "}}"), source, start=pos, end=pos + 1)
        self.pos = pos


class UnboundVariable(GlyphException):

    def __init__(self, key):
        super().__init__("unbound variable: {}", str(key), diagnosis=False)
        self.key = key


class DivisionByZero(GlyphException):
    """Modulo with a divisor that evaluates to 0. start/end delimit the offending operation in source."""

    def __init__(self, source="", start=0, end=-1):
        super().__init__("modulo by zero", source, start=start, end=end)


class UnknownOperator(GlyphException):
    """Operator tag outside of + - * ^ %. The parser never builds one, so this is an internal error."""

    def __init__(self, op):
        super().__init__("unknown operator: '{}'", str(op), internal=True)
        self.op = op


class UnknownNode(GlyphException):

    def __init__(self, node):
        super().__init__("unknown expression node: {}", repr(node), internal=True)
        self.node = node


class ErrorHandler:
    """Context manager that will suppress Python errors and display Glyph errors/warnings."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.errors = 0

    @staticmethod
    def diagnose(error, warning=False):
        """Returns offending part of error.expr highlighted and bolded, underlined by a caret."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        start = min(error.start, len(error.expr))
        end = max(error.end, start + 1)

        diagnosis = "  " + error.expr[:start]
        diagnosis += colored(error.expr[start:end], color, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), color, attrs=["bold"])

        return diagnosis

    def warn(self, *args, **kwargs):
        """Generates and prints a warning message based on args."""
        error = GlyphException(*args, **kwargs)

        print(colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=True))

    def throw(self, error):
        """Prints error, which must be a GlyphException. Exits if this handler is fatal."""
        self.errors += 1

        error_msg = ""
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("Error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GlyphException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GlyphException("maximum nesting depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GlyphException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GlyphException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
