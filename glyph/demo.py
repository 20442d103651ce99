"""Demonstration programs for the Glyph interpreter. Printed by the glyph executable before entering the shell, or run
directly with `python -m glyph.demo`.
"""

from glyph.lang.error import ErrorHandler
from glyph.lang.session import Session


BANNER = "=== Glyph Programming Language Interpreter ===\nValid characters: * ( ) + - ^ % _ :\n"

PROGRAMS = [
    ("_", "Unit value (1)"),
    ("(+__)", "1 + 1 = 2"),
    ("(+(+__)_)", "2 + 1 = 3"),
    ("(^(+__)_)", "2 ^ 1 = 2"),
    ("(^(+__)(+__))", "2 ^ 2 = 4"),
    ("(*(+__)(+(+__)_))", "2 * 3 = 6"),
    ("(-(+(+(+__)_)_)_)", "4 - 1 = 3"),
    ("(%_(+__))", "1 % 2 = 1"),
    ("(%(+(+__)_)__)", "Conditional: if 3 then 1 else 1"),
    ("(:___)", "Let binding: let x=1 in 1"),
    ("(%(+__)__)", "Conditional: if 2 then 1 else 1"),
    ("(%(-__)_(+__))", "Conditional: if 0 then 1 else 2"),
]


def run_demo(sess, programs=None):
    """Runs each (program, description) pair in programs through sess, printing results and errors."""
    if programs is None:
        programs = PROGRAMS

    for program, description in programs:
        print(f"Program: {program}")
        print(f"  Desc: {description}")

        with sess.error_handler:
            sess.run(program)
            print(f"  Result: {sess.pop()}")

        print()


if __name__ == "__main__":
    print(BANNER)
    run_demo(Session(ErrorHandler(fatal=False)))
