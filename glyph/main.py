"""Runs a single Glyph program given on the command line, or the demonstration programs followed by the interactive
shell. Also uses error handling context manager. Installed as the glyph executable.
"""

import argparse

from glyph.demo import BANNER, run_demo
from glyph.lang.error import ErrorHandler
from glyph.lang.session import Session
from glyph.lang.shell import Shell


def build_parser():
    parser = argparse.ArgumentParser(prog="glyph", description="Glyph programming language interpreter")
    parser.add_argument("program", help="program to run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--strict", action="store_true", help="reject input following the expression")
    parser.add_argument("--tree", action="store_true", help="print the syntax tree before each result")
    parser.add_argument("--no-demo", action="store_true", help="do not run the demonstration programs")
    return parser


def main(argv=None):
    """Runs glyph interpreter. Called from glyph executable script."""
    args = build_parser().parse_args(argv)

    if args.program is not None:
        with ErrorHandler() as error_handler:
            sess = Session(error_handler, strict=args.strict, show_tree=args.tree)
            print(sess.run(args.program))

    else:
        with ErrorHandler():  # keyboard interrupts at the prompt
            sess = Session(ErrorHandler(fatal=False), strict=args.strict, show_tree=args.tree)

            print(BANNER)
            if not args.no_demo:
                run_demo(sess)

            Shell(sess).cmdloop()


if __name__ == "__main__":
    main()
