"""Handles interactive/command-line mode for the Glyph interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Glyph interpreter shell."""
    intro = "=== Interactive Mode ===\nEnter Glyph expressions (or 'quit' to exit), 'help' for more information."
    prompt = "> "
    result_prefix = "=> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

    def default(self, line):
        """Runs a Glyph expression."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.sess.run(line)

            if self.sess.results:
                print(self.result_prefix + str(self.sess.pop()))

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the Glyph interpreter!\n\n"
              "Glyph programs are single expressions written with nine characters: _ ( ) + - * ^ % :\n"
              "  _            is 1\n"
              "  (op a b)     applies op (one of + - * ^ %) to a and b, e.g. '(+__)' is 2\n"
              "  (%(c) t e)   is t if c is not 0, else e: '%' directly followed by '(' is a conditional\n"
              "  (:n v b)     evaluates b with the value of v bound under the key n evaluates to\n\n"
              "Try it out by typing '(*(+__)(+(+__)_))'. This multiplies 2 by 3, giving 6 as the result.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True

    do_quit = do_exit
    do_q = do_exit
