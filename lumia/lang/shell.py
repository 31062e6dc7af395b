"""Handles interactive/command-line mode for the Lumia interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Lumia interpreter shell."""
    intro = "Lumia interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self._tmp_line = ""

    def default(self, line):
        """Executes arbitrary Lumia source. A line with unclosed parentheses is held until they are closed."""
        line, add_to_prev = self.sess.preprocess_line(line, self._tmp_line)

        if add_to_prev:
            self._tmp_line = line
            self.prompt = self.secondary_prompt
        else:
            self._run(line)

    def _run(self, line):
        """Runs line (plus any held lines) in the session and goes back to the primary prompt."""
        self._tmp_line = ""
        self.prompt = self._tmp_prompt

        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.sess.add(line)
            self.sess.run()

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the Lumia interpreter!\n\n"
              "Lumia has a single statement, show, which prints its arguments on one line, \n"
              "separated by spaces. Arguments are strings, numbers or bare names.\n\n"
              "Try it out by typing 'show(\"hello\", 42, world)'. This prints 'hello 42 world'.\n"
              "An unclosed '(' continues the statement onto the next line.")

    def emptyline(self):
        """Do not repeat previous command on empty line. Held lines stay held."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter. A statement still waiting for ')' is run first, so that it is reported."""
        if self._tmp_line:
            self._run(self._tmp_line)
        return True
