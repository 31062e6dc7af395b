"""Session control for the Lumia language. A Session runs a file, or lines typed into the shell, through the parser and
the interpreter one statement at a time.
"""

from collections import deque

from lumia.lang.error import GenericException, MalformedLiteral
from lumia.lang.interpreter import Interpreter
from lumia.lang.lexical import Lexer
from lumia.lang.parser import Parser
from lumia.lang.tokens import TokenType


class Session:
    """Governs a Lumia session. Sources added to a session are parsed lazily, when run is called."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, cmd_line, stream=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode
        self.stream = stream      # where statements print (sys.stdout if None)

        self.parsers = deque()  # parsers over sources that still have statements to run
        self.executed = 0       # number of statements run so far

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            self.load(path)

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename")

    def load(self, path):
        """Reads the file at path and adds its source to the current session."""
        try:
            with open(path, "r", encoding="utf-8") as file:
                source = file.read()
        except (OSError, UnicodeDecodeError):
            raise GenericException("'{}' could not be opened", path) from None

        self.add(source)

    @staticmethod
    def preprocess_line(line, prev=""):
        """Preprocesses a line from the shell, prepending prev (an unfinished earlier line). Returns the combined line
        and whether or not it still has unclosed parentheses, i.e. whether it continues onto the next line.
        """
        line = (prev + "\n" + line if prev else line).rstrip()

        depth = 0
        try:
            for token in Lexer(line):
                if token.type is TokenType.LParen:
                    depth += 1
                elif token.type is TokenType.RParen:
                    depth -= 1
        except MalformedLiteral:
            return line, False  # run it as is, so the error is reported against its own statement

        return line, depth > 0

    def add(self, source):
        """Adds source to the current session. Nothing is parsed until run is called."""
        self.parsers.append(Parser(Lexer(source)))

    def run(self):
        """Runs every pending statement in order. Errors are passed to the error handler one statement at a time, so
        a non-fatal handler resumes with the next statement.
        """
        while self.parsers:
            parser = self.parsers[0]

            with self.error_handler:
                statement = parser.next_statement()
                if statement is None:
                    self.parsers.popleft()
                    continue

                Interpreter(self.stream).execute(statement)
                self.executed += 1
