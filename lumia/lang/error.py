"""Error handling for the Lumia language. Only GenericExceptions should be encountered during running: if another type
of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

SyntaxExceptions (unexpected tokens, unterminated constructs, malformed literals) are recoverable at the statement
boundary. Unreadable source files are plain GenericExceptions and are always fatal in file mode.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be used to throw a Lumia error. msg is a str.format template whose
    slots are filled with the (bolded) exprs.
    """

    def __init__(self, msg, exprs=None, internal=False):
        """Parses args for GenericException."""
        if exprs is None:
            exprs = ()
        if isinstance(exprs, str):
            exprs = [exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.plain = msg.format(*exprs)
        self.internal = internal

        super().__init__(self.plain)


class SyntaxException(GenericException):
    """Superclass for errors found while lexing or parsing a statement."""


class UnexpectedToken(SyntaxException):
    """A token that cannot appear where it was found."""


class UnterminatedConstruct(SyntaxException):
    """Input ended before a construct was closed."""


class MalformedLiteral(SyntaxException):
    """A literal whose text does not denote a value, e.g. '1.2.3'."""


class ErrorHandler:
    """Context manager that will report Lumia errors and either exit (fatal) or suppress them."""
    ERROR = "red"

    def __init__(self, fatal=True, stream=None):
        self.fatal = fatal
        self.stream = stream
        self.path = None
        self.errors = 0

    def register_file(self, path):
        """Registers path as the origin of subsequent errors."""
        self.path = path

    def throw(self, error):
        """Throws error, which must be a GenericException. Exits with status 1 if self.fatal."""
        error_msg = ""
        if self.path:
            error_msg += colored(f"{self.path}: ", attrs=["bold"])

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg, file=self.stream if self.stream is not None else sys.stderr)

        self.errors += 1
        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
