"""Runs .lum files, or the interactive shell, with the Lumia interpreter. Also uses the error handling context manager.
Called from the lumia console script and from `python -m lumia`.
"""

import argparse
import sys

from lumia.lang.error import ErrorHandler
from lumia.lang.session import Session
from lumia.lang.shell import Shell


def build_parser():
    """Returns the argparse parser for the lumia command."""
    parser = argparse.ArgumentParser(prog="lumia", description="Lumia interpreter")
    parser.add_argument("file", help="file to interpret and run", nargs="?")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="start the interactive shell (after running file, if given)")
    parser.add_argument("-k", "--keep-going", action="store_true",
                        help="report syntax errors and continue with the next statement instead of stopping")
    return parser


def main(argv=None):
    """Runs the Lumia interpreter. Returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.file is None and not args.interactive:
        parser.print_usage(sys.stderr)
        return 1

    with ErrorHandler() as error_handler:
        if args.interactive:
            sess = Session(error_handler, Session.SH_FILE, cmd_line=True)
            if args.file is not None:
                with error_handler:
                    sess.load(args.file)
                sess.run()

            Shell(sess).cmdloop()
            return 0

        sess = Session(error_handler, args.file, cmd_line=False)  # unreadable files are always fatal
        error_handler.fatal = not args.keep_going
        sess.run()

    return 1 if error_handler.errors else 0
