"""Executes Lumia statements. The only observable effect of a statement is the line it prints.

There is no variable environment: an Identifier evaluates to its own spelling, standing in for the value a variable
would have.
"""

import sys

from lumia.lang.numerical import display
from lumia.lang.syntax import Identifier, Number, Show, StringLiteral


class Interpreter:
    """Stateless statement executor. Lines are written to stream (sys.stdout if not given)."""

    def __init__(self, stream=None):
        self.stream = stream

    def execute(self, node):
        """Prints the line for node. Nodes other than Show are ignored."""
        line = self.render(node)
        if line is not None:
            print(line, file=self.stream if self.stream is not None else sys.stdout)

    def render(self, node):
        """Returns the line node would print, or None if node is not a Show."""
        if not isinstance(node, Show):
            return None
        return " ".join(self.evaluate(arg) for arg in node.arguments)

    @staticmethod
    def evaluate(node):
        """Returns the display string of a leaf node."""
        if isinstance(node, StringLiteral):
            return node.text
        if isinstance(node, Number):
            return display(node.value)
        if isinstance(node, Identifier):
            return node.name  # placeholder for variables
        return ""
