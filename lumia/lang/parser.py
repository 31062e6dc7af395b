"""Recursive descent parser for the Lumia language, with a single token of lookahead.

```
<statement> ::= "show" "(" <args> ")"
<args>      ::= (<leaf> | ",")*            ; commas separate leaves, but are not strictly required
<leaf>      ::= <string> | <number> | <identifier>
```

next_statement has three outcomes: a Show node, None at the end of input, or a SyntaxException. After a
SyntaxException the parser has already skipped ahead to the next "show" keyword, so parsing can resume there.
"""

from lumia.lang.error import MalformedLiteral, SyntaxException, UnexpectedToken, UnterminatedConstruct
from lumia.lang.syntax import Identifier, Number, Show, StringLiteral
from lumia.lang.tokens import TokenType

LEAVES = {
    TokenType.String: StringLiteral,
    TokenType.Number: Number,
    TokenType.Identifier: Identifier,
}


class Parser:
    """Pulls Tokens from a Lexer and builds one statement at a time."""

    def __init__(self, lexer):
        self.lexer = lexer
        self.current = None  # primed on first use, so that lexing errors surface from next_statement

    def advance(self):
        """Replaces the lookahead with the next Token. The lookahead stays None if the lexer raises."""
        self.current = None
        self.current = self.lexer.next_token()

    def expect(self, type, message):
        """Consumes the lookahead if it is of the given type, otherwise raises."""
        if self.current.type is TokenType.EOF:
            raise UnterminatedConstruct("expected {} before end of input", message)
        if self.current.type is not type:
            raise UnexpectedToken("expected {}, got '{}'", (message, self.current.describe()))

        self.advance()

    def next_statement(self):
        """Returns the next statement, or None if there is no input left. Raises a SyntaxException if the statement is
        malformed.
        """
        try:
            if self.current is None:
                self.advance()

            if self.current.type is TokenType.EOF:
                return None
            if self.current.type is not TokenType.Show:
                raise UnexpectedToken(self.unexpected_message(), self.current.describe())

            return self.parse_show()

        except SyntaxException:
            self.synchronize()
            raise

    def parse_show(self):
        """Parses show(arg, ...). Assumes the lookahead is the show keyword."""
        self.advance()
        self.expect(TokenType.LParen, "'('")

        arguments = []
        while self.current.type not in (TokenType.RParen, TokenType.EOF):
            leaf = self.parse_leaf()
            if leaf is not None:
                arguments.append(leaf)
            elif self.current.type is not TokenType.Comma:
                raise UnexpectedToken(self.unexpected_message(), self.current.describe())

            if self.current.type is TokenType.Comma:
                self.advance()

        self.expect(TokenType.RParen, "')' to close show(")
        return Show(arguments)

    def parse_leaf(self):
        """Returns a leaf node for the lookahead and consumes it, or None (consuming nothing) if the lookahead is not a
        string, number or identifier.
        """
        node_type = LEAVES.get(self.current.type)
        if node_type is None:
            return None

        node = node_type(self.current.value)
        self.advance()
        return node

    def unexpected_message(self):
        """Message template for an unexpected lookahead."""
        if self.current.type is TokenType.Equals:
            return "unexpected '{}': assignment is not supported"
        return "unexpected '{}'"

    def synchronize(self):
        """Discards tokens up to the next show keyword or the end of input."""
        while self.current is None or self.current.type not in (TokenType.Show, TokenType.EOF):
            try:
                self.advance()
            except MalformedLiteral:
                continue  # the bad literal was consumed, and the statement it belongs to is already being dropped

    def __iter__(self):
        return self

    def __next__(self):
        statement = self.next_statement()
        if statement is None:
            raise StopIteration

        return statement
