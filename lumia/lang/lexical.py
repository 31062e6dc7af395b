"""Lexical analysis for the Lumia language. The Lexer is pull-based: each call to next_token scans just enough of the
source to produce one Token, so no token list is ever built.

Scanning rules, checked in order on the current character:

```
<whitespace> ::= " " | "\\t" | "\\n" | "\\r"         ; skipped
<single>     ::= "=" | "(" | ")" | ","
<number>     ::= ("0".."9" | ".")+                 ; greedy, validated only when converted
<string>     ::= '"' <char>* ('"' | <end>)          ; unterminated strings are accepted as-is
<identifier> ::= <letter> (<letter> | <digit> | "_")*  ; "show" is the only keyword
```

Any other character is skipped without producing a token.
"""

import string

from lumia.lang.numerical import number
from lumia.lang.tokens import Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS

WHITESPACE = " \t\n\r"
NUMERIC = string.digits + "."


class Lexer:
    """Character cursor over Lumia source that produces Tokens on demand."""

    def __init__(self, source):
        self.chars = iter(source)
        self.current_char = None
        self.advance()

    def advance(self):
        """Moves the cursor one character forward. current_char is None once the source is exhausted."""
        self.current_char = next(self.chars, None)

    def next_token(self):
        """Returns the next Token and advances past it. Returns EOF indefinitely once the source is exhausted."""
        while self.current_char is not None:
            char = self.current_char

            if char in WHITESPACE:
                self.advance()
            elif char in SINGLE_CHAR_TOKENS:
                self.advance()
                return Token(SINGLE_CHAR_TOKENS[char])
            elif char in NUMERIC:
                return self.number()
            elif char == '"':
                return self.string()
            elif char in string.ascii_letters:
                return self.identifier()
            else:
                self.advance()  # unknown characters are ignored

        return Token(TokenType.EOF)

    def number(self):
        """Scans a maximal run of digits and dots. Raises MalformedLiteral if the run is not a valid float; the run is
        consumed either way.
        """
        text = ""
        while self.current_char is not None and self.current_char in NUMERIC:
            text += self.current_char
            self.advance()

        return Token(TokenType.Number, number(text))

    def string(self):
        """Scans a double-quoted string. The quotes are not part of the value."""
        text = ""
        self.advance()  # opening quote

        while self.current_char is not None:
            if self.current_char == '"':
                self.advance()  # closing quote
                break

            text += self.current_char
            self.advance()

        return Token(TokenType.String, text)

    def identifier(self):
        """Scans an identifier or keyword."""
        text = ""
        while self.current_char is not None and (self.current_char.isalnum() or self.current_char == "_"):
            text += self.current_char
            self.advance()

        if text in KEYWORDS:
            return Token(KEYWORDS[text])

        return Token(TokenType.Identifier, text)

    def __iter__(self):
        return self

    def __next__(self):
        token = self.next_token()
        if token.type is TokenType.EOF:
            raise StopIteration

        return token
