"""Token definitions for the Lumia lexer. Tokens carry no source position: they are produced one at a time and are
consumed by the parser immediately.
"""

from enum import IntEnum, auto
from typing import NamedTuple, Optional, Union

from lumia.lang.numerical import display


class TokenType(IntEnum):
    Show = auto()
    Identifier = auto()
    Number = auto()
    String = auto()

    Equals = auto()  # lexed, but no statement accepts it
    LParen = auto()
    RParen = auto()
    Comma = auto()

    EOF = auto()


class Token(NamedTuple):
    type: TokenType
    value: Optional[Union[str, float]] = None

    def describe(self) -> str:
        """Returns how this token is spelled in source, for error messages."""
        if self.type is TokenType.String:
            return f'"{self.value}"'
        if self.type is TokenType.Number:
            return display(self.value)
        if self.type is TokenType.Identifier:
            return self.value
        return SPELLINGS[self.type]

    def __repr__(self) -> str:
        if self.value is None:
            return f'<Token type={self.type.name}>'
        return f'<Token type={self.type.name} value={self.value!r}>'


KEYWORDS = {
    "show": TokenType.Show,
}

SINGLE_CHAR_TOKENS = {
    '=': TokenType.Equals,
    '(': TokenType.LParen,
    ')': TokenType.RParen,
    ',': TokenType.Comma,
}

SPELLINGS = {
    **{v: k for k, v in KEYWORDS.items()},
    **{v: k for k, v in SINGLE_CHAR_TOKENS.items()},
    TokenType.EOF: "end of input",
}
