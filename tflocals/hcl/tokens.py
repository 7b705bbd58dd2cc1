from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    BOM = "bom"
    WHITESPACE = "whitespace"
    NEWLINE = "newline"
    COMMENT = "comment"
    IDENT = "ident"
    NUMBER = "number"
    STRING = "string"
    HEREDOC = "heredoc"
    PUNCT = "punct"
    EOF = "eof"


# Tokens that never carry meaning for the structure of a body.
TRIVIA = (TokenType.BOM, TokenType.WHITESPACE, TokenType.COMMENT)

OPENING_BRACKETS = {"{": "}", "[": "]", "(": ")"}
CLOSING_BRACKETS = {v: k for k, v in OPENING_BRACKETS.items()}


@dataclass(frozen=True)
class Pos:
    """
    A position in a source file. Lines and columns start at 1.
    """
    line: int = 1
    column: int = 1


@dataclass(frozen=True)
class Range:
    filename: str
    start: Pos
    end: Pos

    def __str__(self) -> str:
        if self.start.line == self.end.line:
            return f"{self.filename}:{self.start.line},{self.start.column}-{self.end.column}"
        return (f"{self.filename}:{self.start.line},{self.start.column}-"
                f"{self.end.line},{self.end.column}")


@dataclass
class Token:
    type: TokenType
    text: str
    start: Pos
    end: Pos

    def is_punct(self, *values: str) -> bool:
        return self.type is TokenType.PUNCT and self.text in values

    @property
    def is_line_comment(self) -> bool:
        return self.type is TokenType.COMMENT and not self.text.startswith("/*")
