"""
Lossless scanner for HCL native syntax.

Every character of the source ends up in exactly one token, so joining the
text of all tokens gives back the original source. Only as much of the
expression grammar is recognised as is needed to find where blocks,
attributes and expressions begin and end.
"""
import re
from typing import List, Tuple

from tflocals.hcl.diagnostics import Diagnostic, HCLSyntaxError
from tflocals.hcl.tokens import Pos, Range, Token, TokenType

BYTE_ORDER_MARK = "\ufeff"

THREE_CHAR_PUNCT = ("...",)
TWO_CHAR_PUNCT = ("==", "!=", "<=", ">=", "&&", "||", "=>", "::")
ONE_CHAR_PUNCT = "{}[]()=,.:?!+-*/%<>"

HEREDOC_RE = re.compile(r"<<(-?)([A-Za-z_][A-Za-z0-9_-]*)(\r?\n)")
NUMBER_RE = re.compile(r"[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?")
WHITESPACE_RE = re.compile(r"[ \t\r]+")


def is_ident_start(ch: str) -> bool:
    return ch == "_" or ch.isalpha()


def is_ident_part(ch: str) -> bool:
    return ch in "_-" or ch.isalnum()


class Scanner:
    """
    Splits source text into tokens.

    Args:
        text (str): The decoded source.
        filename (str): Name used in diagnostics.
        start (Pos): Position of the first character.
    """

    def __init__(self, text: str, filename: str, start: Pos = Pos()) -> None:
        self.text = text
        self.filename = filename
        self.offset = 0
        self.line = start.line
        self.column = start.column

    @property
    def pos(self) -> Pos:
        return Pos(self.line, self.column)

    def error(self, summary: str, detail: str, start: Pos, end: Pos = None) -> HCLSyntaxError:
        subject = Range(self.filename, start, end or Pos(start.line, start.column + 1))
        return HCLSyntaxError([Diagnostic(summary, detail, subject)])

    def scan(self) -> List[Token]:
        tokens = []
        if self.text.startswith(BYTE_ORDER_MARK):
            tokens.append(self._emit(TokenType.BOM, len(BYTE_ORDER_MARK)))

        while self.offset < len(self.text):
            token_type, length = self._next_token()
            tokens.append(self._emit(token_type, length))

        tokens.append(Token(TokenType.EOF, "", self.pos, self.pos))
        return tokens

    def _emit(self, token_type: TokenType, length: int) -> Token:
        start = self.pos
        text = self.text[self.offset:self.offset + length]
        for ch in text:
            if ch == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
        self.offset += length
        return Token(token_type, text, start, self.pos)

    def _next_token(self) -> Tuple[TokenType, int]:
        text, i = self.text, self.offset
        ch = text[i]

        if text.startswith("\r\n", i):
            return TokenType.NEWLINE, 2
        if ch == "\n":
            return TokenType.NEWLINE, 1

        match = WHITESPACE_RE.match(text, i)
        if match:
            # A carriage return is only whitespace when it does not start a CRLF.
            end = match.end()
            if text.startswith("\r\n", end - 1):
                end -= 1
            if end > i:
                return TokenType.WHITESPACE, end - i

        if ch == "#" or text.startswith("//", i):
            end = i
            while end < len(text) and text[end] != "\n":
                end += 1
            if end > i and text[end - 1] == "\r" and end < len(text):
                end -= 1
            return TokenType.COMMENT, end - i

        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end < 0:
                raise self.error(
                    "Unterminated comment",
                    "There is no closing marker for this multi-line comment.",
                    self.pos)
            return TokenType.COMMENT, end + 2 - i

        if ch == '"':
            return TokenType.STRING, self._scan_quoted(i) - i

        if text.startswith("<<", i):
            heredoc = HEREDOC_RE.match(text, i)
            if heredoc:
                return TokenType.HEREDOC, self._scan_heredoc(heredoc) - i

        if ch.isdigit():
            return TokenType.NUMBER, NUMBER_RE.match(text, i).end() - i

        if is_ident_start(ch):
            end = i + 1
            while end < len(text) and is_ident_part(text[end]):
                end += 1
            return TokenType.IDENT, end - i

        for punct in THREE_CHAR_PUNCT + TWO_CHAR_PUNCT:
            if text.startswith(punct, i):
                return TokenType.PUNCT, len(punct)
        if ch in ONE_CHAR_PUNCT:
            return TokenType.PUNCT, 1

        raise self.error(
            "Invalid character",
            f"This character is not used within the language: {ch!r}.",
            self.pos)

    def _scan_quoted(self, i: int) -> int:
        """
        Returns the offset just past the closing quote of the template that
        opens at offset i.
        """
        text = self.text
        j = i + 1
        while j < len(text):
            ch = text[j]
            if ch == "\\":
                j += 2
            elif ch == '"':
                return j + 1
            elif ch == "\n":
                break
            elif text.startswith(("$${", "%%{"), j):
                j += 3
            elif text.startswith(("${", "%{"), j):
                j = self._scan_interpolation(j + 2)
            else:
                j += 1

        raise self.error(
            "Unterminated template string",
            "No closing marker was found for the string.",
            self.pos)

    def _scan_interpolation(self, j: int) -> int:
        text = self.text
        depth = 1
        while j < len(text):
            ch = text[j]
            if ch == '"':
                j = self._scan_quoted(j)
                continue
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return j + 1
            j += 1

        raise self.error(
            "Unterminated template string",
            "No closing brace was found for a template interpolation sequence.",
            self.pos)

    def _scan_heredoc(self, introducer: re.Match) -> int:
        text = self.text
        marker = introducer.group(2)
        line_start = introducer.end()
        while line_start < len(text):
            line_end = text.find("\n", line_start)
            if line_end < 0:
                line_end = len(text)
            line = text[line_start:line_end]
            if line.strip() == marker:
                return line_start + len(line.rstrip("\r"))
            line_start = line_end + 1

        raise self.error(
            "Unterminated heredoc",
            f"The heredoc introduced here has no closing {marker} marker.",
            self.pos)


def scan(text: str, filename: str, start: Pos = Pos()) -> List[Token]:
    return Scanner(text, filename, start).scan()
