import logging
from typing import List, Optional, Union

from tflocals.hcl.diagnostics import Diagnostic, HCLSyntaxError
from tflocals.hcl.nodes import Attribute, Block, Body, Document
from tflocals.hcl.scanner import scan
from tflocals.hcl.tokens import (
    CLOSING_BRACKETS,
    OPENING_BRACKETS,
    TRIVIA,
    Pos,
    Range,
    Token,
    TokenType,
)

LOG = logging.getLogger(__name__)

BLOCK_DEFINITION_DETAIL = ('A block definition must have block content delimited by "{" and "}", '
                           'starting on the same line as the block header.')
ARGUMENT_REQUIRED_DETAIL = "An argument or block definition is required here."


class Parser:
    """
    Builds the body tree of a file from its token stream.

    The parser only checks the structure of bodies: blocks, attributes,
    bracket nesting inside expressions and the newlines that terminate
    definitions. Expressions themselves are kept as opaque token runs.
    """

    def __init__(self, tokens: List[Token], filename: str) -> None:
        self.tokens = tokens
        self.filename = filename
        self.index = 0

    def peek(self, offset: int = 0) -> Token:
        return self.tokens[min(self.index + offset, len(self.tokens) - 1)]

    def next(self) -> Token:
        token = self.peek()
        if token.type is not TokenType.EOF:
            self.index += 1
        return token

    def error(self, summary: str, detail: str, token: Token) -> HCLSyntaxError:
        subject = Range(self.filename, token.start, token.end)
        return HCLSyntaxError([Diagnostic(summary, detail, subject)])

    def take_whitespace(self) -> List[Token]:
        taken = []
        while self.peek().type is TokenType.WHITESPACE:
            taken.append(self.next())
        return taken

    def take_inline_trivia(self) -> List[Token]:
        taken = []
        while self.peek().type in TRIVIA and not self.peek().is_line_comment:
            taken.append(self.next())
        return taken

    def parse_file(self) -> Body:
        return self.parse_body(opener=None)

    def parse_body(self, opener: Optional[Token]) -> Body:
        parts = []
        seen = {}

        while True:
            token = self.peek()
            if token.type in TRIVIA or token.type is TokenType.NEWLINE:
                parts.append(self.next())
                continue

            if token.type is TokenType.EOF:
                if opener is not None:
                    raise self.error(
                        "Unclosed configuration block",
                        "There is no closing brace for this block before the end of the file. "
                        "This may be caused by incorrect brace nesting elsewhere in this file.",
                        opener)
                return Body(parts)

            if token.is_punct("}") and opener is not None:
                return Body(parts)

            if token.type is not TokenType.IDENT:
                raise self.error("Argument or block definition required", ARGUMENT_REQUIRED_DETAIL, token)

            item = self.parse_item()
            if isinstance(item, Attribute):
                previous = seen.get(item.name)
                if previous is not None:
                    where = Range(self.filename, previous.head[0].start, previous.head[0].end)
                    raise self.error(
                        "Attribute redefined",
                        f'The argument "{item.name}" was already set at {where}. '
                        "Each argument may be set only once.",
                        item.head[0])
                seen[item.name] = item
            parts.append(item)

    def parse_item(self) -> Union[Attribute, Block]:
        name = self.next()
        head = [name] + self.take_whitespace()

        if self.peek().is_punct("="):
            head.append(self.next())
            head.extend(self.take_inline_trivia())
            return Attribute(head, self.parse_expression())

        return self.parse_block(head)

    def parse_block(self, header: List[Token]) -> Block:
        has_labels = False
        while True:
            token = self.peek()
            if token.type in (TokenType.STRING, TokenType.IDENT):
                has_labels = True
                header.append(self.next())
                header.extend(self.take_whitespace())
            elif token.is_punct("{"):
                header.append(self.next())
                break
            elif has_labels or token.type not in (TokenType.NEWLINE, TokenType.EOF):
                raise self.error("Invalid block definition", BLOCK_DEFINITION_DETAIL, token)
            else:
                raise self.error(
                    "Argument or block definition required",
                    ARGUMENT_REQUIRED_DETAIL + ' To set an argument, use the equals sign "=" '
                    "to introduce the argument value.",
                    header[0])

        lookahead = 0
        while self.peek(lookahead).type in TRIVIA and not self.peek(lookahead).is_line_comment:
            lookahead += 1
        if self.peek(lookahead).type is TokenType.IDENT:
            body = self.parse_single_attribute_body()
        else:
            body = self.parse_body(opener=header[-1])
        block = Block(header, body, self.next())

        lookahead = 0
        while self.peek(lookahead).type in TRIVIA:
            lookahead += 1
        trailing = self.peek(lookahead)
        if trailing.type not in (TokenType.NEWLINE, TokenType.EOF) and not trailing.is_punct("}"):
            raise self.error(
                "Missing newline after block definition",
                "A block definition must end with a newline.",
                trailing)
        return block

    def parse_single_attribute_body(self) -> Body:
        """
        Parses the body of a block that has content on its opening line.

        Such a body holds exactly one argument and the closing brace must
        follow it on the same line.
        """
        parts = self.take_inline_trivia()

        name = self.peek()
        lookahead = 1
        while self.peek(lookahead).type is TokenType.WHITESPACE:
            lookahead += 1
        if not self.peek(lookahead).is_punct("="):
            raise self.error(
                "Argument definition required",
                "A single-line block definition can contain only a single argument. To define a "
                "nested block, place it on a line of its own within its parent block.",
                name)

        parts.append(self.parse_item())
        parts.extend(self.take_inline_trivia())

        if not self.peek().is_punct("}"):
            raise self.error(
                "Invalid single-argument block definition",
                "A single-line block definition must end with a closing brace immediately "
                "after its single argument definition.",
                self.peek())
        return Body(parts)

    def parse_expression(self) -> List[Token]:
        expression = []
        brackets = []

        while True:
            token = self.peek()
            if token.type is TokenType.EOF:
                if brackets:
                    opener = brackets[-1]
                    raise self.error(
                        "Unclosed bracket",
                        f'There is no closing "{OPENING_BRACKETS[opener.text]}" for this '
                        f'"{opener.text}" before the end of the file.',
                        opener)
                break

            if not brackets:
                if token.type is TokenType.NEWLINE or token.is_line_comment or token.is_punct("}"):
                    break
                if token.is_punct("="):
                    raise self.error(
                        "Missing newline after argument",
                        "An argument definition must end with a newline.",
                        token)

            if token.type is TokenType.PUNCT:
                if token.text in OPENING_BRACKETS:
                    brackets.append(token)
                elif token.text in CLOSING_BRACKETS:
                    if not brackets or brackets[-1].text != CLOSING_BRACKETS[token.text]:
                        raise self.error(
                            "Unexpected closing bracket",
                            f'This "{token.text}" does not close any open bracket.',
                            token)
                    brackets.pop()

            expression.append(self.next())

        while expression and expression[-1].type in TRIVIA:
            expression.pop()
            self.index -= 1

        if not expression:
            raise self.error(
                "Invalid expression",
                "Expected the start of an expression, but found an invalid expression token.",
                self.peek())
        return expression


def parse(src: Union[bytes, str], filename: str, start: Pos = Pos()) -> Document:
    """
    Parses HCL native syntax into an editable document.

    Args:
        src (Union[bytes, str]): The source, bytes are decoded as UTF-8.
        filename (str): Name used in diagnostics.
        start (Pos): Position of the first character of ``src``.

    Returns:
        Document: The parsed document.

    Raises:
        HCLSyntaxError: If the source is not valid.
    """
    if isinstance(src, bytes):
        try:
            text = src.decode("utf-8")
        except UnicodeDecodeError as e:
            raise HCLSyntaxError([Diagnostic(
                "Invalid UTF-8",
                f"The file contains an invalid UTF-8 sequence at byte offset {e.start}.",
                Range(filename, start, start),
            )]) from e
    else:
        text = src

    tokens = scan(text, filename, start)
    LOG.debug("Scanned %d tokens from %s", len(tokens), filename)
    return Document(Parser(tokens, filename).parse_file(), filename)
