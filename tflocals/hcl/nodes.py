from typing import BinaryIO, Dict, Iterator, List, Optional, Union

from tflocals.hcl.literals import quote_string, unquote_string
from tflocals.hcl.tokens import Token, TokenType


class Attribute:
    """
    A ``name = expression`` pair inside a body.

    Args:
        head (List[Token]): Tokens from the name up to, and including, the
            whitespace and inline comments that follow the equals sign.
        expression (List[Token]): Tokens of the value expression, without
            surrounding whitespace or trailing comments.
    """

    def __init__(self, head: List[Token], expression: List[Token]) -> None:
        self.head = head
        self.expression = expression

    @property
    def name(self) -> str:
        return self.head[0].text

    @property
    def expression_text(self) -> str:
        return "".join(token.text for token in self.expression)

    @property
    def string_value(self) -> Optional[str]:
        """
        The value when the expression is a bare quoted string, else None.
        """
        if len(self.expression) != 1 or self.expression[0].type is not TokenType.STRING:
            return None
        return unquote_string(self.expression[0].text)

    def set_string_value(self, value: str) -> None:
        """
        Replaces the whole value expression by a quoted string literal.
        """
        first, last = self.expression[0], self.expression[-1]
        self.expression = [Token(TokenType.STRING, quote_string(value), first.start, last.end)]

    def tokens(self) -> Iterator[Token]:
        yield from self.head
        yield from self.expression

    def __repr__(self) -> str:
        return f"Attribute({self.name!r}, {self.expression_text!r})"


class Block:
    """
    A block such as ``resource "aws_s3_bucket" "b" { ... }``.

    Args:
        header (List[Token]): Tokens from the type keyword up to, and
            including, the opening brace.
        body (Body): The block body.
        closing (Token): The closing brace.
    """

    def __init__(self, header: List[Token], body: "Body", closing: Token) -> None:
        self.header = header
        self.body = body
        self.closing = closing

    @property
    def type(self) -> str:
        return self.header[0].text

    @property
    def labels(self) -> List[str]:
        labels = []
        for token in self.header[1:]:
            if token.type is TokenType.STRING:
                labels.append(unquote_string(token.text))
            elif token.type is TokenType.IDENT:
                labels.append(token.text)
        return labels

    def tokens(self) -> Iterator[Token]:
        yield from self.header
        yield from self.body.tokens()
        yield self.closing

    def __repr__(self) -> str:
        return f"Block({self.type!r}, {self.labels!r})"


BodyPart = Union[Token, Attribute, Block]


class Body:
    """
    The content of a file or of a block: attributes and nested blocks in
    source order, interleaved with the whitespace, newline and comment
    tokens that separate them.
    """

    def __init__(self, parts: Optional[List[BodyPart]] = None) -> None:
        self.parts = parts if parts is not None else []

    @property
    def blocks(self) -> List[Block]:
        return [part for part in self.parts if isinstance(part, Block)]

    @property
    def attributes(self) -> Dict[str, Attribute]:
        return {part.name: part for part in self.parts if isinstance(part, Attribute)}

    def get_attribute(self, name: str) -> Optional[Attribute]:
        for part in self.parts:
            if isinstance(part, Attribute) and part.name == name:
                return part
        return None

    def tokens(self) -> Iterator[Token]:
        for part in self.parts:
            if isinstance(part, Token):
                yield part
            else:
                yield from part.tokens()


class Document:
    """
    A parsed configuration file that can be edited and written back out
    without disturbing the formatting of the parts that were not edited.
    """

    def __init__(self, body: Body, filename: str = "") -> None:
        self.body = body
        self.filename = filename

    def to_string(self) -> str:
        return "".join(token.text for token in self.body.tokens())

    def to_bytes(self) -> bytes:
        return self.to_string().encode("utf-8")

    def write_to(self, fh: BinaryIO) -> int:
        """
        Writes the serialized document to a binary file object.

        Returns:
            int: The number of bytes written.
        """
        data = self.to_bytes()
        written = fh.write(data)
        return len(data) if written is None else written

    def __repr__(self) -> str:
        return f"Document({self.filename!r}, blocks={len(self.body.blocks)})"
