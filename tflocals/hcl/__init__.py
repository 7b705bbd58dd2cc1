"""
Format preserving reader and writer for HCL native syntax files.

``parse`` turns the bytes of a file into a :class:`Document`; after editing,
``Document.to_bytes`` renders it back, byte for byte identical everywhere
except where values were replaced.
"""
from tflocals.hcl.diagnostics import Diagnostic, HCLSyntaxError, format_diagnostics
from tflocals.hcl.literals import quote_string, unquote_string
from tflocals.hcl.nodes import Attribute, Block, Body, Document
from tflocals.hcl.parser import parse
from tflocals.hcl.tokens import Pos, Range

__all__ = [
    "Attribute",
    "Block",
    "Body",
    "Diagnostic",
    "Document",
    "HCLSyntaxError",
    "Pos",
    "Range",
    "format_diagnostics",
    "parse",
    "quote_string",
    "unquote_string",
]
