from typing import Optional

SIMPLE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
SIMPLE_UNESCAPES = {v[1]: k for k, v in SIMPLE_ESCAPES.items()}


def quote_string(value: str) -> str:
    """
    Renders a Python string as an HCL quoted string literal.

    Template introducers are doubled so the result is always read back as
    the literal text, never as an interpolation or directive.
    """
    out = ['"']
    i = 0
    while i < len(value):
        ch = value[i]
        if ch in SIMPLE_ESCAPES:
            out.append(SIMPLE_ESCAPES[ch])
        elif ch in "$%" and value.startswith("{", i + 1):
            out.append(ch + ch)
        elif not ch.isprintable():
            code = ord(ch)
            out.append(f"\\u{code:04x}" if code <= 0xFFFF else f"\\U{code:08x}")
        else:
            out.append(ch)
        i += 1
    out.append('"')
    return "".join(out)


def unquote_string(literal: str) -> Optional[str]:
    """
    Decodes a quoted string literal.

    Returns None when the literal is not a plain string, that is when it
    holds a template interpolation or directive, or when it is malformed.
    """
    if len(literal) < 2 or literal[0] != '"' or literal[-1] != '"':
        return None

    body = literal[1:-1]
    out = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\":
            esc = body[i + 1:i + 2]
            if esc in SIMPLE_UNESCAPES:
                out.append(SIMPLE_UNESCAPES[esc])
                i += 2
                continue
            width = {"u": 4, "U": 8}.get(esc)
            digits = body[i + 2:i + 2 + width] if width else ""
            if not width or len(digits) != width:
                return None
            try:
                out.append(chr(int(digits, 16)))
            except ValueError:
                return None
            i += 2 + width
        elif body.startswith(("$${", "%%{"), i):
            out.append(ch + "{")
            i += 3
        elif body.startswith(("${", "%{"), i):
            return None
        else:
            out.append(ch)
            i += 1
    return "".join(out)
