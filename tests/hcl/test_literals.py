import pytest

from tflocals.hcl import quote_string, unquote_string


@pytest.mark.parametrize("value, literal", [
    ("v2.55.4", '"v2.55.4"'),
    ("", '""'),
    ('say "hi"', '"say \\"hi\\""'),
    ("C:\\temp", '"C:\\\\temp"'),
    ("a\nb\tc\r", '"a\\nb\\tc\\r"'),
    ("${var.x}", '"$${var.x}"'),
    ("%{ if x }", '"%%{ if x }"'),
    ("$5 and 100%", '"$5 and 100%"'),
    ("\x00", '"\\u0000"'),
    ("héllo wörld", '"héllo wörld"'),
])
def test_quote_string(value, literal):
    assert quote_string(value) == literal


@pytest.mark.parametrize("value", ["v2.55.4", 'a "quoted" \\ value', "${not.interpolated}", "\x1b[0m"])
def test_quoted_values_read_back(value):
    assert unquote_string(quote_string(value)) == value


@pytest.mark.parametrize("literal", [
    '"${var.env}-svc"',
    '"%{ if true }x%{ endif }"',
    "bare",
    '"\\q"',
    '"\\u12"',
])
def test_unquote_rejects_templates_and_malformed_literals(literal):
    assert unquote_string(literal) is None


def test_unquote_unicode_escapes():
    assert unquote_string('"\\u00e9\\U0001F600"') == "é\U0001F600"
