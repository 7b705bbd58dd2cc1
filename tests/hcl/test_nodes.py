import io

from tflocals.hcl import parse

from tests.resources import KITCHEN_SINK, SINGLE_LINE_LOCALS


def test_set_string_value_only_changes_the_literal():
    document = parse(KITCHEN_SINK.encode(), "main.tf")
    attribute = document.body.blocks[2].body.get_attribute("image_tag")

    attribute.set_string_value("2024.02.0")

    expected = KITCHEN_SINK.replace('"2024.01.1"', '"2024.02.0"')
    assert document.to_string() == expected
    assert attribute.string_value == "2024.02.0"


def test_set_string_value_replaces_a_whole_expression():
    document = parse(KITCHEN_SINK.encode(), "main.tf")
    attribute = document.body.blocks[2].body.get_attribute("tags")

    attribute.set_string_value("none")

    assert 'tags = "none"\n  ports   = [80, 443]' in document.to_string()
    assert "Team" not in document.to_string()


def test_set_string_value_keeps_trailing_comment():
    document = parse(b'locals {\n  a = "1" # keep me\n}\n', "main.tf")
    document.body.blocks[0].body.get_attribute("a").set_string_value("2")
    assert document.to_bytes() == b'locals {\n  a = "2" # keep me\n}\n'


def test_set_string_value_in_single_line_block():
    document = parse(SINGLE_LINE_LOCALS, "main.tf")
    document.body.blocks[0].body.get_attribute("code_version").set_string_value("v2.55.4")
    assert document.to_string() == 'locals { code_version = "v2.55.4" }\n'


def test_write_to_returns_byte_count():
    document = parse('locals {\n  name = "café"\n}\n'.encode(), "main.tf")
    buffer = io.BytesIO()

    written = document.write_to(buffer)

    assert written == len(buffer.getvalue())
    assert buffer.getvalue() == 'locals {\n  name = "café"\n}\n'.encode()


def test_repr():
    document = parse(KITCHEN_SINK.encode(), "main.tf")
    assert repr(document) == "Document('main.tf', blocks=4)"
    assert repr(document.body.blocks[1]) == "Block('variable', ['env'])"
    assert repr(document.body.blocks[1].body.get_attribute("type")) == "Attribute('type', 'string')"


def test_set_string_value_keeps_comment_before_the_value():
    document = parse(b'locals {\n  a = /* keep */ "1"\n}\n', "main.tf")
    attribute = document.body.blocks[0].body.get_attribute("a")

    assert attribute.string_value == "1"
    attribute.set_string_value("2")

    assert document.to_bytes() == b'locals {\n  a = /* keep */ "2"\n}\n'
