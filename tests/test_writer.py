import os
from unittest.mock import MagicMock, patch

import pytest

from tflocals.errors import SeekError, TruncateError, WriteError
from tflocals.hcl import parse
from tflocals.writer import save_document, save_document_atomic

from tests.resources import S3_BUCKET, UPDATED_LOCALS, VALID_LOCALS


@pytest.fixture
def document():
    return parse(S3_BUCKET, "main.tf")


def test_save_replaces_longer_content(hcl_file, document):
    path = hcl_file(VALID_LOCALS)

    with open(path, "r+b") as fh:
        fh.seek(0, os.SEEK_END)
        save_document(fh, document)

    assert path.read_text() == S3_BUCKET


def test_save_writes_updated_document(hcl_file):
    path = hcl_file(VALID_LOCALS)
    document = parse(VALID_LOCALS, "testhcl.tf")
    document.body.blocks[0].body.get_attribute("code_version").set_string_value("v2.55.4")

    with open(path, "r+b") as fh:
        save_document(fh, document)

    assert path.read_text() == UPDATED_LOCALS


def test_save_with_none_handle(document):
    with pytest.raises(TruncateError):
        save_document(None, document)


def test_save_with_closed_handle(hcl_file, document):
    fh = open(hcl_file(VALID_LOCALS), "r+b")
    fh.close()

    with pytest.raises(TruncateError, match="failed to truncate file"):
        save_document(fh, document)


def test_save_with_read_only_handle(hcl_file, document):
    path = hcl_file(VALID_LOCALS)

    with open(path, "rb") as fh:
        with pytest.raises(TruncateError):
            save_document(fh, document)

    assert path.read_text() == VALID_LOCALS


def test_seek_failure(document):
    fh = MagicMock()
    fh.seek.side_effect = OSError("illegal seek")

    with pytest.raises(SeekError, match="failed to seek the start of file: illegal seek"):
        save_document(fh, document)

    fh.truncate.assert_called_once_with(0)


def test_write_failure_is_reported_and_logged(document, caplog):
    fh = MagicMock()
    fh.write.side_effect = OSError("No space left on device")

    with pytest.raises(WriteError, match="failed to write to file: No space left on device"):
        save_document(fh, document)

    assert "content is lost" in caplog.text


def test_atomic_save(hcl_file, document):
    path = hcl_file(VALID_LOCALS)
    os.chmod(path, 0o640)

    save_document_atomic(path, document)

    assert path.read_text() == S3_BUCKET
    assert os.stat(path).st_mode & 0o777 == 0o640
    assert [p.name for p in path.parent.iterdir()] == [path.name]


def test_atomic_save_failure_keeps_original(hcl_file, document):
    path = hcl_file(VALID_LOCALS)

    with patch("tflocals.writer.os.replace", side_effect=OSError("cross-device link")):
        with pytest.raises(WriteError, match="cross-device link"):
            save_document_atomic(path, document)

    assert path.read_text() == VALID_LOCALS
    assert [p.name for p in path.parent.iterdir()] == [path.name]


def test_atomic_save_missing_directory(tmp_path, document):
    with pytest.raises(WriteError, match="failed to create temporary file"):
        save_document_atomic(tmp_path / "missing" / "main.tf", document)
