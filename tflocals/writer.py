import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO, Optional, Union

from tflocals import hcl
from tflocals.errors import SeekError, TruncateError, WriteError
from tflocals.logs_helpers import log_call

LOG = logging.getLogger(__name__)


@log_call()
def save_document(fh: Optional[BinaryIO], document: hcl.Document) -> None:
    """
    Replaces the content of an open file with the serialized document.

    The file is truncated, rewound and written. Not crash safe: if writing
    fails after the truncate, the file is left empty.

    Raises:
        TruncateError: If the file cannot be truncated.
        SeekError: If the file cannot be rewound.
        WriteError: If the document cannot be written.
    """
    if fh is None:
        raise TruncateError("failed to truncate file: no file handle given")

    try:
        fh.truncate(0)
    except (OSError, ValueError) as e:
        raise TruncateError(f"failed to truncate file: {e}") from e

    try:
        fh.seek(0, os.SEEK_SET)
    except (OSError, ValueError) as e:
        raise SeekError(f"failed to seek the start of file: {e}") from e

    try:
        written = document.write_to(fh)
        fh.flush()
    except (OSError, ValueError) as e:
        LOG.error("Writing failed after the file was truncated, its content is lost")
        raise WriteError(f"failed to write to file: {e}") from e

    LOG.debug("Wrote %d bytes", written)


@log_call()
def save_document_atomic(file_path: Union[str, Path], document: hcl.Document) -> None:
    """
    Writes the serialized document to a temporary file next to
    ``file_path`` and renames it over ``file_path``.

    The original permission bits are kept. The file is replaced, not
    rewritten, so hard links to it are not updated.

    Raises:
        WriteError: If any step fails; the original file is left as it was.
    """
    file_path = Path(file_path)
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{file_path.name}.", suffix=".tmp",
                                        dir=file_path.parent)
    except OSError as e:
        raise WriteError(f"failed to create temporary file: {e}") from e

    try:
        with os.fdopen(fd, "wb") as tmp:
            document.write_to(tmp)
            tmp.flush()
            os.fsync(tmp.fileno())
        shutil.copymode(file_path, tmp_name)
        os.replace(tmp_name, file_path)
    except OSError as e:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise WriteError(f"failed to write to file: {e}") from e

    LOG.debug("Replaced %s", file_path)
