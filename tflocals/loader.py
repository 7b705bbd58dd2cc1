import logging
import os
from pathlib import Path
from typing import BinaryIO, Optional, Union

from tflocals import hcl
from tflocals.errors import FileAccessError, ParseError, ReadError
from tflocals.logs_helpers import log_call

LOG = logging.getLogger(__name__)


def open_for_update(file_path: Union[str, Path]) -> BinaryIO:
    """
    Opens a file for reading and writing in place, without truncating it.

    Raises:
        FileAccessError: If the file does not exist or is not both readable
            and writable.
    """
    try:
        return open(file_path, "r+b")
    except OSError as e:
        raise FileAccessError(str(e)) from e


def handle_name(fh: BinaryIO) -> str:
    name = getattr(fh, "name", None)
    if isinstance(name, (str, bytes, os.PathLike)):
        return os.path.basename(os.fsdecode(name))
    return "<unnamed>"


@log_call()
def load_document(fh: Optional[BinaryIO]) -> hcl.Document:
    """
    Reads the rest of an open file and parses it.

    The file is expected to be positioned at its start: exactly as many
    bytes as the file holds are read.

    Args:
        fh (Optional[BinaryIO]): The open file.

    Returns:
        hcl.Document: The parsed document.

    Raises:
        FileAccessError: If the handle is missing, closed or cannot be stat'd.
        ReadError: If fewer bytes than the file size could be read.
        ParseError: If the content is not valid HCL.
    """
    if fh is None:
        raise FileAccessError("failed to get file info: no file handle given")

    try:
        size = os.fstat(fh.fileno()).st_size
    except (OSError, ValueError) as e:
        raise FileAccessError(f"failed to get file info: {e}") from e

    try:
        content = fh.read(size)
    except (OSError, ValueError) as e:
        raise ReadError(f"failed to read file content: {e}") from e

    if len(content) < size:
        raise ReadError(f"failed to read file content: expected {size} bytes, read {len(content)}")

    filename = handle_name(fh)
    try:
        document = hcl.parse(content, filename, hcl.Pos(line=1, column=1))
    except hcl.HCLSyntaxError as e:
        raise ParseError(e.diagnostics) from e

    LOG.debug("Loaded %s (%d bytes, %d top-level blocks)", filename, size, len(document.body.blocks))
    return document
