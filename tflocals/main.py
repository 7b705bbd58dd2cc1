import logging
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

from tflocals.errors import (
    AttributeNotFoundError,
    FileAccessError,
    ParseError,
    ReadError,
    SaveError,
    UpdateHclFileError,
)
from tflocals.loader import load_document, open_for_update
from tflocals.models import Target
from tflocals.updater import update_attribute
from tflocals.writer import save_document, save_document_atomic

LOG = logging.getLogger(__name__)


@contextmanager
def closing_logged(fh: BinaryIO, logger: logging.Logger) -> Iterator[BinaryIO]:
    """
    Closes ``fh`` on exit. A failure to close is logged and does not
    replace an exception raised inside the block.
    """
    try:
        yield fh
    finally:
        try:
            fh.close()
        except OSError as e:
            logger.error("Error closing file %s: %s", getattr(fh, "name", fh), e)


def update_hcl_file(file_path: Union[str, Path], attribute_name: str, value: str,
                    atomic: bool = False, logger: Optional[logging.Logger] = None) -> None:
    """
    Loads, updates and saves a file, stopping at the first failing stage.

    Args:
        file_path (Union[str, Path]): The file to update in place.
        attribute_name (str): The local to update.
        value (str): Its new value.
        atomic (bool): Save through a temporary file and a rename.
        logger (Optional[logging.Logger]): Where to report progress and close failures.

    Raises:
        UpdateHclFileError: Naming the failed stage, chained to the stage error.
    """
    log = logger or LOG

    try:
        fh = open_for_update(file_path)
    except FileAccessError as e:
        raise UpdateHclFileError("failed to open file", e) from e

    with closing_logged(fh, log):
        try:
            document = load_document(fh)
        except (FileAccessError, ReadError, ParseError) as e:
            raise UpdateHclFileError("failed to parse HCL file", e) from e
        log.debug("Parsed %s", file_path)

        try:
            update_attribute(document, attribute_name, value)
        except AttributeNotFoundError as e:
            raise UpdateHclFileError("failed to update local", e) from e
        log.debug("Updated local %s", attribute_name)

        try:
            if atomic:
                save_document_atomic(file_path, document)
            else:
                save_document(fh, document)
        except SaveError as e:
            raise UpdateHclFileError("failed to save to file", e) from e
        log.debug("Saved %s", file_path)


def run(target: Target, atomic: bool = False, logger: Optional[logging.Logger] = None) -> None:
    update_hcl_file(target.file_path, target.attribute_name, target.value, atomic=atomic, logger=logger)
