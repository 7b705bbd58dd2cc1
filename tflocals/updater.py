import logging

from tflocals import hcl
from tflocals.constants import LOCALS_BLOCK_TYPE
from tflocals.errors import AttributeNotFoundError
from tflocals.logs_helpers import log_call

LOG = logging.getLogger(__name__)


@log_call(show_args=True)
def update_attribute(document: hcl.Document, attribute_name: str, value: str,
                     block_type: str = LOCALS_BLOCK_TYPE) -> None:
    """
    Sets an attribute of the first ``block_type`` block that defines it.

    Blocks are visited in document order and the search stops at the first
    match, later blocks defining the same attribute are left untouched.

    Args:
        document (hcl.Document): The document, updated in place.
        attribute_name (str): Name of the attribute to update.
        value (str): The new value, written as a quoted string.
        block_type (str): Type of the blocks to search.

    Raises:
        AttributeNotFoundError: If no such block defines the attribute.
    """
    for index, block in enumerate(document.body.blocks):
        if block.type != block_type:
            continue

        attribute = block.body.get_attribute(attribute_name)
        if attribute is None:
            continue

        if attribute.string_value is None:
            LOG.warning("Replacing non-string value of %s: %s", attribute_name, attribute.expression_text)
        LOG.debug("Updating %s in %s block #%d: %s -> %r",
                  attribute_name, block_type, index, attribute.expression_text, value)

        attribute.set_string_value(value)
        return

    raise AttributeNotFoundError(attribute_name)
