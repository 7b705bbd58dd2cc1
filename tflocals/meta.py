from importlib.metadata import PackageNotFoundError, version
import logging
from typing import Optional


LOG = logging.getLogger(__name__)


def get_version() -> Optional[str]:
    """
    Get the version of the tflocals package.

    Returns:
      Optional[str]: The version if the package is installed, otherwise None.
    """
    try:
        return version("tflocals")
    except PackageNotFoundError:
        LOG.debug("Unable to get tflocals version.")
        return None
