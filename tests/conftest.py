import os

import pytest


@pytest.fixture
def hcl_file(tmp_path):
    """
    Returns a function writing ``content`` to a fresh ``.tf`` file.
    """
    def write(content, name="testhcl.tf"):
        path = tmp_path / name
        data = content.encode("utf-8") if isinstance(content, str) else content
        path.write_bytes(data)
        return path

    return write


requires_non_root = pytest.mark.skipif(
    hasattr(os, "geteuid") and os.geteuid() == 0,
    reason="file permissions are not enforced for root",
)
