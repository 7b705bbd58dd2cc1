# -*- coding: utf-8 -*-

__author__ = """tflocals contributors"""

from tflocals.meta import get_version

VERSION = get_version()
