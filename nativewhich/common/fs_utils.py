# -*- coding: utf-8 -*-

# file    :  common/fs_utils.py
# project :  nativewhich
# license :  MIT
# check repository for more information

from typing import List, Optional

import os
import stat

import logging

log = logging.getLogger(__name__)

EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def split_search_path(value: Optional[str], separator: str = os.pathsep) -> List[str]:
    """
    Split a PATH-like value into directories, keeping their order.
    Empty or missing value gives an empty list. Empty entries are kept:
    they join to a relative candidate, i.e. the current directory.
    """

    if not value:
        return []

    return value.split(separator)


def resolve(name: str, directory: str) -> Optional[str]:
    """
    Returns path of `name` inside `directory` (a leading separator in `name`
    does not escape `directory`) if it is a regular file with
    at least one executable bit set, otherwise None.
    """

    candidate = os.path.join(directory, name.lstrip(os.sep))

    try:
        st = os.stat(candidate)
    except (OSError, ValueError) as e:
        log.debug("%s: %s", candidate, e)
        return None

    if not stat.S_ISREG(st.st_mode):
        log.debug("%s: not a regular file", candidate)
        return None

    if st.st_mode & EXEC_BITS == 0:
        log.debug("%s: not executable", candidate)
        return None

    return candidate
