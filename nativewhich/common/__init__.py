# -*- coding: utf-8 -*-

# file    :  common/__init__.py
# project :  nativewhich
# license :  MIT
# check repository for more information

from .which_argparse import WhichArgumentParser, ParsedArgs, ParseFailure
from .fs_utils import resolve, split_search_path
from .policy import OutputPolicy, get_policy, default_policy_name
