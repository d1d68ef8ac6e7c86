# -*- coding: utf-8 -*-

# file    :  common/policy.py
# project :  nativewhich
# license :  MIT
# check repository for more information

"""
Output policies: usage text, messages and exit codes of native `which` tools
"""

from typing import Dict, Optional

from dataclasses import dataclass

from .exception import NativeWhichException

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass(frozen=True)
class OutputPolicy:
    name: str
    usage: str  # may contain {prog}
    illegal_option: Optional[str]  # may contain {prog} and {flag}
    illegal_option_exit: int
    usage_without_names: bool
    not_found_line: Optional[str]  # may contain {name}
    some_missing_exit: int
    none_found_exit: int
    empty_path_message: Optional[str]
    empty_path_exit: int

    def format_usage(self, prog: str) -> str:
        return self.usage.format(prog=prog)

    def format_illegal_option(self, prog: str, flag: str) -> Optional[str]:
        if self.illegal_option is None:
            return None
        return self.illegal_option.format(prog=prog, flag=flag)

    def format_not_found(self, name: str) -> Optional[str]:
        if self.not_found_line is None:
            return None
        return self.not_found_line.format(name=name)


POLICIES: Dict[str, OutputPolicy] = {
    "darwin": OutputPolicy(
        name="darwin",
        usage="usage: which [-as] program ...",
        illegal_option="{prog}: illegal option -- {flag}",
        illegal_option_exit=EXIT_FAILURE,
        usage_without_names=True,
        not_found_line=None,
        some_missing_exit=EXIT_FAILURE,
        none_found_exit=EXIT_FAILURE,
        empty_path_message=None,
        empty_path_exit=EXIT_FAILURE,
    ),
    "linux": OutputPolicy(
        name="linux",
        usage="Usage: {prog} [-as] args",
        illegal_option="Illegal option -{flag}",
        illegal_option_exit=2,
        usage_without_names=False,
        not_found_line=None,
        some_missing_exit=EXIT_FAILURE,
        none_found_exit=EXIT_FAILURE,
        empty_path_message=None,
        empty_path_exit=EXIT_FAILURE,
    ),
    "openbsd": OutputPolicy(
        name="openbsd",
        usage="usage: which [-a] name ...",
        illegal_option="which: unknown option -- {flag}",
        illegal_option_exit=EXIT_FAILURE,
        usage_without_names=True,
        not_found_line="which: {name}: Command not found.",
        some_missing_exit=EXIT_FAILURE,
        none_found_exit=2,
        empty_path_message=None,
        empty_path_exit=EXIT_FAILURE,
    ),
    "portable": OutputPolicy(
        name="portable",
        usage="usage: which [-as] program ...",
        illegal_option=None,
        illegal_option_exit=EXIT_FAILURE,
        usage_without_names=True,
        not_found_line=None,
        some_missing_exit=2,
        none_found_exit=2,
        empty_path_message="which: search path is empty",
        empty_path_exit=3,
    ),
}


def default_policy_name(platform: str) -> str:
    """
    Maps `sys.platform` value to the name of a policy.
    """

    if platform == "darwin":
        return "darwin"
    if platform.startswith("linux"):
        return "linux"
    if platform.startswith("openbsd"):
        return "openbsd"
    return "portable"


def get_policy(name: str) -> OutputPolicy:
    try:
        return POLICIES[name.lower()]
    except KeyError as e:
        known = ", ".join(sorted(POLICIES))
        raise NativeWhichException(
            f"unknown output policy '{name}', expected one of: {known}"
        ) from e
