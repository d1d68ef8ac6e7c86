#!/usr/bin/env python3

# file    :  tools/which.py
# project :  nativewhich
# license :  MIT
# check repository for more information

from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

import os
import sys
from dataclasses import dataclass, field

import logging

log = logging.getLogger(__name__)

from nativewhich.common import (
    OutputPolicy,
    ParseFailure,
    default_policy_name,
    get_policy,
    resolve,
    split_search_path,
)
from nativewhich.common.exception import NativeWhichException
from nativewhich.common.policy import EXIT_FAILURE, EXIT_SUCCESS
from nativewhich.common.which_argparse import create_argument_parser

PATH_VAR = "PATH"
POLICY_VAR = "NATIVEWHICH_POLICY"
DEBUG_VAR = "NATIVEWHICH_DEBUG"

_T = TypeVar("_T")


@dataclass(frozen=True)
class Config:
    policy: OutputPolicy
    search_path: Optional[str]
    log_level: int
    prog: str

    @classmethod
    def from_env(
        cls: Type[_T],
        environ: Mapping[str, str],
        prog: str,
        platform: str = sys.platform,
    ) -> _T:
        policy_name = environ.get(POLICY_VAR) or default_policy_name(platform)

        return cls(
            policy=get_policy(policy_name),
            search_path=environ.get(PATH_VAR),
            log_level=get_log_level(environ),
            prog=prog,
        )


@dataclass
class LookupResult:
    found: Dict[str, bool] = field(default_factory=dict)
    lines: List[str] = field(default_factory=list)


def main(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    prog: Optional[str] = None,
) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if environ is None:
        environ = os.environ
    if prog is None:
        prog = sys.argv[0]

    setup_logging(get_log_level(environ))

    try:
        config = Config.from_env(environ, prog)
    except NativeWhichException as e:
        log.error("wasn't able to configure which: %s", str(e))
        return EXIT_FAILURE

    log.debug("config=%s", str(config))
    policy = config.policy

    try:
        parsed = create_argument_parser(prog).parse(argv)
    except NativeWhichException as e:
        log.error("wasn't able to parse arguments: %s", str(e))
        print(policy.format_usage(config.prog), file=sys.stderr)
        return EXIT_FAILURE

    if isinstance(parsed, ParseFailure):
        log.debug("unknown option: %r", parsed.flag)
        message = policy.format_illegal_option(config.prog, parsed.flag)
        if message is not None:
            print(message, file=sys.stderr)
        print(policy.format_usage(config.prog), file=sys.stderr)
        return policy.illegal_option_exit

    if not parsed.names:
        if policy.usage_without_names:
            print(policy.format_usage(config.prog))
        return EXIT_FAILURE

    lines, exit_code = run(
        parsed.names,
        parsed.all_matches,
        parsed.silent,
        config.search_path,
        policy,
    )
    for line in lines:
        print(line)

    return exit_code


def get_log_level(environ: Mapping[str, str]) -> int:
    if environ.get(DEBUG_VAR):
        return logging.DEBUG
    return logging.WARNING


def setup_logging(log_level: int) -> None:
    logging.basicConfig(level=log_level, format="%(levelname)-8s | %(message)s")


def run(
    names: Sequence[str],
    all_matches: bool,
    silent: bool,
    search_path_value: Optional[str],
    policy: OutputPolicy,
) -> Tuple[List[str], int]:
    """
    Look up every name in the search path.
    Returns lines to print and exit code.
    """

    search_path = split_search_path(search_path_value)
    if not search_path:
        log.debug("search path is empty, nothing to look up")
        if silent or policy.empty_path_message is None:
            return [], policy.empty_path_exit
        return [policy.empty_path_message], policy.empty_path_exit

    result = lookup(names, search_path, all_matches, policy)
    exit_code = exit_code_for(result, silent, policy)

    if silent:
        return [], exit_code

    return result.lines, exit_code


def lookup(
    names: Sequence[str],
    search_path: Sequence[str],
    all_matches: bool,
    policy: OutputPolicy,
) -> LookupResult:
    result = LookupResult()

    for name in names:
        found = False

        for directory in search_path:
            path = resolve(name, directory)
            if path is None:
                continue

            log.debug("%s: found %s", name, path)
            found = True
            result.lines.append(path)

            if not all_matches:
                break

        result.found[name] = found

        if not found:
            log.debug("%s: not found in %d directories", name, len(search_path))
            not_found = policy.format_not_found(name)
            if not_found is not None:
                result.lines.append(not_found)

    return result


def exit_code_for(result: LookupResult, silent: bool, policy: OutputPolicy) -> int:
    statuses = result.found.values()

    if all(statuses):
        return EXIT_SUCCESS

    if silent:
        return EXIT_FAILURE

    if not any(statuses):
        return policy.none_found_exit

    return policy.some_missing_exit


if __name__ == "__main__":
    sys.exit(main())
