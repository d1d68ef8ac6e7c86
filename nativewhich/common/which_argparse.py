# -*- coding: utf-8 -*-

# file    :  common/which_argparse.py
# project :  nativewhich
# license :  MIT
# check repository for more information

from typing import List, Sequence, Tuple, Union

import argparse
from dataclasses import dataclass

from .exception import NativeWhichException


@dataclass(frozen=True)
class ParsedArgs:
    names: List[str]
    all_matches: bool
    silent: bool


@dataclass(frozen=True)
class ParseFailure:
    flag: str


ParseResult = Union[ParsedArgs, ParseFailure]


class WhichArgumentParser(argparse.ArgumentParser):
    """
    Parser that reports unknown options as data instead of printing and exiting.
    Options are scanned the way getopt(3) does it: clusters like -as are
    allowed and scanning stops at the first operand or at "--".
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("add_help", False)
        kwargs.setdefault("allow_abbrev", False)
        argparse.ArgumentParser.__init__(self, *args, **kwargs)

    def short_flags(self) -> str:
        flags = ""
        for action in self._actions:
            for option in action.option_strings:
                if len(option) == 2 and option[1] not in self.prefix_chars:
                    flags += option[1]
        return flags

    def split_options(self, argv: Sequence[str]) -> Tuple[List[str], List[str]]:
        options: List[str] = []
        for idx, arg in enumerate(argv):
            if arg == "--":
                return options, list(argv[idx + 1 :])
            if arg == "-" or not arg.startswith("-"):
                return options, list(argv[idx:])
            options.append(arg)
        return options, []

    def parse(self, argv: Sequence[str]) -> ParseResult:
        options, operands = self.split_options(argv)

        known = self.short_flags()
        for option in options:
            for flag in option[1:]:
                if flag not in known:
                    return ParseFailure(flag=flag)

        args = self.parse_args(options + ["--"] + operands)
        return ParsedArgs(
            names=list(args.names or []),
            all_matches=args.all_matches,
            silent=args.silent,
        )

    def error(self, message):
        raise NativeWhichException(message)


def create_argument_parser(prog: str = "which") -> WhichArgumentParser:
    parser = WhichArgumentParser(
        prog=prog,
        description="locate a program file in the user's path",
    )
    parser.add_argument(
        "-a",
        dest="all_matches",
        help="list all instances of program(s)",
        action="store_true",
    )
    parser.add_argument(
        "-s",
        dest="silent",
        help="no output, just return 0 if all of the executables are found, "
        "or 1 if some were found",
        action="store_true",
    )
    parser.add_argument(
        "names",
        nargs="*",
        metavar="program",
        help="program names to look up",
    )

    return parser
