"""Command-line options that select which tests run, and test-name matching."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

_TERMINATORS = ("*", ",", '"', "'")
_SEPARATORS = (":", "'", '"', ",")


class OptionError(ValueError):
    """A command-line option was malformed or unknown."""


@dataclass
class Options:
    """Parsed test-selection options."""

    include_named: Optional[str] = None
    exclude_named: Optional[str] = None
    verbosity: int = 1
    list_tests: bool = False


def _take_value(argv: Sequence[str], index: int, what: str) -> tuple[str, int]:
    """Return the option's value and the index of the last argument consumed."""
    arg = argv[index]
    if arg[2:3] == "=":
        return arg[3:], index
    if index + 1 < len(argv):
        return argv[index + 1], index + 1
    raise OptionError(f"No Test String to {what} Matches For")


def parse_options(argv: Optional[Sequence[str]] = None) -> Options:
    """Parse ``argv`` (program name first) into :class:`Options`.

    ``-l`` asks for the test list and stops parsing; ``-n``/``-f`` include and
    ``-x`` exclude tests by name, given as ``-n=NAME`` or ``-n NAME``; ``-q`` and
    ``-v`` set quiet and verbose output. Arguments not starting with ``-`` are
    ignored.
    """
    if argv is None:
        argv = sys.argv
    args = list(argv)
    options = Options()

    index = 1
    while index < len(args):
        arg = args[index]
        if arg.startswith("-"):
            flag = arg[1:2]
            if flag == "l":
                options.list_tests = True
                return options
            if flag in ("n", "f"):
                options.include_named, index = _take_value(args, index, "Include")
            elif flag == "q":
                options.verbosity = 0
            elif flag == "v":
                options.verbosity = 2
            elif flag == "x":
                options.exclude_named, index = _take_value(args, index, "Exclude")
            else:
                raise OptionError(f"Unknown Option {flag}")
        index += 1
    return options


def is_string_in_bigger_string(longstring: Optional[str], shortstring: str) -> int:
    """Look for ``shortstring`` inside ``longstring``.

    The short string ends at a wildcard ``*``, a comma, a quote or its end; a
    match up to such an end gives 1. A match up to a colon gives 2, meaning a
    file-name part matched and a test-name part follows. No match gives 0.
    """
    if shortstring.startswith("*"):
        return 1
    longstring = longstring or ""

    for start in range(len(longstring)):
        matched = 0
        for long_char, short_char in zip(longstring[start:], shortstring):
            if long_char != short_char:
                break
            matched += 1
            following = shortstring[matched:matched + 1]
            if following in _TERMINATORS or following == "":
                return 1
            if following == ":":
                return 2
    return 0


def argument_matches(pattern: str, test_file: Optional[str], test_name: Optional[str]) -> bool:
    """True if any comma- or quote-separated part of ``pattern`` selects the test.

    A part selects a test when it names the file, names the test, or has the
    form ``file:test`` with both parts matching.
    """

    def at(position: int) -> str:
        return pattern[position:position + 1]

    start = 0
    while start < len(pattern):
        if at(start) in ('"', "'"):
            start += 1

        end = start
        test_part: Optional[int] = None
        while True:
            end += 1
            if at(end) == ":" and at(end + 1) != "":
                test_part = end + 1
            if at(end) == "" or at(end) in ("'", '"', ","):
                break

        while at(end) != "" and at(end) in _SEPARATORS:
            end += 1

        part = pattern[start:]
        found = is_string_in_bigger_string(test_file, part)
        if found == 1:
            return True
        if found == 2 and test_part is not None:
            if is_string_in_bigger_string(test_name, pattern[test_part:]):
                return True
        if is_string_in_bigger_string(test_name, part) == 1:
            return True

        start = end

    return False


def test_matches(options: Options, test_file: Optional[str], test_name: Optional[str]) -> bool:
    """True if the test is included by ``options`` and not excluded."""
    if options.include_named:
        selected = argument_matches(options.include_named, test_file, test_name)
    else:
        selected = True
    if options.exclude_named and argument_matches(options.exclude_named, test_file, test_name):
        selected = False
    return selected


test_matches.__test__ = False  # type: ignore[attr-defined]