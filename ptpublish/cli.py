"""Command line entry point of the publishing tool."""

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ptpublish import logsetup
from ptpublish.textutil import parse_query_string

TOOLS_NAME = "PT PUBLISH TOOLS"

_log = logging.getLogger(__name__)


class CommandError(ValueError):
    """Raised when the command line arguments are unusable."""


@dataclass
class CommandParams:
    headers: str = ""
    file: list[str] = field(default_factory=list)
    screenshot: list[str] = field(default_factory=list)
    data: str = ""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=TOOLS_NAME)
    parser.add_argument("-f", "--file", nargs="+", action="extend", default=[])
    parser.add_argument("-s", "--screenshot", nargs="+", action="extend", default=[])
    parser.add_argument("--data", default="", help="Form field, format query string")
    parser.add_argument("--headers", default="", help="Http Header, format query string")
    return parser


def _fail(message: str) -> CommandError:
    _log.warning(message)
    return CommandError(message)


def _check_paths(paths: list[str], what: str) -> None:
    for path in paths:
        if not os.path.exists(path):
            raise _fail(f"{path} not exists")
    if not paths:
        raise _fail(f"{what} is empty")


def parse_command(argv: Optional[Sequence[str]] = None) -> CommandParams:
    """Parse and validate the arguments; raise :class:`CommandError` when unusable."""
    args = _build_parser().parse_args(argv)
    params = CommandParams(
        headers=args.headers, file=args.file, screenshot=args.screenshot, data=args.data
    )
    _check_paths(params.screenshot, "screenshot")
    _check_paths(params.file, "file")
    if not params.data:
        raise _fail("kv is empty")

    _log.info(
        "file: %s\nscreenshot: %s\nkv: %s\nheaders: %s\n",
        ",".join(params.file),
        ",".join(params.screenshot),
        params.data,
        params.headers,
    )
    return params


def main(argv: Optional[Sequence[str]] = None) -> int:
    logsetup.init("publish", "log/publish.log")
    _log.info("%s start", TOOLS_NAME)
    try:
        params = parse_command(argv)
    except CommandError:
        print("parse command failed")
        return 255

    for key, value in parse_query_string(params.headers).items():
        _log.info("%s=%s", key, value)

    print("success")
    return 0


if __name__ == "__main__":
    sys.exit(main())