import sys
from typing import Any

TRIM_CHARS = " \n\r\t"

# undecodable bytes become U+FFFD instead of aborting a load
SOURCE_ENCODING = "utf-8"
SOURCE_ERRORS = "replace"


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def lowercase(s: str) -> str:
    return s.lower()


def trim(s: str) -> str:
    # trailing only, leading whitespace is part of the token
    return s.rstrip(TRIM_CHARS)
