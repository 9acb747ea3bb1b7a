from dataclasses import dataclass
from typing import Iterable

from .debug import print_stats, print_table
from .shared import (
    SOURCE_ENCODING,
    SOURCE_ERRORS,
    lowercase,
    printf,
    printf_err,
    trim,
)
from .table import HashTable, NotFound, PreconditionError


_debug_trace_execution = False


def set_debug_trace_execution(b: bool):
    global _debug_trace_execution
    _debug_trace_execution = b


@dataclass(frozen=True)
class CommandOk:
    pass


@dataclass(frozen=True)
class ConfigurationError:
    path: str


@dataclass(frozen=True)
class CommandError:
    message: str


CommandResult = CommandOk | ConfigurationError | CommandError


table: HashTable


def init_interpreter():
    global table
    table = HashTable()


def get_table() -> HashTable:
    return table


def interpret(line: str) -> CommandResult:
    line = line.rstrip("\r\n")
    printf("{0:s}\n", line)

    tokens = [trim(token) for token in line.split(" ")]
    tokens = [token for token in tokens if token]
    if not tokens:
        return CommandOk()

    command = lowercase(tokens[0])
    try:
        result = execute(command, tokens[1:])
    except PreconditionError as e:
        return command_error(str(e))

    if _debug_trace_execution and table.size() > 0:
        print_table(table)
    return result


def run(lines: Iterable[str]) -> CommandResult:
    for line in lines:
        result = interpret(line)
        if isinstance(result, CommandError):
            return result
    return CommandOk()


def execute(command: str, args: list[str]) -> CommandResult:
    result: CommandResult = CommandOk()

    match command:
        case "resize":
            for arg in args:
                table.resize(parse_size(arg))

        case "load":
            for path in args:
                if not load_file(path):
                    result = ConfigurationError(path)

        case "put":
            for key in args:
                table.put(lowercase(key))

        case "find":
            for key in args:
                key = lowercase(key)
                index = table.find(key)
                if isinstance(index, NotFound):
                    printf("{0:s}: not found\n", key)
                else:
                    printf("{0:s}: found {1:d}\n", key, index)

        case "erase":
            for key in args:
                table.erase(lowercase(key))

        case "check":
            misspelled = check(args)
            printf("misspelled:")
            for key in misspelled:
                printf("\t{0:s}", key)
            printf("\n")

        case "hash_code":
            for name in args:
                table.set_hash_code(lowercase(name))

        case "print":
            print_table(table)
        case "stats":
            print_stats(table)
        case "rehash":
            table.rehash()

    return result


def check(words: list[str]) -> list[str]:
    misspelled = []
    for word in words:
        word = lowercase(word)
        if isinstance(table.find(word), NotFound):
            misspelled.append(word)
    return misspelled


def load_file(path: str) -> bool:
    try:
        fp = open(path, encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS)
    except OSError:
        printf_err("Cannot open file {0:s}\n", path)
        return False

    with fp:
        table.load(fp)
    return True


def parse_size(arg: str) -> int:
    try:
        return int(arg)
    except ValueError:
        raise PreconditionError(f"invalid table size {arg!r}") from None


def command_error(message: str) -> CommandError:
    printf_err("Error: {0:s}\n", message)
    return CommandError(message)
