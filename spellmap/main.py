import sys

from .shared import SOURCE_ENCODING, SOURCE_ERRORS, printf, printf_err

from .interpreter import (
    CommandError,
    init_interpreter,
    interpret,
    run,
    set_debug_trace_execution,
)


def repl():
    while True:
        try:
            inpt = input()
        except EOFError:
            break
        interpret(inpt)


def run_file(filepath: str):
    try:
        fp = open(filepath, encoding=SOURCE_ENCODING, errors=SOURCE_ERRORS)
    except OSError:
        printf_err("Cannot open file {0:s}\n", filepath)
        sys.exit(66)

    with fp:
        result = run(fp)

    if isinstance(result, CommandError):
        sys.exit(70)


def main():
    args = sys.argv[1:]
    if args and args[0] == "--trace":
        set_debug_trace_execution(True)
        args = args[1:]

    init_interpreter()

    if len(args) == 0:
        repl()
    elif len(args) == 1:
        run_file(args[0])
    else:
        printf("Usage: spellmap [--trace] [path]\n")
        sys.exit(64)


if __name__ == "__main__":
    main()
