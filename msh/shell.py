import sys

from msh.config import MAX_COMMAND_SIZE, PROMPT, QUIT_COMMANDS
from msh.dispatcher import Dispatcher
from msh.executor import SpawnError
from msh.history import init_readline, load_history, save_history
from msh.parser import tokenize


def read_line(prompt=PROMPT):
    """
    Read one command line, retrying on EOF while stdin is a terminal.
    Returns: line without its newline, or None when input is exhausted
    """
    while True:
        try:
            line = input(prompt)
        except EOFError:
            if not sys.stdin.isatty():
                return None
            print()
            continue
        except KeyboardInterrupt:
            print()
            continue
        return line[:MAX_COMMAND_SIZE - 1]


def run(dispatcher, reader=read_line):
    """
    Read and dispatch lines until quit/exit or end of input.
    Returns: exit status
    """
    while True:
        line = reader()
        if line is None:
            return 0

        tokens = tokenize(line)
        cmd = tokens[0]
        if cmd is None:
            continue

        if cmd in QUIT_COMMANDS:
            return 0

        try:
            dispatcher.dispatch(line, tokens)
        except SpawnError as e:
            print(f"msh: fatal: {e.strerror}", file=sys.stderr)
            return 1


def main_loop():
    """Main shell loop"""
    init_readline()
    load_history()
    try:
        status = run(Dispatcher())
    finally:
        save_history()
    return status


def main():
    sys.exit(main_loop())
