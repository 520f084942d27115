import os
import sys


def home_directory():
    """Directory a bare `cd` changes to"""
    return os.environ.get("HOME") or os.path.expanduser("~")


def builtin_cd(args):
    """
    Change directory. No argument means the home directory.
    Returns: exit code
    """
    if len(args) > 1:
        print("cd: too many arguments", file=sys.stderr)
        return 1

    path = args[0] if args else home_directory()
    try:
        os.chdir(path)
        return 0
    except OSError as e:
        print(f"cd: {path}: {e.strerror}", file=sys.stderr)
        return 1


def builtin_history(history, args):
    """
    Print the visible history; `-p` adds the pid column.
    Returns: exit code
    """
    show_pid = bool(args) and args[0] == "-p"
    for line in history.render(show_pid=show_pid):
        print(line)
    return 0


BUILTINS = {
    "cd": lambda history, args: builtin_cd(args),
    "history": builtin_history,
}


def execute_builtin(history, tokens):
    """
    Run the built-in named by tokens[0].
    Returns: (executed: bool, exit_code: int)
    """
    cmd = tokens[0]
    if cmd not in BUILTINS:
        return False, 0
    return True, BUILTINS[cmd](history, list(tokens.words[1:]))
