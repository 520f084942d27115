import os
import sys


def env_int(name, default):
    """Positive integer from the environment, default when unset or malformed"""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        print(f"Warning: ignoring {name}={raw!r}, using {default}", file=sys.stderr)
        return default
    return value


# History Log capacity (number of commands kept for !N / !!)
HISTORY_SIZE = env_int("MSH_HISTORY_SIZE", 15)

# Max words kept from one command line
MAX_NUM_ARGUMENTS = 10

# Max command-line size, terminator included
MAX_COMMAND_SIZE = 255

PROMPT = "msh> "
WHITESPACE = " \t\n"
QUIT_COMMANDS = ("quit", "exit")

# readline recall file (arrow keys only, never loaded into the History Log)
HISTORY_FILE = os.path.expanduser(os.getenv("MSH_HISTORY_FILE", "~/.msh_history"))
MAX_HISTORY = 1000
