import errno
import shutil
import sys

import psutil

# OS refused to create any process at all
FATAL_ERRNOS = (errno.EAGAIN, errno.ENOMEM)


class SpawnError(OSError):
    """Raised when no new process can be created"""


def command_not_found(name):
    print(f"{name}: Command not found.", file=sys.stderr)


def _wait(proc):
    # Ctrl+C belongs to the foreground program, keep waiting for it
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            continue


def launch(argv):
    """
    Run argv[0] with argv[1:] as arguments and wait for it to exit.
    Returns: pid of the spawned process, or None if it could not start
    """
    argv = list(argv)
    if not argv:
        raise ValueError("launch() needs a program name")

    name = argv[0]
    if "/" not in name and shutil.which(name) is None:
        command_not_found(name)
        return None

    try:
        proc = psutil.Popen(argv)
    except FileNotFoundError:
        command_not_found(name)
        return None
    except OSError as e:
        if e.errno in FATAL_ERRNOS:
            raise SpawnError(e.errno, f"cannot create process for '{name}': {e.strerror}") from e
        print(f"msh: {name}: {e.strerror or e}", file=sys.stderr)
        return None

    _wait(proc)
    return proc.pid
