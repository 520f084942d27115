import re

from msh.builtin import execute_builtin
from msh.executor import launch
from msh.history import HistoryLog
from msh.parser import tokenize

BANG = "!"
HISTORY_INDEX = re.compile(r"[0-9]+")


class HistoryInvariantError(RuntimeError):
    """A history entry resolved to another history reference"""


class Dispatcher:
    """
    Runs one tokenized command line: a history reference (`!!`, `!N`),
    a built-in (`history`, `cd`) or an external program.

    Every line that is not a history reference is appended to the
    history before it runs. A history reference is never stored; the
    line it resolves to is dispatched again as a new command.
    """

    def __init__(self, history=None, launcher=launch):
        self.history = history if history is not None else HistoryLog()
        self.launcher = launcher

    def dispatch(self, line, tokens=None):
        """
        Execute line. `tokens` may carry an already parsed line.
        """
        if tokens is None:
            tokens = tokenize(line)
        cmd = tokens[0]
        if cmd is None:
            return

        if cmd.startswith(BANG):
            self._replay(cmd[1:])
            return

        handle = self.history.append(line)

        executed, _ = execute_builtin(self.history, tokens)
        if executed:
            return

        pid = self.launcher(tokens.words)
        if pid is not None:
            self.history.attach_pid(handle, pid)

    def resolve(self, reference):
        """
        Map the text after `!` to a history line.
        Returns: (text or None, error message or None)
        """
        if reference == BANG:
            text = self.history.most_recent_text()
            if text is None:
                return None, "Command not in history"
            return text, None

        if not HISTORY_INDEX.fullmatch(reference):
            return None, f"Invalid history reference: !{reference}"
        index = int(reference)
        if index >= self.history.capacity:
            return None, f"Invalid history reference: !{reference}"

        text = self.history.logical_to_text(index)
        if text is None:
            return None, "Command not in history"
        return text, None

    def _replay(self, reference):
        text, error = self.resolve(reference)
        if error:
            print(error)
            return

        tokens = tokenize(text)
        if tokens[0] is not None and tokens[0].startswith(BANG):
            raise HistoryInvariantError(
                f"history entry {text!r} is itself a history reference")
        self.dispatch(text, tokens)
