import os
import sys
from dataclasses import dataclass
from typing import NamedTuple, Optional

import readline

from msh.config import HISTORY_FILE, HISTORY_SIZE, MAX_HISTORY

NO_PID = -1


@dataclass
class CommandRecord:
    """One executed command line and the pid it spawned, if any"""
    text: str
    serial: int
    pid: Optional[int] = None


class SlotHandle(NamedTuple):
    slot: int
    serial: int


class HistoryLog:
    """
    Fixed-capacity ring buffer of CommandRecords.

    Logical index 0 is the oldest visible record. Until the buffer fills
    the oldest record lives in slot 0; afterwards it is the slot right
    after `newest`.
    """

    def __init__(self, capacity=HISTORY_SIZE):
        if capacity < 1:
            raise ValueError(f"history capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._slots = [None] * capacity
        self._newest = -1
        self._count = 0
        self._serial = 0

    def append(self, text):
        """
        Store text as the newest record, evicting the oldest when full.
        Returns: SlotHandle for attach_pid()
        """
        self._newest = (self._newest + 1) % self.capacity
        self._serial += 1
        self._slots[self._newest] = CommandRecord(text, self._serial)
        self._count = min(self._count + 1, self.capacity)
        return SlotHandle(self._newest, self._serial)

    def attach_pid(self, handle, pid):
        record = self._slots[handle.slot]
        if record is None or record.serial != handle.serial:
            # evicted since the handle was issued
            return
        record.pid = pid

    def count_visible(self):
        return self._count

    def _oldest_slot(self):
        if self._count < self.capacity:
            return 0
        return (self._newest + 1) % self.capacity

    def _physical(self, index):
        return (self._oldest_slot() + index) % self.capacity

    def record(self, index):
        """Record at logical index, or None when out of range"""
        if index < 0 or index >= self._count:
            return None
        return self._slots[self._physical(index)]

    def logical_to_text(self, index):
        record = self.record(index)
        return record.text if record else None

    def most_recent_text(self):
        if self._count == 0:
            return None
        return self._slots[self._newest].text

    def records(self):
        """Visible records, oldest first"""
        return [self._slots[self._physical(i)] for i in range(self._count)]

    def render(self, show_pid=False):
        """
        Format every visible record, oldest first.
        Returns: list of display lines
        """
        lines = []
        for i, record in enumerate(self.records()):
            if show_pid:
                pid = record.pid if record.pid is not None else NO_PID
                lines.append(f"[{i:2d}] {pid:<6} {record.text}")
            else:
                lines.append(f"[{i:2d}] {record.text}")
        return lines


def init_readline():
    """Configure readline line editing for the prompt"""
    try:
        if not sys.stdin.isatty():
            print("Warning: Not running in a real terminal. Line editing is disabled.",
                  file=sys.stderr)
            return

        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")

        # Ctrl+Left/Right jump between words
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")

        readline.parse_and_bind("set editing-mode emacs")

    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


def save_history(path=HISTORY_FILE):
    """Write readline recall lines to path"""
    try:
        readline.set_history_length(MAX_HISTORY)
        readline.write_history_file(path)
    except OSError as e:
        print(f"Warning: Could not save history: {e}", file=sys.stderr)


def load_history(path=HISTORY_FILE):
    """Load readline recall lines from path"""
    try:
        if os.path.exists(path):
            readline.read_history_file(path)
            readline.set_history_length(MAX_HISTORY)
    except OSError as e:
        print(f"Warning: Could not load history: {e}", file=sys.stderr)
