"""
Shared pytest fixtures for the msh test suite.

External programs are replaced by FakeLauncher so dispatcher tests
never spawn real processes.
"""

import pytest

from msh.dispatcher import Dispatcher
from msh.history import HistoryLog


class FakeLauncher:
    """Records every argv and hands out increasing fake pids"""

    def __init__(self, first_pid=1000):
        self.calls = []
        self.next_pid = first_pid

    def __call__(self, argv):
        self.calls.append(list(argv))
        pid = self.next_pid
        self.next_pid += 1
        return pid


@pytest.fixture
def launcher():
    return FakeLauncher()


@pytest.fixture
def history():
    return HistoryLog()


@pytest.fixture
def dispatcher(history, launcher):
    return Dispatcher(history, launcher=launcher)


@pytest.fixture
def small_dispatcher(launcher):
    """Dispatcher over a two-slot history"""
    return Dispatcher(HistoryLog(capacity=2), launcher=launcher)
