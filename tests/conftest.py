import itertools

import pytest

from tetris import Engine


class ScriptedRandom:
    """Piece source that cycles through a fixed list of kinds."""
    def __init__(self, kinds):
        self._it = itertools.cycle(kinds)

    def next_piece(self):
        return next(self._it)


class FakeScheduler:
    def __init__(self):
        self.callback = None
        self.interval_ms = None
        self.stopped = 0

    def start(self, callback, interval_ms):
        self.callback = callback
        self.interval_ms = interval_ms

    def stop(self):
        self.callback = None
        self.stopped += 1

    def fire(self, n=1):
        for _ in range(n):
            self.callback()


@pytest.fixture
def make_engine():
    def _make(*kinds, **kw):
        return Engine(rng=ScriptedRandom(kinds or ("O",)), **kw)
    return _make


@pytest.fixture
def scheduler():
    return FakeScheduler()

