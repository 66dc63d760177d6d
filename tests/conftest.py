import pytest

from car_table_browser.data import DATA
from car_table_browser.table_controller import TableController


class FakeClock:
    """Millisecond clock the tests move by hand."""

    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class FakeScreen:
    """Just enough of a curses window for DrawTUI: records every addstr."""

    def __init__(self, height=24, width=100, keys=()):
        self.height = height
        self.width = width
        self.writes = []
        self.keys = list(keys)

    def getmaxyx(self):
        return self.height, self.width

    def addstr(self, y, x, text, attr=0):
        self.writes.append((y, x, text, attr))

    def erase(self):
        self.writes.clear()

    def refresh(self):
        pass

    def timeout(self, ms):
        pass

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def line(self, y):
        """Text written at row y, last write wins per column."""
        cells = {}
        for wy, wx, text, _attr in self.writes:
            if wy == y:
                for i, ch in enumerate(text):
                    cells[wx + i] = ch
        return "".join(cells.get(i, " ") for i in range(max(cells, default=-1) + 1)).rstrip()


@pytest.fixture
def cars():
    return list(DATA)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(cars, clock):
    return TableController(cars, _page_size=10, _debounce_ms=300, _clock=clock)


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def make_screen():
    return FakeScreen
