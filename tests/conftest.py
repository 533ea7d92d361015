import pytest

from picture import Picture
from state import AppState, apply_update


class FakeClock:
    """A millisecond clock that only moves when told to."""

    def __init__(self, start=10_000):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class Store:
    """Applies dispatched updates to a state and keeps every update it saw."""

    def __init__(self, state, clock):
        self.state = state
        self.clock = clock
        self.updates = []

    def dispatch(self, partial):
        self.updates.append(partial)
        self.state = apply_update(self.state, partial, now=self.clock())


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def blank():
    return Picture.create(8, 6, "#ffffff")


@pytest.fixture
def state(blank):
    return AppState(tool="paint", color="#000000", picture=blank)


@pytest.fixture
def store(state, clock):
    return Store(state, clock)


@pytest.fixture
def painted():
    """Coordinates of every cell of a picture holding a color."""
    def _painted(picture, color="#000000"):
        return {
            (x, y)
            for y in range(picture.height)
            for x in range(picture.width)
            if picture.color_at(x, y) == color
        }
    return _painted
