import pytest

from pico_debug.config import DebugSettings
from pico_debug.factory import DebugFactory
from pico_debug.formatters import FormatterTable
from pico_debug.providers import MemorySpecificationStore, NoColorSupport
from pico_debug.registry import NamespaceRegistry


class RecordingSink:
    """Output sink that keeps every call instead of writing it."""

    def __init__(self):
        self.calls = []

    def render(self, metadata, args):
        self.calls.append((metadata, list(args)))

    @property
    def messages(self):
        return [args[0] for _, args in self.calls]


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, start=1_000):
        self.now = start

    def advance(self, ms):
        self.now += ms

    def __call__(self):
        return self.now


@pytest.fixture
def settings():
    """Settings with the date hidden, independent of the environment."""
    return DebugSettings(hide_date=True)


@pytest.fixture
def store():
    """An empty in-memory specification store."""
    return MemorySpecificationStore()


@pytest.fixture
def registry(store):
    """A fresh registry with nothing enabled."""
    return NamespaceRegistry(store)


@pytest.fixture
def formatters(settings):
    """A formatter table holding only the built-in letters."""
    return FormatterTable(settings)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def debug(registry, formatters, sink, clock):
    """A DebugFactory wired to a recording sink and a fake clock."""
    factory = DebugFactory(registry, formatters, sink, NoColorSupport())
    factory.clock = clock
    return factory
