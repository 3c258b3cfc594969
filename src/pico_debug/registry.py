"""Process-wide namespace state: which namespaces are currently enabled.

``NamespaceRegistry`` holds the active include/exclude patterns and a
generation number.  Every ``enable``/``disable`` call bumps the generation,
even when the text is unchanged, and loggers use it to invalidate their
cached decision lazily.
"""

import itertools
import threading
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from pico_ioc import Event, EventBus, PicoContainer, component, configure

from .interfaces import SpecificationStore
from .logging import get_logger
from .matcher import matches
from .parser import ParsedSpec, parse_spec, serialize_spec

logger = get_logger(__name__)

_generations = itertools.count(1)


@dataclass(frozen=True)
class _State:
    parsed: ParsedSpec
    raw: str
    generation: int


@dataclass
class SpecificationChanged(Event):
    """Event published after every ``enable``/``disable``.

    Args:
        raw: The specification now in effect.
        generation: The registry generation it was installed under.
    """

    raw: str
    generation: int


@component(scope="singleton")
class NamespaceRegistry:
    """Singleton holding the active specification.

    Writes go through a lock and swap in a new immutable state object in one
    assignment, so ``enabled()`` and the ``generation`` read by loggers never
    need the lock.

    Example:
        >>> registry.enable("*,-connect:*")
        >>> registry.enabled("app"), registry.enabled("connect:session")
        (True, False)
    """

    def __init__(self, store: SpecificationStore):
        self.store = store
        self._lock = threading.Lock()
        self._state = _State(ParsedSpec(), "", 0)
        self._event_bus: Optional[EventBus] = None

    @property
    def includes(self) -> Tuple[str, ...]:
        return self._state.parsed.includes

    @property
    def excludes(self) -> Tuple[str, ...]:
        return self._state.parsed.excludes

    @property
    def raw(self) -> str:
        """The specification string last passed to ``enable``."""
        return self._state.raw

    @property
    def generation(self) -> int:
        """Changes on every ``enable``/``disable``; ``0`` before the first one."""
        return self._state.generation

    def enable(self, spec: Any) -> None:
        """Replace the active specification with *spec*.

        Malformed or empty input enables nothing; it never raises.  The raw
        value is handed to the store so it survives into child processes.

        Args:
            spec: Comma/whitespace separated patterns, e.g. ``"app,-app:db"``.
        """
        raw = spec if isinstance(spec, str) else ""
        with self._lock:
            state = self._install(raw)
        self._announce(state)

    def disable(self) -> str:
        """Turn everything off and return a specification that restores it.

        Reading the current patterns and clearing them happen under one lock
        acquisition, so ``registry.enable(registry.disable())`` restores
        exactly what was cleared, apart from the generation bump.
        """
        with self._lock:
            previous = serialize_spec(self._state.parsed)
            state = self._install("")
        self._announce(state)
        return previous

    def _install(self, raw: str) -> _State:
        # caller holds self._lock
        self.store.save(raw)
        state = _State(parse_spec(raw), raw, next(_generations))
        self._state = state
        return state

    def _announce(self, state: _State) -> None:
        logger.debug(
            "Specification %r installed (generation %d): %d include(s), %d exclude(s)",
            state.raw,
            state.generation,
            len(state.parsed.includes),
            len(state.parsed.excludes),
        )
        if self._event_bus:
            self._event_bus.publish_sync(SpecificationChanged(raw=state.raw, generation=state.generation))

    def enabled(self, name: str) -> bool:
        """Return whether *name* is enabled; exclusions always win."""
        parsed = self._state.parsed
        for pattern in parsed.excludes:
            if matches(name, pattern):
                return False
        for pattern in parsed.includes:
            if matches(name, pattern):
                return True
        return False

    def load(self) -> None:
        """Apply the specification persisted in the store."""
        self.enable(self.store.load())

    @configure
    def _on_ready(self, container: PicoContainer):
        if container.has(EventBus):
            self._event_bus = container.get(EventBus)
        self.load()
