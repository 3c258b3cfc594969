"""Namespace-bound debug loggers.

A ``DebugLogger`` is a callable bound to one namespace.  Calling it when the
namespace is disabled costs one cached comparison; when enabled, the
arguments go through ``pico_debug.pipeline`` and on to the output sink.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence

from .pipeline import format_args

if TYPE_CHECKING:
    from .factory import DebugFactory

LogFunction = Callable[["LoggerMetadata", List[Any]], None]


@dataclass(frozen=True)
class LoggerMetadata:
    """What a sink needs to know about the logger that produced a call.

    Attributes:
        namespace: The logger's namespace.
        color: ANSI color code picked by ``select_color``.
        use_colors: Whether the sink should emit color sequences.
        diff: Milliseconds since the previous enabled call of this logger
            (``0`` for the first one).
    """

    namespace: str
    color: int
    use_colors: bool
    diff: int


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def select_color(namespace: str, palette: Sequence[int]) -> int:
    """Pick a stable palette entry for *namespace*.

    Uses the 31-multiplier rolling hash wrapped to a signed 32-bit integer,
    so a namespace keeps its color across runs and processes.
    """
    hash_ = 0
    for ch in namespace:
        hash_ = _to_int32(hash_ * 31 + ord(ch))
    return palette[abs(hash_) % len(palette)]


class DebugLogger:
    """Callable logger for one namespace.

    The enabled state is resolved on every call: a manual override set via
    ``logger.enabled = True/False`` wins; otherwise the registry decision is
    cached and recomputed only when the registry generation moves.  Assign
    ``None`` to ``enabled`` to drop the override.

    ``prev``/``curr``/``diff`` are updated in call order.  They are not
    guarded, so a logger shared between threads may report interleaved
    diffs.
    """

    def __init__(self, namespace: str, factory: "DebugFactory"):
        self._namespace = namespace
        self._factory = factory
        self.color = factory.select_color(namespace)
        self.use_colors = factory.color_support.supports_color()
        self.log: Optional[LogFunction] = None
        self.prev: Optional[int] = None
        self.curr: Optional[int] = None
        self.diff = 0
        self._override: Optional[bool] = None
        self._cached_generation: Optional[int] = None
        self._cached_enabled = False

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def enabled(self) -> bool:
        if self._override is not None:
            return self._override
        registry = self._factory.registry
        if self._cached_generation != registry.generation:
            self._cached_generation = registry.generation
            self._cached_enabled = registry.enabled(self._namespace)
        return self._cached_enabled

    @enabled.setter
    def enabled(self, value: Optional[bool]) -> None:
        self._override = None if value is None else bool(value)

    def __call__(self, *args: Any) -> None:
        if not self.enabled:
            return

        curr = self._factory.clock()
        self.diff = 0 if self.prev is None else curr - self.prev
        self.curr = curr
        self.prev = curr

        final_args = format_args(args, self._factory.formatters)
        metadata = LoggerMetadata(self._namespace, self.color, self.use_colors, self.diff)
        log = self.log or self._factory.sink.render
        log(metadata, final_args)

    def extend(self, suffix: str, delimiter: str = ":") -> "DebugLogger":
        """Create a child logger named ``namespace + delimiter + suffix``.

        The child shares this logger's ``log`` function but starts without
        an enabled override.
        """
        child = self._factory.create(f"{self._namespace}{delimiter}{suffix}")
        child.log = self.log
        return child

    def __repr__(self) -> str:
        return f"DebugLogger({self._namespace!r}, enabled={self.enabled})"
