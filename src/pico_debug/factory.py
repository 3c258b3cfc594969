import time
from typing import Any, Callable

from pico_ioc import component, factory, provides

from .config import DebugSettings
from .formatters import FormatterTable
from .humanize import humanize
from .interfaces import ColorSupport, OutputSink, SpecificationStore
from .logger import DebugLogger, select_color
from .pipeline import coerce
from .providers import EnvSpecificationStore, StreamSink, TerminalColorSupport
from .registry import NamespaceRegistry


def wall_clock_ms() -> int:
    return int(time.time() * 1000)


@factory
class DebugInfrastructureFactory:
    @provides(DebugSettings, scope="singleton")
    def provide_settings(self) -> DebugSettings:
        return DebugSettings.from_env()

    @provides(SpecificationStore, scope="singleton")
    def provide_store(self, settings: DebugSettings) -> SpecificationStore:
        return EnvSpecificationStore(settings.env_var)

    @provides(OutputSink, scope="singleton")
    def provide_sink(self, settings: DebugSettings) -> OutputSink:
        return StreamSink(settings)

    @provides(ColorSupport, scope="singleton")
    def provide_color_support(self, settings: DebugSettings) -> ColorSupport:
        return TerminalColorSupport(settings)


@component(scope="singleton")
class DebugFactory:
    """Creates namespace loggers and fronts the shared registry and formatters.

    This is the context object the rest of an application holds on to::

        debug = container.get(DebugFactory)
        log = debug("worker:a")
        debug.enable("worker:*")
        log("processed %d items", 3)

    ``clock`` returns integer milliseconds and may be replaced for
    deterministic elapsed-time output.
    """

    def __init__(
        self,
        registry: NamespaceRegistry,
        formatters: FormatterTable,
        sink: OutputSink,
        color_support: ColorSupport,
    ):
        self.registry = registry
        self.formatters = formatters
        self.sink = sink
        self.color_support = color_support
        self.clock: Callable[[], int] = wall_clock_ms

    def create(self, namespace: str) -> DebugLogger:
        return DebugLogger(namespace, self)

    def __call__(self, namespace: str) -> DebugLogger:
        return self.create(namespace)

    def select_color(self, namespace: str) -> int:
        return select_color(namespace, self.color_support.palette())

    def enable(self, spec: Any) -> None:
        self.registry.enable(spec)

    def disable(self) -> str:
        return self.registry.disable()

    def enabled(self, name: str) -> bool:
        return self.registry.enabled(name)

    @staticmethod
    def coerce(value: Any) -> Any:
        return coerce(value)

    @staticmethod
    def humanize(ms: float) -> str:
        return humanize(ms)
