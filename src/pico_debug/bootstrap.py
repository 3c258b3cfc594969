"""Building a ready-to-use ``DebugFactory``.

``init()`` wraps ``pico_ioc.init``: it always scans ``pico_debug``, pulls in
plugin modules from the ``pico_debug.plugins`` entry-point group and
registers any ``PICO_FORMATTERS`` they export.  ``create_context()`` wires
the same objects by hand, without a container.
"""

import inspect
import os
from importlib import import_module
from importlib.metadata import entry_points
from types import ModuleType
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Union

from pico_ioc import init as _ioc_init

if TYPE_CHECKING:
    from pico_ioc import PicoContainer

import pico_debug

from .config import DebugSettings
from .factory import DebugFactory
from .formatters import FormatterTable
from .interfaces import ColorSupport, Formatter, OutputSink, SpecificationStore
from .logging import get_logger
from .providers import EnvSpecificationStore, StreamSink, TerminalColorSupport
from .registry import NamespaceRegistry

logger = get_logger(__name__)

_IOC_INIT_SIG = inspect.signature(_ioc_init)


def _to_module_list(modules: Union[Any, Iterable[Any]]) -> List[Any]:
    if isinstance(modules, Iterable) and not isinstance(modules, (str, bytes)):
        return list(modules)
    return [modules]


def _import_module_like(obj: Any) -> ModuleType:
    if isinstance(obj, ModuleType):
        return obj
    if isinstance(obj, str):
        return import_module(obj)
    module_name = getattr(obj, "__module__", None) or getattr(obj, "__name__", None)
    if not module_name:
        raise ImportError(f"Cannot determine module for object {obj!r}")
    return import_module(module_name)


def _normalize_modules(raw: Iterable[Any]) -> List[ModuleType]:
    seen: set[str] = set()
    result: List[ModuleType] = []
    for item in raw:
        m = _import_module_like(item)
        name = m.__name__
        if name not in seen:
            seen.add(name)
            result.append(m)
    return result


def _harvest_formatters(modules: List[ModuleType]) -> Dict[str, Formatter]:
    formatters: Dict[str, Formatter] = {}
    for m in modules:
        module_formatters = getattr(m, "PICO_FORMATTERS", None)
        if module_formatters:
            formatters.update(module_formatters)
    return formatters


def _load_plugin_modules(group: str = "pico_debug.plugins") -> List[ModuleType]:
    selected = entry_points().select(group=group)

    seen: set[str] = set()
    modules: List[ModuleType] = []

    for ep in selected:
        try:
            if ep.module in ("pico_ioc", "pico_debug"):
                continue
            m = import_module(ep.module)
        except Exception as exc:
            logger.warning(
                "Failed to load pico-debug plugin entry point '%s' (%s): %s",
                ep.name,
                ep.module,
                exc,
            )
            continue

        name = m.__name__
        if name not in seen:
            seen.add(name)
            modules.append(m)

    return modules


def init(*args: Any, **kwargs: Any) -> "PicoContainer":
    bound = _IOC_INIT_SIG.bind(*args, **kwargs)
    bound.apply_defaults()

    raw = _to_module_list(bound.arguments["modules"])
    base_modules = _normalize_modules([pico_debug] + list(raw))

    auto_flag = os.getenv("PICO_DEBUG_AUTO_PLUGINS", "true").lower()
    if auto_flag not in ("0", "false", "no"):
        plugin_modules = _load_plugin_modules()
        all_modules = _normalize_modules(list(base_modules) + plugin_modules)
    else:
        all_modules = base_modules

    bound.arguments["modules"] = all_modules
    container = _ioc_init(*bound.args, **bound.kwargs)

    harvested = _harvest_formatters(all_modules)
    if harvested:
        table = container.get(FormatterTable)
        for letter, handler in harvested.items():
            table.register(letter, handler)
        logger.debug("Registered %d plugin formatter(s): %s", len(harvested), ", ".join(sorted(harvested)))

    return container


init.__signature__ = _IOC_INIT_SIG


def create_context(
    spec: Optional[str] = None,
    *,
    settings: Optional[DebugSettings] = None,
    store: Optional[SpecificationStore] = None,
    sink: Optional[OutputSink] = None,
    color_support: Optional[ColorSupport] = None,
) -> DebugFactory:
    """Build a standalone ``DebugFactory`` without a container.

    Args:
        spec: Specification to enable right away.  When omitted, the one
            persisted in *store* is loaded instead.
        settings: Defaults to ``DebugSettings.from_env()``.
        store: Defaults to an ``EnvSpecificationStore`` on ``settings.env_var``.
        sink: Defaults to a ``StreamSink`` on ``stderr``.
        color_support: Defaults to ``TerminalColorSupport``.

    Returns:
        A factory with its own registry and formatter table.
    """
    settings = settings or DebugSettings.from_env()
    registry = NamespaceRegistry(store or EnvSpecificationStore(settings.env_var))
    context = DebugFactory(
        registry=registry,
        formatters=FormatterTable(settings),
        sink=sink or StreamSink(settings),
        color_support=color_support or TerminalColorSupport(settings),
    )
    if spec is None:
        registry.load()
    else:
        registry.enable(spec)
    return context
