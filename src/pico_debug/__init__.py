from .config import DebugSettings
from .matcher import matches
from .parser import ParsedSpec, parse_spec, serialize_spec
from .registry import NamespaceRegistry, SpecificationChanged
from .formatters import FormatterTable
from .pipeline import Text, ErrorLike, Other, classify, coerce, format_args
from .logger import DebugLogger, LoggerMetadata, select_color
from .interfaces import SpecificationStore, OutputSink, ColorSupport
from .providers import (
    EnvSpecificationStore,
    MemorySpecificationStore,
    StreamSink,
    TerminalColorSupport,
    NoColorSupport,
)
from .factory import DebugFactory
from .humanize import humanize
from .bootstrap import create_context
from .exceptions import DebugError, InvalidFormatterError

__all__ = [
    "DebugSettings",
    "matches",
    "ParsedSpec",
    "parse_spec",
    "serialize_spec",
    "NamespaceRegistry",
    "SpecificationChanged",
    "FormatterTable",
    "Text",
    "ErrorLike",
    "Other",
    "classify",
    "coerce",
    "format_args",
    "DebugLogger",
    "LoggerMetadata",
    "select_color",
    "SpecificationStore",
    "OutputSink",
    "ColorSupport",
    "EnvSpecificationStore",
    "MemorySpecificationStore",
    "StreamSink",
    "TerminalColorSupport",
    "NoColorSupport",
    "DebugFactory",
    "humanize",
    "create_context",
    "DebugError",
    "InvalidFormatterError"
]
