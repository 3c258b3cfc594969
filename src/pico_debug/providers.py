"""Default collaborators: environment persistence, stderr output, color probing."""

import os
import sys
from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence, TextIO

from .config import DebugSettings
from .formatters import inspect_single_line
from .humanize import humanize
from .logger import LoggerMetadata

BASIC_COLORS = (6, 2, 3, 4, 5, 1)

EXTENDED_COLORS = (
    20, 21, 26, 27, 32, 33, 38, 39, 40, 41, 42, 43, 44, 45, 56, 57, 62, 63, 68,
    69, 74, 75, 76, 77, 78, 79, 80, 81, 92, 93, 98, 99, 112, 113, 128, 129, 134,
    135, 148, 149, 160, 161, 162, 163, 164, 165, 166, 167, 168, 169, 170, 171,
    172, 173, 178, 179, 184, 185, 196, 197, 198, 199, 200, 201, 202, 203, 204,
    205, 206, 207, 208, 209, 214, 215, 220, 221,
)


class EnvSpecificationStore:
    """Keeps the specification in an environment variable (``DEBUG`` by default).

    Saving an empty specification removes the variable, so ``disable()``
    leaves the environment as if debugging had never been turned on.
    """

    def __init__(self, var: str = "DEBUG"):
        self.var = var

    def save(self, spec: str) -> None:
        if spec:
            os.environ[self.var] = spec
        else:
            os.environ.pop(self.var, None)

    def load(self) -> Optional[str]:
        return os.environ.get(self.var)


class MemorySpecificationStore:
    def __init__(self, initial: Optional[str] = None):
        self.value = initial

    def save(self, spec: str) -> None:
        self.value = spec

    def load(self) -> Optional[str]:
        return self.value


class NoColorSupport:
    def supports_color(self) -> bool:
        return False

    def palette(self) -> Sequence[int]:
        return BASIC_COLORS


class TerminalColorSupport:
    """Detects colors from the settings, the stream and ``TERM``/``COLORTERM``.

    ``DebugSettings.colors`` wins when set.  Otherwise colors are on when the
    stream is a TTY, and the 256-color palette is used when the terminal
    advertises it.
    """

    def __init__(self, settings: DebugSettings, stream: Optional[TextIO] = None):
        self.settings = settings
        self.stream = stream

    def supports_color(self) -> bool:
        if self.settings.colors is not None:
            return self.settings.colors
        stream = self.stream or sys.stderr
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    def palette(self) -> Sequence[int]:
        term = os.environ.get("TERM", "")
        colorterm = os.environ.get("COLORTERM", "")
        if "256" in term or colorterm in ("truecolor", "24bit"):
            return EXTENDED_COLORS
        return BASIC_COLORS


def _color_code(color: int) -> str:
    return f"\x1b[3{color}" if color < 8 else f"\x1b[38;5;{color}"


class StreamSink:
    """Writes each call as one line to a text stream (``sys.stderr`` by default).

    Colored output::

        <bold colored namespace> <message> <colored +diff>

    Plain output::

        2026-10-18T09:30:00.000Z <namespace> <message>

    Values left over after placeholder substitution are appended with
    single-line inspect.
    """

    def __init__(self, settings: DebugSettings, stream: Optional[TextIO] = None):
        self.settings = settings
        self.stream = stream

    def render(self, metadata: LoggerMetadata, args: List[Any]) -> None:
        stream = self.stream or sys.stderr
        stream.write(self.format_line(metadata, args) + "\n")
        stream.flush()

    def format_line(self, metadata: LoggerMetadata, args: List[Any]) -> str:
        message = self._join(args)
        if metadata.use_colors:
            code = _color_code(metadata.color)
            prefix = f"  {code};1m{metadata.namespace} \x1b[0m"
            body = "\n".join(prefix + line for line in message.split("\n"))
            return f"{body} {code}m+{humanize(metadata.diff)}\x1b[0m"
        return f"{self._date_prefix()}{metadata.namespace} {message}"

    def _join(self, args: List[Any]) -> str:
        parts = [a if isinstance(a, str) else inspect_single_line(a, self.settings.depth) for a in args]
        return " ".join(parts)

    def _date_prefix(self) -> str:
        if self.settings.hide_date:
            return ""
        now = datetime.now(timezone.utc)
        return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z "
