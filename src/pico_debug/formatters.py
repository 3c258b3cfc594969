"""The ``%<letter>`` formatter table shared by all loggers of a factory.

Built-in letters:

=======  =============================================
Letter   Output
=======  =============================================
``%o``   single-line inspect
``%O``   multi-line inspect
``%s``   ``str()``
``%d``   integer, or ``NaN`` for non-numeric values
``%j``   JSON, ``[Circular]`` for self-referencing data
=======  =============================================
"""

import json
import math
import pprint
import sys
import threading
from typing import Any, Dict, Optional

from pico_ioc import component

from .config import DebugSettings
from .exceptions import InvalidFormatterError
from .interfaces import Formatter


def inspect_single_line(value: Any, depth: Optional[int] = None) -> str:
    if isinstance(value, str):
        return repr(value)
    return pprint.pformat(value, depth=depth, width=sys.maxsize, compact=True)


def inspect_multi_line(value: Any, depth: Optional[int] = None) -> str:
    if isinstance(value, str):
        return repr(value)
    return pprint.pformat(value, depth=depth)


def format_str(value: Any) -> str:
    return str(value)


def format_int(value: Any) -> str:
    if value is None:
        return "0"
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return str(int(value)) if math.isfinite(value) else "NaN"
    try:
        return str(int(value))
    except (TypeError, ValueError):
        pass
    try:
        number = float(value)
    except (TypeError, ValueError):
        return "NaN"
    return str(int(number)) if math.isfinite(number) else "NaN"


def format_json(value: Any) -> str:
    try:
        return json.dumps(value, default=repr)
    except ValueError as exc:
        if "Circular reference" in str(exc):
            return "[Circular]"
        raise


@component(scope="singleton")
class FormatterTable:
    """Mutable letter -> handler mapping consulted by the formatting pipeline.

    Registration is serialized by a lock; lookups are plain dict reads.  The
    ``o`` and ``O`` built-ins honor ``DebugSettings.depth``.
    """

    def __init__(self, settings: DebugSettings):
        self.settings = settings
        self._lock = threading.Lock()
        self._formatters: Dict[str, Formatter] = {
            "o": lambda value: inspect_single_line(value, self.settings.depth),
            "O": lambda value: inspect_multi_line(value, self.settings.depth),
            "s": format_str,
            "d": format_int,
            "j": format_json,
        }

    def register(self, letter: str, handler: Formatter) -> None:
        """Install *handler* for ``%<letter>``, replacing any previous one.

        Raises:
            InvalidFormatterError: If *letter* is not one ASCII letter or
                *handler* is not callable.
        """
        if not (isinstance(letter, str) and len(letter) == 1 and letter.isascii() and letter.isalpha()):
            raise InvalidFormatterError(str(letter), "key must be a single ASCII letter")
        if not callable(handler):
            raise InvalidFormatterError(letter, "handler is not callable")
        with self._lock:
            self._formatters[letter] = handler

    def unregister(self, letter: str) -> None:
        with self._lock:
            self._formatters.pop(letter, None)

    def get(self, letter: str) -> Optional[Formatter]:
        return self._formatters.get(letter)

    def __contains__(self, letter: str) -> bool:
        return letter in self._formatters

    def __setitem__(self, letter: str, handler: Formatter) -> None:
        self.register(letter, handler)

    def __getitem__(self, letter: str) -> Formatter:
        return self._formatters[letter]
