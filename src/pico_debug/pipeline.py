"""Per-call argument formatting for enabled loggers.

The first argument is classified as ``Text``, ``ErrorLike`` or ``Other``.
Errors are coerced to their traceback text and anything non-textual is
inspected through ``%O``.  ``%<letter>`` placeholders are then replaced in a
single left-to-right pass, each one consuming the next positional argument.
"""

import re
import traceback
from dataclasses import dataclass
from typing import Any, List, Sequence, Union

from .formatters import FormatterTable

PLACEHOLDER = re.compile(r"%([a-zA-Z%])")
INSPECT_PLACEHOLDER = "%O"


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class ErrorLike:
    error: BaseException


@dataclass(frozen=True)
class Other:
    value: Any


FirstArg = Union[Text, ErrorLike, Other]


def classify(value: Any) -> FirstArg:
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, BaseException):
        return ErrorLike(value)
    return Other(value)


def describe_error(error: BaseException) -> str:
    """Traceback text for a raised exception, ``"Type: message"`` otherwise."""
    if error.__traceback__ is not None:
        return "".join(traceback.format_exception(type(error), error, error.__traceback__)).rstrip("\n")
    return "".join(traceback.format_exception_only(type(error), error)).rstrip("\n")


def coerce(value: Any) -> Any:
    first = classify(value)
    if isinstance(first, ErrorLike):
        return describe_error(first.error)
    return value


def apply_formatters(template: str, args: List[Any], formatters: FormatterTable) -> str:
    """Substitute placeholders in *template*, removing consumed items from *args*.

    *args* holds the positional values that follow the template and is
    mutated in place.  ``%%`` yields ``%``.  A letter with no handler, or a
    placeholder with no value left, stays verbatim and consumes nothing.
    """
    def substitute(match: "re.Match[str]") -> str:
        letter = match.group(1)
        if letter == "%":
            return "%"
        handler = formatters.get(letter)
        if handler is None or not args:
            return match.group(0)
        return str(handler(args.pop(0)))

    return PLACEHOLDER.sub(substitute, template)


def format_args(args: Sequence[Any], formatters: FormatterTable) -> List[Any]:
    """Run the pipeline over one call's arguments and return the final list.

    The returned list always starts with the rendered message text; values
    that had no placeholder follow it unchanged.
    """
    values = list(args)
    first = coerce(values[0]) if values else ""
    rest = values[1:]

    if not isinstance(first, str):
        rest.insert(0, first)
        first = INSPECT_PLACEHOLDER

    message = apply_formatters(first, rest, formatters)
    return [message] + rest
