"""Protocol interfaces for the collaborators the core calls into.

The core never writes output, reads the environment or probes terminals
itself.  It goes through these ``typing.Protocol`` contracts so that any
conforming implementation can be swapped in without inheritance.  The
defaults live in ``pico_debug.providers``.
"""

from typing import TYPE_CHECKING, Any, Callable, List, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from .logger import LoggerMetadata

Formatter = Callable[[Any], str]
"""A ``%<letter>`` handler: takes one argument value, returns its text."""


class SpecificationStore(Protocol):
    """Persistence for the last-used enable specification.

    ``EnvSpecificationStore`` keeps it in an environment variable so child
    processes inherit it.
    """

    def save(self, spec: str) -> None:
        """Persist *spec*. An empty string means nothing is enabled.

        Args:
            spec: The raw specification passed to ``enable``.
        """
        ...

    def load(self) -> Optional[str]:
        """Return the persisted specification, or ``None`` if there is none."""
        ...


class OutputSink(Protocol):
    """Destination for formatted debug calls.

    ``StreamSink`` writes one line per call to ``stderr``.
    """

    def render(self, metadata: "LoggerMetadata", args: List[Any]) -> None:
        """Emit one debug call.

        Args:
            metadata: Namespace, color, color flag and elapsed milliseconds
                of the calling logger.
            args: The argument list after placeholder substitution.  The
                first element is the message text.
        """
        ...


class ColorSupport(Protocol):
    """Capability probe for the output medium."""

    def supports_color(self) -> bool:
        """Whether output may contain ANSI color sequences."""
        ...

    def palette(self) -> Sequence[int]:
        """ANSI color codes namespaces are hashed onto."""
        ...
