"""Classic Analytics (ga.js) backend adapter."""

import logging
from typing import Any

from gabridge.core.hits import Command
from gabridge.core.protocols.backend import BackendKind

logger = logging.getLogger(__name__)


class ClassicAnalyticsBackend:
    """Pushes commands onto the ``_gaq`` command queue.

    Before ga.js loads the queue is a plain list; afterwards ga.js swaps it for
    an object with a ``push`` method. Both are accepted.
    """

    def __init__(self, queue: Any) -> None:
        """Wrap the host's command queue.

        Args:
            queue: A list, or any object exposing ``push`` or ``append``.
        """
        push = getattr(queue, "push", None) or getattr(queue, "append", None)
        if not callable(push):
            raise TypeError(f"_gaq must expose push() or append(), got {type(queue).__name__}")
        self.queue = queue
        self._push = push

    @property
    def kind(self) -> BackendKind:
        return BackendKind.CLASSIC

    def dispatch(self, command: Command) -> None:
        """Push ``[name, *args]`` onto the queue."""
        logger.debug("_gaq.push([%r, ...])", command.name)
        self._push(command.as_queue_entry())
