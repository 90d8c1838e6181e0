"""Universal Analytics (analytics.js) backend adapter."""

import logging
from typing import Any, Callable

from gabridge.core.hits import Command
from gabridge.core.protocols.backend import BackendKind

logger = logging.getLogger(__name__)


class UniversalAnalyticsBackend:
    """Calls the global analytics.js command function, ``ga(name, *args)``.

    The function is whatever the host's ``GoogleAnalyticsObject`` names, so
    renamed globals (``__gaTracker`` and friends) work unchanged.
    """

    def __init__(self, ga: Callable[..., Any], namespace: str = "ga") -> None:
        """Wrap the host's command function.

        Args:
            ga: The callable installed by the analytics.js snippet.
            namespace: Global name it was found under, for diagnostics.
        """
        self._ga = ga
        self.namespace = namespace

    @property
    def kind(self) -> BackendKind:
        return BackendKind.UNIVERSAL

    def dispatch(self, command: Command) -> None:
        """Invoke the command function with the command's positional arguments."""
        logger.debug("%s(%r, ...)", self.namespace, command.name)
        self._ga(*command.as_call_args())
