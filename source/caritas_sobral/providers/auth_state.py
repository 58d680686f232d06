"""This module provides an observable authentication state.

Admin pages subscribe to sign-in and sign-out events for the lifetime of a
request and always release their subscription afterwards, so listeners
never accumulate across requests.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from caritas_sobral.providers.logging import Logger, LoggingProvider


class AuthEvent(StrEnum):
    """The kinds of authentication state changes."""

    SIGNED_IN = "signed_in"
    SIGNED_OUT = "signed_out"
    SESSION_EXPIRED = "session_expired"


@dataclass(frozen=True)
class AuthStateEvent:
    """A change in the authentication state of one user."""

    event: AuthEvent
    email: str | None = None


Listener = Callable[[AuthStateEvent], None]


class Subscription:
    """A handle returned by `AuthStateNotifier.subscribe`."""

    def __init__(self, notifier: "AuthStateNotifier", listener: Listener) -> None:
        self._notifier = notifier
        self._listener = listener
        self.active = True

    def unsubscribe(self) -> None:
        """Stops delivering events to the listener. Safe to call twice."""
        if self.active:
            self._notifier._remove(self._listener)
            self.active = False


class AuthStateNotifier:
    """Dispatches authentication events to subscribed listeners."""

    def __init__(self) -> None:
        self.logger: Logger = LoggingProvider().get_logger()
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    @property
    def listener_count(self) -> int:
        """The number of active listeners."""
        with self._lock:
            return len(self._listeners)

    def subscribe(self, listener: Listener) -> Subscription:
        """Registers a listener.

        Args:
            listener: Called with every published event.

        Returns:
            A subscription whose `unsubscribe` removes the listener.
        """
        with self._lock:
            self._listeners.append(listener)
        return Subscription(self, listener)

    def publish(self, event: AuthStateEvent) -> None:
        """Delivers an event to every current listener.

        Args:
            event: The event to deliver.
        """
        with self._lock:
            listeners = list(self._listeners)
        self.logger.debug(f"Publishing auth event {event.event} to {len(listeners)} listener(s).")
        for listener in listeners:
            listener(event)

    def _remove(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)
