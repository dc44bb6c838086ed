"""In-process channel announcing leave changes (approve/reject/cancel).

Subscribers such as the submitted-leave badge use it to drop cached counts.
Delivery is best-effort: a subscriber that was not connected when an event was
published simply catches up on its next TTL refresh.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from blinker import Signal

from ..core.enums import LeaveStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaveChanged:
    leave_id: str
    status: LeaveStatus
    subject_id: Optional[str] = None
    org_unit_id: Optional[str] = None


LeaveListener = Callable[[LeaveChanged], None]


class Subscription:
    """Handle returned by LeaveEventChannel.subscribe."""

    def __init__(self, signal: Signal, receiver):
        self._signal = signal
        self._receiver = receiver
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._signal.disconnect(self._receiver)
        self._closed = True


class LeaveEventChannel:
    """One publisher, any number of subscribers; owned by the container."""

    def __init__(self) -> None:
        self._signal = Signal("leave-changed")

    def subscribe(self, listener: LeaveListener) -> Subscription:
        def _receiver(sender, event: LeaveChanged, **_):
            listener(event)

        self._signal.connect(_receiver, weak=False)
        return Subscription(self._signal, _receiver)

    def publish(self, event: LeaveChanged) -> int:
        """Deliver event to current subscribers; returns how many received it."""
        results = self._signal.send(self, event=event)
        logger.debug("Published %s to %d subscriber(s)", event, len(results))
        return len(results)

    @property
    def subscriber_count(self) -> int:
        return len(self._signal.receivers)
