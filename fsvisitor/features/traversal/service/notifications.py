import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

from fsvisitor.core.common.enums import EntryKind, Notification
from ..domain.models import LifecycleEvent, VisitEvent

logger = logging.getLogger(__name__)

Event = Union[LifecycleEvent, VisitEvent]
Listener = Callable[[Any], None]

@dataclass(frozen=True)
class _Subscription:
    listener: Listener
    kind: Optional[EntryKind] = None

    def accepts(self, event: Event) -> bool:
        if self.kind is None:
            return True
        return isinstance(event, VisitEvent) and event.kind == self.kind

class NotificationHub:
    """
    Synchronous fan-out of walk notifications.
    Listeners run in registration order on the caller's thread.
    Exceptions raised by a listener are not caught here.
    """

    def __init__(self):
        self._subscriptions: Dict[Notification, List[_Subscription]] = {
            notification: [] for notification in Notification
        }

    def subscribe(self,
                  notification: Notification,
                  listener: Listener,
                  kind: Optional[EntryKind] = None) -> Listener:
        """
        Registers a listener. When `kind` is given, the listener only hears
        entry events of that kind. Returns the listener unchanged.
        """
        notification = Notification(notification)
        if kind is not None and notification in (Notification.START, Notification.FINISH):
            raise ValueError(f"Notification '{notification.value}' carries no entry kind.")

        self._subscriptions[notification].append(_Subscription(listener, kind))
        return listener

    def unsubscribe(self, notification: Notification, listener: Listener) -> None:
        notification = Notification(notification)
        subscriptions = self._subscriptions[notification]
        for index, subscription in enumerate(subscriptions):
            if subscription.listener == listener:
                del subscriptions[index]
                return
        logger.debug(f"Listener {listener!r} was not subscribed to '{notification.value}'")

    def publish(self, notification: Notification, event: Event) -> None:
        # Snapshot so a listener may (un)subscribe while being notified.
        for subscription in list(self._subscriptions[notification]):
            if subscription.accepts(event):
                subscription.listener(event)

    def listener_count(self, notification: Notification) -> int:
        return len(self._subscriptions[Notification(notification)])
