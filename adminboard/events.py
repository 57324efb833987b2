# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""In-process event bus for domain notifications (audit, cache busting)."""

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class AppEvent(str, Enum):
    """Domain events published by the service layer."""

    # User events
    USER_CREATED = "user.created"
    USER_UPDATED = "user.updated"
    USER_DELETED = "user.deleted"
    USER_RESTORED = "user.restored"
    USER_ROLE_CHANGED = "user.role_changed"
    USER_LOGIN = "user.login"
    USER_LOGOUT = "user.logout"

    # Company events
    COMPANY_CREATED = "company.created"
    COMPANY_UPDATED = "company.updated"
    COMPANY_DELETED = "company.deleted"

    # Custom role events
    ROLE_CREATED = "role.created"
    ROLE_UPDATED = "role.updated"
    ROLE_DELETED = "role.deleted"

    # Client events
    CLIENT_CREATED = "client.created"
    CLIENT_UPDATED = "client.updated"
    CLIENT_DELETED = "client.deleted"
    CLIENT_RESTORED = "client.restored"

    # Project events
    PROJECT_CREATED = "project.created"
    PROJECT_UPDATED = "project.updated"
    PROJECT_STATUS_CHANGED = "project.status_changed"
    PROJECT_DELETED = "project.deleted"


@dataclass
class EventPayload:
    """Payload for an application event."""

    event_type: AppEvent
    timestamp: datetime
    data: dict[str, Any]


# Type alias for event handlers
EventHandler = Callable[[EventPayload], Any]


class EventBus:
    """Synchronous publish/subscribe hub.

    Handlers run inline after the write has been committed. A failing
    handler is logged and skipped; it never fails the request.
    """

    def __init__(self) -> None:
        """Initialize the event bus."""
        self._handlers: dict[AppEvent, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: AppEvent, handler: EventHandler) -> None:
        """Subscribe to an event.

        Args:
            event_type: Event type to subscribe to
            handler: Function to call when event fires
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Subscribed handler to event {event_type.value}")

    def unsubscribe(self, event_type: AppEvent, handler: EventHandler) -> None:
        """Unsubscribe from an event.

        Args:
            event_type: Event type to unsubscribe from
            handler: Handler function to remove
        """
        if handler in self._handlers[event_type]:
            self._handlers[event_type].remove(handler)

    def publish(self, event_type: AppEvent, data: dict[str, Any]) -> None:
        """Publish an event to all subscribers.

        Args:
            event_type: Type of event
            data: Event data payload
        """
        payload = EventPayload(
            event_type=event_type,
            timestamp=datetime.utcnow(),
            data=data,
        )

        for handler in list(self._handlers.get(event_type, [])):
            try:
                handler(payload)
            except Exception as e:
                logger.error(f"Error in event handler for {event_type.value}: {e}")

    def get_subscriber_count(self, event_type: AppEvent) -> int:
        """Get the number of subscribers for an event type."""
        return len(self._handlers.get(event_type, []))


# Global event bus singleton
event_bus = EventBus()
