# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the domain event bus."""

from datetime import datetime

from adminboard.events import AppEvent, EventBus, EventPayload


class TestAppEvent:
    """Tests for AppEvent enum."""

    def test_project_events(self):
        """Test project event values."""
        assert AppEvent.PROJECT_CREATED.value == "project.created"
        assert AppEvent.PROJECT_UPDATED.value == "project.updated"
        assert AppEvent.PROJECT_STATUS_CHANGED.value == "project.status_changed"
        assert AppEvent.PROJECT_DELETED.value == "project.deleted"

    def test_client_events(self):
        """Test client event values."""
        assert AppEvent.CLIENT_DELETED.value == "client.deleted"
        assert AppEvent.CLIENT_RESTORED.value == "client.restored"

    def test_user_events(self):
        """Test user event values."""
        assert AppEvent.USER_ROLE_CHANGED.value == "user.role_changed"
        assert AppEvent.USER_LOGIN.value == "user.login"


class TestEventBus:
    """Tests for EventBus."""

    def test_subscribe_and_publish(self):
        """Test that subscribed handlers receive payloads."""
        bus = EventBus()
        received = []
        bus.subscribe(AppEvent.PROJECT_CREATED, received.append)

        bus.publish(AppEvent.PROJECT_CREATED, {"project_id": "p1"})

        assert len(received) == 1
        payload = received[0]
        assert isinstance(payload, EventPayload)
        assert payload.event_type == AppEvent.PROJECT_CREATED
        assert payload.data == {"project_id": "p1"}
        assert isinstance(payload.timestamp, datetime)

    def test_publish_only_reaches_matching_handlers(self):
        """Test that handlers only receive their own event type."""
        bus = EventBus()
        received = []
        bus.subscribe(AppEvent.CLIENT_DELETED, received.append)

        bus.publish(AppEvent.CLIENT_CREATED, {})

        assert received == []

    def test_unsubscribe(self):
        """Test removing a handler."""
        bus = EventBus()
        received = []
        bus.subscribe(AppEvent.USER_LOGIN, received.append)
        assert bus.get_subscriber_count(AppEvent.USER_LOGIN) == 1

        bus.unsubscribe(AppEvent.USER_LOGIN, received.append)
        bus.publish(AppEvent.USER_LOGIN, {})

        assert received == []
        assert bus.get_subscriber_count(AppEvent.USER_LOGIN) == 0

    def test_unsubscribe_unknown_handler_is_noop(self):
        """Test that removing an unknown handler does nothing."""
        bus = EventBus()
        bus.unsubscribe(AppEvent.USER_LOGIN, print)
        assert bus.get_subscriber_count(AppEvent.USER_LOGIN) == 0

    def test_failing_handler_does_not_stop_others(self):
        """Test that one broken handler neither raises nor blocks the rest."""
        bus = EventBus()
        received = []

        def broken(payload):
            raise RuntimeError("boom")

        bus.subscribe(AppEvent.PROJECT_DELETED, broken)
        bus.subscribe(AppEvent.PROJECT_DELETED, received.append)

        bus.publish(AppEvent.PROJECT_DELETED, {"project_id": "p1"})

        assert len(received) == 1
