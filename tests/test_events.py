"""
Tests for the event bus and update signal models.
"""

import pytest
import threading
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.events import EventBus
from core.updater import UpdaterBuilder
from models.events import UpdateCompleteEvent, UpdateFailedEvent
from models.release import StabilityTier, UpdateResult


class TestEventBus:
    """Tests for fire-and-forget dispatch."""

    def test_publish_reaches_matching_subscribers(self):
        received = []
        unrelated = []
        with EventBus() as bus:
            bus.subscribe(UpdateFailedEvent, received.append)
            bus.subscribe(UpdateCompleteEvent, unrelated.append)
            bus.publish(UpdateFailedEvent(result=UpdateResult.FAIL_CONNECTION))

        assert unrelated == []
        assert len(received) == 1
        assert received[0].result is UpdateResult.FAIL_CONNECTION

    def test_publish_does_not_wait_for_handlers(self):
        release = threading.Event()
        finished = threading.Event()

        def slow_handler(event):
            release.wait(5)
            finished.set()

        with EventBus() as bus:
            bus.subscribe(UpdateFailedEvent, slow_handler)
            futures = bus.publish(UpdateFailedEvent(result=UpdateResult.FAIL_VERSION))
            assert not finished.is_set()
            release.set()

        assert finished.is_set()
        assert all(future.done() for future in futures)

    def test_handler_errors_do_not_reach_publisher(self):
        received = []

        def broken(event):
            raise RuntimeError('subscriber bug')

        with EventBus() as bus:
            bus.subscribe(UpdateFailedEvent, broken)
            bus.subscribe(UpdateFailedEvent, received.append)
            futures = bus.publish(UpdateFailedEvent(result=UpdateResult.FAIL_VERSION))

        assert len(received) == 1
        assert isinstance(futures[0].exception(), RuntimeError)

    def test_unsubscribe(self):
        received = []
        with EventBus() as bus:
            bus.subscribe(UpdateFailedEvent, received.append)
            bus.unsubscribe(UpdateFailedEvent, received.append)
            assert bus.publish(UpdateFailedEvent(result=UpdateResult.FAIL_VERSION)) == []
        assert received == []

    def test_updater_publishes_through_bus(self, make_provider, admin):
        received = []
        with EventBus() as bus:
            bus.subscribe(UpdateCompleteEvent, received.append)
            updater = (
                UpdaterBuilder('1.0.0', publish=bus.publish)
                .add_provider(make_provider('1.0.1', name='GitHub'))
                .add_audience_member(admin)
                .build()
            )
            assert updater.run_cycle() is UpdateResult.AVAILABLE

        assert received[0].version == '1.0.1'
        assert received[0].audience == (admin,)


class TestEventModels:
    """Tests for event serialization."""

    def test_complete_event_to_dict(self, make_provider, admin):
        provider = make_provider('2.0', name='GitHub')
        provider.initialize()
        event = UpdateCompleteEvent(
            result=UpdateResult.AVAILABLE,
            version='2.0',
            tier=StabilityTier.RELEASE,
            audience=(admin,),
            provider=provider,
        )

        data = event.to_dict()

        assert data['result'] == 'available'
        assert data['tier'] == 'RELEASE'
        assert data['audience'] == ['admin']
        assert data['provider'] == 'GitHub'
        assert data['download_link'] == 'https://example.com/GitHub/download'
        assert 'GitHub' in str(event)

    def test_failed_event_without_provider(self):
        event = UpdateFailedEvent(result=UpdateResult.FAIL_VERSION, error='bad version')
        assert event.to_dict()['provider'] is None
        assert 'bad version' in str(event)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
