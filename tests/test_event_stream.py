from __future__ import annotations

import asyncio

import pytest

from robotutor.core.event_bus import EventBus


@pytest.mark.asyncio
async def test_subscriber_receives_published_event():
    bus = EventBus(history_size=5)
    queue = await bus.subscribe(replay_last=0)

    bus.publish("badge_earned", "chat", {"badges": ["explorer"]})
    event = await asyncio.wait_for(queue.get(), timeout=1)

    assert event["type"] == "badge_earned"
    assert event["data"] == {"badges": ["explorer"]}
    await bus.unsubscribe(queue)
    assert bus.subscriber_count() == 0


@pytest.mark.asyncio
async def test_publish_from_worker_thread_reaches_subscriber():
    bus = EventBus()
    queue = await bus.subscribe(replay_last=0)

    await asyncio.to_thread(bus.publish, "tutor_response", "chat", {"session_id": "s1"})
    event = await asyncio.wait_for(queue.get(), timeout=1)

    assert event["data"]["session_id"] == "s1"


@pytest.mark.asyncio
async def test_subscribe_replays_recent_history():
    bus = EventBus(history_size=3)
    for i in range(5):
        bus.publish("tutor_response", "chat", {"n": i})

    assert [e["data"]["n"] for e in bus.history()] == [2, 3, 4]

    queue = await bus.subscribe(replay_last=2)
    replayed = [queue.get_nowait()["data"]["n"] for _ in range(2)]
    assert replayed == [3, 4]
    assert queue.empty()
