from __future__ import annotations

import asyncio
from collections import deque
from datetime import datetime, timezone
from threading import Lock

from robotutor.core.settings import settings


class EventBus:
    """Chat event fan-out. Publishing is synchronous and thread-safe; subscribers are asyncio queues."""

    def __init__(self, history_size: int = 200):
        self._subscribers: list[tuple[asyncio.AbstractEventLoop, asyncio.Queue]] = []
        self._history: deque[dict] = deque(maxlen=history_size)
        self._lock = Lock()

    def publish(self, event_type: str, source: str, data: dict) -> dict:
        event = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "type": event_type,
            "source": source,
            "data": data,
        }
        with self._lock:
            self._history.append(event)
            subscribers = list(self._subscribers)
        for loop, queue in subscribers:
            if loop.is_closed():
                continue
            loop.call_soon_threadsafe(queue.put_nowait, event)
        return event

    async def subscribe(self, replay_last: int = 10) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue()
        loop = asyncio.get_running_loop()
        with self._lock:
            self._subscribers.append((loop, queue))
            history = list(self._history)[-replay_last:] if replay_last > 0 else []
        for event in history:
            queue.put_nowait(event)
        return queue

    async def unsubscribe(self, queue: asyncio.Queue) -> None:
        with self._lock:
            self._subscribers = [(loop, q) for loop, q in self._subscribers if q is not queue]

    def history(self) -> list[dict]:
        with self._lock:
            return list(self._history)

    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)


event_bus = EventBus(history_size=settings.event_history_size)
