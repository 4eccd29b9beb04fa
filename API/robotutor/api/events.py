from __future__ import annotations

import asyncio
import json

from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from robotutor.core.event_bus import event_bus
from robotutor.core.settings import settings

router = APIRouter(prefix="/events", tags=["events"])


@router.get("/stream")
async def stream_events():
    queue = await event_bus.subscribe(replay_last=settings.event_replay_last)

    async def generator():
        try:
            while True:
                event = await queue.get()
                yield f"event: {event['type']}\ndata: {json.dumps(event)}\n\n"
        except asyncio.CancelledError:
            return
        finally:
            await event_bus.unsubscribe(queue)

    return StreamingResponse(generator(), media_type="text/event-stream")


@router.get("/history")
async def events_history():
    return {"events": event_bus.history()}
