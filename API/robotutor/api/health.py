from fastapi import APIRouter

from robotutor.core.event_bus import event_bus
from robotutor.core.settings import settings
from robotutor.dialogue.engine import dialogue_engine

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    stats = dialogue_engine.stats()
    return {
        "status": "ok",
        "service": settings.service_name,
        "env": settings.app_env,
        "active_sessions": stats["active_sessions"],
        "event_subscribers": event_bus.subscriber_count(),
    }
