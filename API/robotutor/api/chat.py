from fastapi import APIRouter, HTTPException

from robotutor.content.tree import LessonType
from robotutor.core.event_bus import event_bus
from robotutor.core.logging import DOMAIN_API, get_domain_logger
from robotutor.core.settings import settings
from robotutor.dialogue.engine import dialogue_engine
from robotutor.dialogue.models import utc_now
from robotutor.schemas.chat import (
    ChatMessageRequest,
    LessonShortcutRequest,
    RestartChatRequest,
    StartChatRequest,
)

router = APIRouter(prefix="/chat", tags=["chat"])
logger = get_domain_logger(__name__, DOMAIN_API)

EVENT_SOURCE = "chat"
LESSON_SHORTCUTS = {
    "computational-thinking": LessonType.COMPUTATIONAL_THINKING,
    "robotics-basic": LessonType.ROBOTICS_BASIC,
    "arduino-intro": LessonType.ARDUINO_INTRO,
}


def _start(user_id: str, lesson_type: str) -> dict:
    logger.info("Starting chat user_id=%s lesson_type=%s", user_id, lesson_type)
    result = dialogue_engine.start(user_id, lesson_type)
    data = result.to_dict()
    event_bus.publish("conversation_started", EVENT_SOURCE, {"user_id": user_id, **data})
    return {"success": True, "data": {**data, "avatar": settings.tutor_avatar}}


def _end(session_id: str) -> dict:
    record = dialogue_engine.end(session_id)
    final = record.to_dict()
    event_bus.publish("conversation_ended", EVENT_SOURCE, {"session_id": session_id, "final_progress": final})
    return {
        "final_progress": final,
        "badges": list(record.progress.badges),
        "completion_rate": record.completion_rate,
    }


@router.post("/start")
def start_chat(payload: StartChatRequest):
    return _start(payload.user_id, payload.lesson_type)


@router.post("/lesson/{slug}")
def start_lesson(slug: str, payload: LessonShortcutRequest):
    lesson_type = LESSON_SHORTCUTS.get(slug)
    if lesson_type is None:
        raise HTTPException(status_code=404, detail=f"Unknown lesson: {slug}")
    return _start(payload.user_id, lesson_type.value)


@router.post("/message")
def send_message(payload: ChatMessageRequest):
    logger.info("Processing choice session_id=%s choice_id=%s", payload.session_id, payload.choice_id)
    result = dialogue_engine.respond(payload.session_id, payload.choice_id, payload.user_text)
    data = result.to_dict()
    event_bus.publish("tutor_response", EVENT_SOURCE, {"session_id": payload.session_id, **data})
    if result.new_badges:
        event_bus.publish(
            "badge_earned",
            EVENT_SOURCE,
            {
                "session_id": payload.session_id,
                "badges": list(result.new_badges),
                "message": "🎉 Congratulations! You earned a new achievement!",
            },
        )
    return {"success": True, "data": {**data, "avatar": settings.tutor_avatar}}


@router.get("/history/{session_id}")
def get_history(session_id: str):
    return {"success": True, "data": dialogue_engine.get_history(session_id).to_dict()}


@router.get("/user/{user_id}")
def list_user_chats(user_id: str):
    sessions = [summary.to_dict() for summary in dialogue_engine.list_for_user(user_id)]
    return {"success": True, "data": {"sessions": sessions, "total_sessions": len(sessions)}}


@router.post("/end/{session_id}")
def end_chat(session_id: str):
    logger.info("Ending chat session_id=%s", session_id)
    return {"success": True, "data": _end(session_id)}


@router.post("/restart/{session_id}")
def restart_chat(session_id: str, payload: RestartChatRequest | None = None):
    lesson_type = payload.lesson_type if payload else None
    record, started = dialogue_engine.restart(session_id, lesson_type)
    final = record.to_dict()
    event_bus.publish("conversation_ended", EVENT_SOURCE, {"session_id": session_id, "final_progress": final})
    data = started.to_dict()
    event_bus.publish("conversation_started", EVENT_SOURCE, {"user_id": record.user_id, **data})
    return {
        "success": True,
        "data": {"final_progress": final, "started": {**data, "avatar": settings.tutor_avatar}},
    }


@router.get("/suggestions/{session_id}")
def get_suggestions(session_id: str):
    suggestions, context = dialogue_engine.suggestions(session_id)
    return {
        "success": True,
        "data": {"suggestions": [s.to_dict() for s in suggestions], "context": context},
    }


@router.get("/progress/{user_id}")
def get_user_progress(user_id: str):
    record = dialogue_engine.get_user_progress(user_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"No finished lesson for user: {user_id}")
    return {"success": True, "data": record.to_dict()}


@router.get("/health")
def chat_health():
    stats = dialogue_engine.stats()
    return {
        "success": True,
        "stats": {
            **stats,
            "system_status": "operational",
            "timestamp": utc_now().isoformat(),
        },
    }
