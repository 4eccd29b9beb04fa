from pydantic import BaseModel, Field

from robotutor.core.settings import settings


class StartChatRequest(BaseModel):
    user_id: str = Field(..., min_length=1, description="Owning user id")
    lesson_type: str = Field(default=settings.default_lesson_type, min_length=1)


class LessonShortcutRequest(BaseModel):
    user_id: str = Field(..., min_length=1)


class ChatMessageRequest(BaseModel):
    session_id: str = Field(..., min_length=1)
    choice_id: str = Field(..., min_length=1)
    user_text: str | None = None


class RestartChatRequest(BaseModel):
    lesson_type: str | None = None
