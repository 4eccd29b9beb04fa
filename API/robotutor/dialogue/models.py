from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from robotutor.content.tree import Choice, EducationalContent, LessonType
from robotutor.dialogue.progress import Progress

ROLE_USER = "user"
ROLE_TUTOR = "tutor"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Message:
    role: str
    content: str
    timestamp: datetime = field(default_factory=utc_now)
    text: str | None = None
    step: str | None = None
    options: tuple[Choice, ...] = ()
    hint: str | None = None
    educational_content: EducationalContent | None = None
    avatar: str | None = None

    def to_dict(self) -> dict:
        out = {
            "role": self.role,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.role == ROLE_USER:
            out["text"] = self.text
            return out
        out.update(
            {
                "step": self.step,
                "options": [choice.to_dict() for choice in self.options],
                "hint": self.hint,
                "educational_content": self.educational_content.to_dict() if self.educational_content else None,
                "avatar": self.avatar,
            }
        )
        return out


@dataclass
class Session:
    """Live conversation state. Only the dialogue engine writes these fields, under the session lock."""

    id: str
    user_id: str
    lesson_type: LessonType
    current_step: str
    start_time: datetime = field(default_factory=utc_now)
    context: dict[str, str] = field(default_factory=dict)
    messages: list[Message] = field(default_factory=list)
    progress: Progress = field(default_factory=Progress)

    def summary(self) -> SessionSummary:
        return SessionSummary(
            id=self.id,
            lesson_type=self.lesson_type,
            current_step=self.current_step,
            start_time=self.start_time,
            progress=self.progress,
        )


@dataclass(frozen=True)
class SessionSummary:
    id: str
    lesson_type: LessonType
    current_step: str
    start_time: datetime
    progress: Progress

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "lesson_type": self.lesson_type.value,
            "current_step": self.current_step,
            "start_time": self.start_time.isoformat(),
            "progress": self.progress.to_dict(),
        }


@dataclass(frozen=True)
class StartResult:
    session_id: str
    tutor_message: Message
    progress: Progress
    current_step: str

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "tutor_message": self.tutor_message.to_dict(),
            "progress": self.progress.to_dict(),
            "current_step": self.current_step,
        }


@dataclass(frozen=True)
class RespondResult:
    tutor_message: Message
    progress: Progress
    context: dict[str, str]
    current_step: str
    new_badges: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "tutor_message": self.tutor_message.to_dict(),
            "progress": self.progress.to_dict(),
            "context": dict(self.context),
            "current_step": self.current_step,
            "new_badges": list(self.new_badges),
        }


@dataclass(frozen=True)
class History:
    messages: tuple[Message, ...]
    progress: Progress
    context: dict[str, str]

    def to_dict(self) -> dict:
        return {
            "messages": [message.to_dict() for message in self.messages],
            "progress": self.progress.to_dict(),
            "context": dict(self.context),
        }


@dataclass(frozen=True)
class UserProgressRecord:
    user_id: str
    session_id: str
    lesson_type: LessonType
    progress: Progress
    end_time: datetime
    duration: float
    lesson_completed: bool
    completion_rate: float

    def to_dict(self) -> dict:
        out = self.progress.to_dict()
        out.update(
            {
                "user_id": self.user_id,
                "session_id": self.session_id,
                "lesson_type": self.lesson_type.value,
                "end_time": self.end_time.isoformat(),
                "duration": self.duration,
                "lesson_completed": self.lesson_completed,
                "completion_rate": self.completion_rate,
            }
        )
        return out


@dataclass(frozen=True)
class Suggestion:
    text: str
    kind: str

    def to_dict(self) -> dict:
        return {"text": self.text, "type": self.kind}
