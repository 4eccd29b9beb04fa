"""
Content tree: the static, typed step graph each lesson walks through.

Lookups are keyed by lesson type, then step id, then choice id. Every lesson
also carries a ``welcome`` node that takes no choice and is only used for the
first tutor message of a session.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from robotutor.dialogue.errors import ContentTreeError, InvalidLessonType

WELCOME_STEP = "welcome"
COMPLETED_STEP = "completed"


class LessonType(str, Enum):
    INTRODUCTION = "introduction"
    COMPUTATIONAL_THINKING = "computational_thinking"
    ROBOTICS_BASIC = "robotics_basic"
    ARDUINO_INTRO = "arduino_intro"


class StepPolicy(str, Enum):
    """Transition used when a node does not name its next step."""

    STAY = "stay"


def parse_lesson_type(value: str | LessonType) -> LessonType:
    if isinstance(value, LessonType):
        return value
    try:
        return LessonType(value)
    except ValueError as exc:
        raise InvalidLessonType(str(value)) from exc


@dataclass(frozen=True)
class Choice:
    id: str
    label: str
    kind: str = "primary"

    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label, "type": self.kind}


@dataclass(frozen=True)
class EducationalContent:
    topic: str
    level: str

    def to_dict(self) -> dict:
        return {"topic": self.topic, "level": self.level}


@dataclass(frozen=True)
class DialogueNode:
    text: str
    options: tuple[Choice, ...] = ()
    next_step: str | StepPolicy = StepPolicy.STAY
    educational_content: EducationalContent | None = None
    hint: str | None = None

    def target_step(self, current_step: str) -> str:
        if self.next_step is StepPolicy.STAY:
            return current_step
        return self.next_step

    def option_ids(self) -> list[str]:
        return [choice.id for choice in self.options]


@dataclass(frozen=True)
class Lesson:
    lesson_type: LessonType
    welcome: DialogueNode
    first_step: str
    steps: Mapping[str, Mapping[str, DialogueNode]] = field(default_factory=dict)


FALLBACK_NODE = DialogueNode(
    text=(
        "🤔 Interesting idea! As I always say: 'Every robot starts with a curious idea!' "
        "Shall we explore it together?"
    ),
    options=(
        Choice("explore_together", "Let's explore! 🔍", "primary"),
        Choice("need_help", "I need help", "secondary"),
    ),
)


class ContentTree:
    """Read-only view over all lessons. Validated once on construction."""

    def __init__(self, lessons: Mapping[LessonType, Lesson]):
        self._lessons: Mapping[LessonType, Lesson] = MappingProxyType(
            {
                lesson_type: Lesson(
                    lesson_type=lesson.lesson_type,
                    welcome=lesson.welcome,
                    first_step=lesson.first_step,
                    steps=MappingProxyType({step: MappingProxyType(dict(nodes)) for step, nodes in lesson.steps.items()}),
                )
                for lesson_type, lesson in lessons.items()
            }
        )
        self.validate()

    def validate(self) -> None:
        missing = [lesson_type.value for lesson_type in LessonType if lesson_type not in self._lessons]
        if missing:
            raise ContentTreeError(f"Lessons without content: {', '.join(missing)}")
        for lesson_type, lesson in self._lessons.items():
            if lesson.lesson_type is not lesson_type:
                raise ContentTreeError(f"Lesson registered under {lesson_type.value} declares {lesson.lesson_type.value}")
            if not lesson.welcome.options:
                raise ContentTreeError(f"{lesson_type.value}: welcome node offers no choices")
            if lesson.first_step not in lesson.steps:
                raise ContentTreeError(f"{lesson_type.value}: first step '{lesson.first_step}' is not in the tree")
            if COMPLETED_STEP not in lesson.steps:
                raise ContentTreeError(f"{lesson_type.value}: no '{COMPLETED_STEP}' step")
            if WELCOME_STEP in lesson.steps:
                raise ContentTreeError(f"{lesson_type.value}: '{WELCOME_STEP}' is reserved for the welcome node")
            for step, nodes in lesson.steps.items():
                for choice_id, node in nodes.items():
                    if node.next_step is StepPolicy.STAY:
                        continue
                    if node.next_step not in lesson.steps:
                        raise ContentTreeError(
                            f"{lesson_type.value}: {step}/{choice_id} points at unknown step '{node.next_step}'"
                        )

    def lesson(self, lesson_type: LessonType) -> Lesson:
        return self._lessons[lesson_type]

    def welcome(self, lesson_type: LessonType) -> DialogueNode:
        return self._lessons[lesson_type].welcome

    def first_step(self, lesson_type: LessonType) -> str:
        return self._lessons[lesson_type].first_step

    def lookup(self, lesson_type: LessonType, step: str, choice_id: str) -> DialogueNode | None:
        nodes = self._lessons[lesson_type].steps.get(step)
        if nodes is None:
            return None
        return nodes.get(choice_id)

    def has_step(self, lesson_type: LessonType, step: str) -> bool:
        return step in self._lessons[lesson_type].steps

    def steps(self, lesson_type: LessonType) -> list[str]:
        return list(self._lessons[lesson_type].steps)

    def total_steps(self, lesson_type: LessonType) -> int:
        return len(self._lessons[lesson_type].steps)
