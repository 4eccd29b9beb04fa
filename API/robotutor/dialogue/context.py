"""Personalization attributes inferred from the choices a learner makes at specific steps."""
from __future__ import annotations

DEFAULT_DIFFICULTY = "beginner"

DIFFICULTY_BY_CHOICE = {
    "never_heard": "beginner",
    "some_knowledge": "intermediate",
    "experienced": "advanced",
    "programming_focus": "intermediate",
    "electronics_focus": "advanced",
    "general_robots": "beginner",
}


def infer_difficulty(choice_id: str) -> str:
    return DIFFICULTY_BY_CHOICE.get(choice_id, DEFAULT_DIFFICULTY)


def _topic_selection(choice_id: str) -> dict[str, str]:
    return {"preferredTopic": choice_id, "difficultyLevel": infer_difficulty(choice_id)}


def _knowledge_check(choice_id: str) -> dict[str, str]:
    return {"priorKnowledge": choice_id}


def _learning_style(choice_id: str) -> dict[str, str]:
    return {"learningStyle": choice_id}


INFERENCE_RULES = {
    "topic_selection": _topic_selection,
    "knowledge_check": _knowledge_check,
    "learning_style": _learning_style,
}


def infer_context(step: str, choice_id: str) -> dict[str, str]:
    """Context keys to merge for a choice made at ``step``. Steps without a rule yield ``{}``."""
    rule = INFERENCE_RULES.get(step)
    if rule is None:
        return {}
    return rule(choice_id)
