"""Contextual reply suggestions shown next to the tutor's offered choices."""
from __future__ import annotations

from robotutor.dialogue.models import Suggestion

TOPIC_SUGGESTIONS: dict[str, list[Suggestion]] = {
    "how_robots_think": [
        Suggestion("Explain it better", "clarification"),
        Suggestion("I want a practical example", "example"),
        Suggestion("How do I use this?", "application"),
    ],
    "programming_robots": [
        Suggestion("Seems complicated...", "difficulty"),
        Suggestion("Let's program something!", "hands_on"),
        Suggestion("Which language should I use?", "technical"),
    ],
}

BEGINNER_SUGGESTIONS = [
    Suggestion("Can you go slower?", "pace"),
    Suggestion("I still don't get it...", "confusion"),
]

DEFAULT_SUGGESTIONS = [
    Suggestion("Continue", "continue"),
    Suggestion("I have a question", "question"),
    Suggestion("I want a quiz!", "assessment"),
]


def build_suggestions(context: dict[str, str], limit: int = 4) -> list[Suggestion]:
    suggestions: list[Suggestion] = []
    suggestions.extend(TOPIC_SUGGESTIONS.get(context.get("preferredTopic", ""), []))
    if context.get("difficultyLevel") == "beginner":
        suggestions.extend(BEGINNER_SUGGESTIONS)
    suggestions.extend(DEFAULT_SUGGESTIONS)
    return suggestions[:limit]
