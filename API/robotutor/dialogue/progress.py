"""
Progress tracking: step and answer counters plus declarative badge rules.

``advance`` never mutates its input. Badges are kept in award order and a rule
that fires for a badge already held is a no-op, so the tuple never holds
duplicates and never shrinks.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

ANSWER_KEY = {
    "quiz_computational_thinking": "decomposition",
    "quiz_robotics_basic": "sensors_and_actuators",
    "quiz_arduino_intro": "programming_board",
}


@dataclass(frozen=True)
class Progress:
    total_steps: int = 0
    completed_steps: int = 0
    correct_answers: int = 0
    badges: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "total_steps": self.total_steps,
            "completed_steps": self.completed_steps,
            "correct_answers": self.correct_answers,
            "badges": list(self.badges),
        }


@dataclass(frozen=True)
class BadgeRule:
    badge_id: str
    predicate: Callable[[Progress], bool]
    description: str = ""


BADGE_RULES: list[BadgeRule] = [
    BadgeRule("explorer", lambda p: p.completed_steps >= 5, "Completed 5 conversation steps"),
    BadgeRule("scholar", lambda p: p.correct_answers >= 3, "Answered 3 quiz questions correctly"),
]


def is_correct_answer(step: str, choice_id: str) -> bool:
    return ANSWER_KEY.get(step) == choice_id


def award_badges(progress: Progress, rules: list[BadgeRule] | None = None) -> Progress:
    badges = list(progress.badges)
    for rule in BADGE_RULES if rules is None else rules:
        if rule.badge_id not in badges and rule.predicate(progress):
            badges.append(rule.badge_id)
    if len(badges) == len(progress.badges):
        return progress
    return replace(progress, badges=tuple(badges))


def advance(progress: Progress, step: str, choice_id: str, rules: list[BadgeRule] | None = None) -> Progress:
    updated = replace(
        progress,
        completed_steps=progress.completed_steps + 1,
        correct_answers=progress.correct_answers + (1 if is_correct_answer(step, choice_id) else 0),
    )
    return award_badges(updated, rules)


def newly_awarded(before: Progress, after: Progress) -> list[str]:
    held = set(before.badges)
    return [badge for badge in after.badges if badge not in held]


def completion_rate(progress: Progress) -> float:
    """Percentage of completed steps answered correctly; 0.0 before any step."""
    if progress.completed_steps == 0:
        return 0.0
    return round(progress.correct_answers / progress.completed_steps * 100, 2)
