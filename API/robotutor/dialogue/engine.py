from __future__ import annotations

import json
import uuid

from robotutor.content.lessons import CONTENT_TREE
from robotutor.content.tree import (
    COMPLETED_STEP,
    FALLBACK_NODE,
    WELCOME_STEP,
    ContentTree,
    DialogueNode,
    LessonType,
    parse_lesson_type,
)
from robotutor.core.logging import DOMAIN_DIALOGUE, DOMAIN_PROGRESS, get_domain_logger
from robotutor.core.settings import settings
from robotutor.dialogue.context import infer_context
from robotutor.dialogue.errors import ContentTreeError
from robotutor.dialogue.models import (
    ROLE_TUTOR,
    ROLE_USER,
    History,
    Message,
    RespondResult,
    Session,
    SessionSummary,
    StartResult,
    Suggestion,
    UserProgressRecord,
    utc_now,
)
from robotutor.dialogue.progress import BadgeRule, Progress, advance, completion_rate, newly_awarded
from robotutor.dialogue.store import SessionStore
from robotutor.dialogue.suggestions import build_suggestions

logger = get_domain_logger(__name__, DOMAIN_DIALOGUE)
progress_logger = get_domain_logger(__name__, DOMAIN_PROGRESS)


def _log_event(log, event_type: str, **fields) -> None:
    log.info(json.dumps({"type": event_type, **fields}, default=str))


class DialogueEngine:
    """Start, drive and end tutoring conversations over the content tree."""

    def __init__(
        self,
        store: SessionStore | None = None,
        tree: ContentTree | None = None,
        badge_rules: list[BadgeRule] | None = None,
        avatar: str | None = None,
    ):
        self.store = store or SessionStore()
        self.tree = tree or CONTENT_TREE
        self.badge_rules = badge_rules
        self.avatar = avatar or settings.tutor_avatar

    def _tutor_message(self, node: DialogueNode, step: str) -> Message:
        return Message(
            role=ROLE_TUTOR,
            content=node.text,
            step=step,
            options=node.options,
            hint=node.hint,
            educational_content=node.educational_content,
            avatar=self.avatar,
        )

    def start(self, user_id: str, lesson_type: str | LessonType) -> StartResult:
        lesson = parse_lesson_type(lesson_type)
        session = Session(
            id=f"{user_id}_{uuid.uuid4().hex}",
            user_id=user_id,
            lesson_type=lesson,
            current_step=WELCOME_STEP,
            progress=Progress(total_steps=self.tree.total_steps(lesson)),
        )
        session.current_step = self.tree.first_step(lesson)
        welcome = self._tutor_message(self.tree.welcome(lesson), session.current_step)
        session.messages.append(welcome)
        self.store.add(session)

        _log_event(
            logger,
            "session_started",
            session_id=session.id,
            user_id=user_id,
            lesson_type=lesson.value,
            current_step=session.current_step,
        )
        return StartResult(
            session_id=session.id,
            tutor_message=welcome,
            progress=session.progress,
            current_step=session.current_step,
        )

    def respond(self, session_id: str, choice_id: str, user_text: str | None = None) -> RespondResult:
        with self.store.locked(session_id) as session:
            step = session.current_step
            user_message = Message(role=ROLE_USER, content=choice_id, text=user_text)

            node = self.tree.lookup(session.lesson_type, step, choice_id)
            fallback = node is None
            if fallback:
                node = FALLBACK_NODE
            next_step = node.target_step(step)
            if not self.tree.has_step(session.lesson_type, next_step):
                raise ContentTreeError(
                    f"{session.lesson_type.value}: transition {step}/{choice_id} leaves the tree at '{next_step}'"
                )

            inferred = infer_context(step, choice_id)
            before = session.progress
            after = advance(before, step, choice_id, self.badge_rules)
            tutor_message = self._tutor_message(node, next_step)

            session.messages.append(user_message)
            session.context.update(inferred)
            session.current_step = next_step
            session.messages.append(tutor_message)
            session.progress = after
            context = dict(session.context)

        _log_event(
            logger,
            "state_transition",
            session_id=session_id,
            from_step=step,
            to_step=next_step,
            choice_id=choice_id,
            fallback=fallback,
            context_update=inferred,
            educational_content=node.educational_content.to_dict() if node.educational_content else None,
        )
        awarded = newly_awarded(before, after)
        for badge in awarded:
            _log_event(progress_logger, "badge_awarded", session_id=session_id, badge=badge)

        return RespondResult(
            tutor_message=tutor_message,
            progress=after,
            context=context,
            current_step=next_step,
            new_badges=tuple(awarded),
        )

    def get_history(self, session_id: str) -> History:
        with self.store.locked(session_id) as session:
            return History(
                messages=tuple(session.messages),
                progress=session.progress,
                context=dict(session.context),
            )

    def list_for_user(self, user_id: str) -> list[SessionSummary]:
        return self.store.summaries_for_user(user_id)

    def end(self, session_id: str) -> UserProgressRecord:
        with self.store.locked(session_id) as session:
            end_time = utc_now()
            record = UserProgressRecord(
                user_id=session.user_id,
                session_id=session.id,
                lesson_type=session.lesson_type,
                progress=session.progress,
                end_time=end_time,
                duration=(end_time - session.start_time).total_seconds(),
                lesson_completed=session.current_step == COMPLETED_STEP,
                completion_rate=completion_rate(session.progress),
            )
            self.store.finish(session_id, record)

        _log_event(
            progress_logger,
            "session_ended",
            session_id=session_id,
            user_id=record.user_id,
            lesson_completed=record.lesson_completed,
            completed_steps=record.progress.completed_steps,
            badges=list(record.progress.badges),
        )
        return record

    def restart(
        self, session_id: str, lesson_type: str | LessonType | None = None
    ) -> tuple[UserProgressRecord, StartResult]:
        """End a session and start a fresh one for the same user."""
        if lesson_type is not None:
            parse_lesson_type(lesson_type)
        record = self.end(session_id)
        started = self.start(record.user_id, lesson_type if lesson_type is not None else record.lesson_type)
        return record, started

    def suggestions(self, session_id: str, limit: int | None = None) -> tuple[list[Suggestion], dict[str, str]]:
        history = self.get_history(session_id)
        return build_suggestions(history.context, limit or settings.max_suggestions), history.context

    def get_user_progress(self, user_id: str) -> UserProgressRecord | None:
        return self.store.get_progress(user_id)

    def stats(self) -> dict[str, int]:
        return self.store.stats()


dialogue_engine = DialogueEngine()
