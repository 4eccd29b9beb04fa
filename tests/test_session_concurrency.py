from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from robotutor.dialogue.errors import SessionNotFound
from robotutor.dialogue.models import ROLE_TUTOR, ROLE_USER


def test_concurrent_responds_on_one_session_are_serialized(engine):
    started = engine.start("u1", "introduction")
    total = 60

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda i: engine.respond(started.session_id, f"choice_{i}"), range(total)))

    history = engine.get_history(started.session_id)
    assert history.progress.completed_steps == total
    assert len(history.messages) == 2 * total + 1
    assert all(m.role == ROLE_USER for m in history.messages[1::2])
    assert all(m.role == ROLE_TUTOR for m in history.messages[2::2])
    assert sorted(r.progress.completed_steps for r in results) == list(range(1, total + 1))
    # Every choice lands in the topic-selection context exactly once, so the last writer wins.
    assert history.context["preferredTopic"] == history.messages[-2].content


def test_other_sessions_are_not_blocked(engine):
    busy = engine.start("u1", "introduction")
    free = engine.start("u2", "introduction")

    with engine.store.locked(busy.session_id):
        with ThreadPoolExecutor(max_workers=1) as pool:
            result = pool.submit(engine.respond, free.session_id, "lets_start").result(timeout=5)

    assert result.current_step == "knowledge_check"


def test_concurrent_end_succeeds_exactly_once(engine):
    started = engine.start("u1", "introduction")

    def _end(_):
        try:
            return engine.end(started.session_id)
        except SessionNotFound:
            return None

    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(_end, range(16)))

    assert sum(1 for outcome in outcomes if outcome is not None) == 1
    assert engine.stats()["active_sessions"] == 0


def test_respond_waiting_on_ended_session_fails_cleanly(engine):
    started = engine.start("u1", "introduction")

    with ThreadPoolExecutor(max_workers=1) as pool:
        with engine.store.locked(started.session_id) as session:
            pending = pool.submit(engine.respond, started.session_id, "lets_start")
            assert session.progress.completed_steps == 0
        engine.end(started.session_id)
        try:
            result = pending.result(timeout=5)
        except SessionNotFound:
            result = None

    # Either the response committed before the end, or it saw the session gone.
    record = engine.get_user_progress("u1")
    expected = 1 if result is not None else 0
    assert record.progress.completed_steps == expected

    with pytest.raises(SessionNotFound):
        engine.respond(started.session_id, "lets_start")
