"""
In-memory session store.

Concurrency discipline: a table lock guards the three dicts and is only held
for dict reads/writes; each session additionally owns a lock that is held for
the full read-modify-write of one engine operation. Work on different
sessions therefore never waits on anything but the brief table lock.
"""
from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import Iterator

from robotutor.dialogue.errors import SessionNotFound
from robotutor.dialogue.models import Session, SessionSummary, UserProgressRecord


class SessionStore:
    def __init__(self):
        self._lock = Lock()
        self._sessions: dict[str, Session] = {}
        self._session_locks: dict[str, Lock] = {}
        self._user_progress: dict[str, UserProgressRecord] = {}

    def add(self, session: Session) -> None:
        with self._lock:
            if session.id in self._sessions:
                raise ValueError(f"Duplicate session id: {session.id}")
            self._sessions[session.id] = session
            self._session_locks[session.id] = Lock()

    @contextmanager
    def locked(self, session_id: str) -> Iterator[Session]:
        """Hold the session's lock for the duration of the block."""
        with self._lock:
            session_lock = self._session_locks.get(session_id)
        if session_lock is None:
            raise SessionNotFound(session_id)
        with session_lock:
            with self._lock:
                session = self._sessions.get(session_id)
            # Ended by another caller while we waited for the lock.
            if session is None:
                raise SessionNotFound(session_id)
            yield session

    def finish(self, session_id: str, record: UserProgressRecord) -> None:
        """Store the user's progress record and drop the session in one table update.

        Callers must hold the session lock (see ``locked``).
        """
        with self._lock:
            if session_id not in self._sessions:
                raise SessionNotFound(session_id)
            self._user_progress[record.user_id] = record
            del self._sessions[session_id]
            del self._session_locks[session_id]

    def summaries_for_user(self, user_id: str) -> list[SessionSummary]:
        with self._lock:
            candidates = [
                (session_id, self._session_locks[session_id])
                for session_id, session in self._sessions.items()
                if session.user_id == user_id
            ]
        summaries = []
        for session_id, session_lock in candidates:
            with session_lock:
                with self._lock:
                    session = self._sessions.get(session_id)
                if session is not None:
                    summaries.append(session.summary())
        return summaries

    def get_progress(self, user_id: str) -> UserProgressRecord | None:
        with self._lock:
            return self._user_progress.get(user_id)

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {
                "active_sessions": len(self._sessions),
                "tracked_users": len(self._user_progress),
            }

    def clear(self) -> None:
        """Drop all sessions and progress records (e.g. for tests)."""
        with self._lock:
            self._sessions.clear()
            self._session_locks.clear()
            self._user_progress.clear()
