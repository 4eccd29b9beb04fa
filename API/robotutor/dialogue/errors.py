"""Typed failures raised by the dialogue engine; the HTTP layer maps them to responses."""


class DialogueError(Exception):
    code = "dialogue_error"
    status_code = 400


class InvalidLessonType(DialogueError):
    code = "invalid_lesson_type"
    status_code = 400

    def __init__(self, lesson_type: str):
        self.lesson_type = lesson_type
        super().__init__(f"Unknown lesson type: {lesson_type}")


class SessionNotFound(DialogueError):
    code = "session_not_found"
    status_code = 404

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


class ContentTreeError(DialogueError):
    """Content would move a session off its lesson tree, or the tree itself is malformed."""

    code = "content_tree_error"
    status_code = 500
