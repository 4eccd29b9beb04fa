from __future__ import annotations

import uuid


def _user() -> str:
    return f"learner-{uuid.uuid4().hex[:8]}"


def _start(client, user_id: str, lesson_type: str = "introduction") -> dict:
    response = client.post("/chat/start", json={"user_id": user_id, "lesson_type": lesson_type})
    assert response.status_code == 200
    return response.json()["data"]


def test_health_endpoints(client):
    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "ok"

    chat_health = client.get("/chat/health")
    assert chat_health.status_code == 200
    stats = chat_health.json()["stats"]
    assert stats["system_status"] == "operational"
    assert "active_sessions" in stats
    assert "tracked_users" in stats


def test_happy_path_start_message_history_end(client):
    user_id = _user()
    started = _start(client, user_id)
    session_id = started["session_id"]
    assert started["avatar"] == "edu-ardu"
    assert started["current_step"] == "topic_selection"
    assert [o["id"] for o in started["tutor_message"]["options"]] == ["lets_start", "what_learn", "already_know"]

    reply = client.post("/chat/message", json={"session_id": session_id, "choice_id": "lets_start"})
    assert reply.status_code == 200
    data = reply.json()["data"]
    assert data["current_step"] == "knowledge_check"
    assert data["progress"]["completed_steps"] == 1
    assert data["context"]["preferredTopic"] == "lets_start"

    history = client.get(f"/chat/history/{session_id}")
    assert history.status_code == 200
    messages = history.json()["data"]["messages"]
    assert [m["role"] for m in messages] == ["tutor", "user", "tutor"]
    assert messages[1]["content"] == "lets_start"

    listing = client.get(f"/chat/user/{user_id}")
    assert listing.json()["data"]["total_sessions"] == 1
    assert listing.json()["data"]["sessions"][0]["id"] == session_id

    ended = client.post(f"/chat/end/{session_id}")
    assert ended.status_code == 200
    final = ended.json()["data"]
    assert final["final_progress"]["completed_steps"] == 1
    assert final["final_progress"]["lesson_completed"] is False
    assert final["completion_rate"] == 0.0
    assert final["badges"] == []

    stored = client.get(f"/chat/progress/{user_id}")
    assert stored.status_code == 200
    assert stored.json()["data"]["session_id"] == session_id

    again = client.post(f"/chat/end/{session_id}")
    assert again.status_code == 404
    assert again.json()["error"]["code"] == "session_not_found"


def test_invalid_lesson_type_is_rejected(client):
    response = client.post("/chat/start", json={"user_id": _user(), "lesson_type": "cooking"})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "invalid_lesson_type"


def test_unknown_session_is_not_found(client):
    response = client.post("/chat/message", json={"session_id": "missing", "choice_id": "lets_start"})
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "session_not_found"

    assert client.get("/chat/history/missing").status_code == 404
    assert client.get("/chat/suggestions/missing").status_code == 404


def test_empty_fields_fail_validation(client):
    response = client.post("/chat/start", json={"user_id": ""})
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "validation_error"

    response = client.post("/chat/message", json={"session_id": "x"})
    assert response.status_code == 422


def test_default_lesson_type_is_introduction(client):
    response = client.post("/chat/start", json={"user_id": _user()})
    assert response.status_code == 200
    assert response.json()["data"]["current_step"] == "topic_selection"


def test_lesson_shortcuts(client):
    response = client.post("/chat/lesson/robotics-basic", json={"user_id": _user()})
    assert response.status_code == 200
    assert response.json()["data"]["current_step"] == "robot_parts"

    missing = client.post("/chat/lesson/underwater-basket-weaving", json={"user_id": _user()})
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "http_error"


def test_suggestions_endpoint(client):
    started = _start(client, _user())
    client.post(
        "/chat/message",
        json={"session_id": started["session_id"], "choice_id": "programming_robots"},
    )
    response = client.get(f"/chat/suggestions/{started['session_id']}")
    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data["suggestions"]) == 4
    assert data["suggestions"][0]["type"] == "difficulty"
    assert data["context"]["preferredTopic"] == "programming_robots"


def test_restart_switches_lesson(client):
    user_id = _user()
    started = _start(client, user_id)
    response = client.post(f"/chat/restart/{started['session_id']}", json={"lesson_type": "arduino_intro"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["final_progress"]["session_id"] == started["session_id"]
    assert data["started"]["current_step"] == "arduino_basics"
    assert client.get(f"/chat/history/{started['session_id']}").status_code == 404


def test_missing_progress_record(client):
    response = client.get(f"/chat/progress/{_user()}")
    assert response.status_code == 404


def test_badge_earned_event_is_published(client):
    started = _start(client, _user())
    for i in range(5):
        response = client.post(
            "/chat/message",
            json={"session_id": started["session_id"], "choice_id": f"wander_{i}"},
        )
    assert response.json()["data"]["new_badges"] == ["explorer"]

    events = client.get("/events/history").json()["events"]
    badge_events = [
        e for e in events if e["type"] == "badge_earned" and e["data"]["session_id"] == started["session_id"]
    ]
    assert len(badge_events) == 1
    assert badge_events[0]["data"]["badges"] == ["explorer"]


def test_request_id_is_echoed(client):
    response = client.get("/health", headers={"x-request-id": "abc-123"})
    assert response.headers["x-request-id"] == "abc-123"
