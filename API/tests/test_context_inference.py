import pytest

from robotutor.dialogue.context import infer_context, infer_difficulty


@pytest.mark.parametrize(
    "choice, level",
    [
        ("never_heard", "beginner"),
        ("some_knowledge", "intermediate"),
        ("experienced", "advanced"),
        ("programming_focus", "intermediate"),
        ("electronics_focus", "advanced"),
        ("general_robots", "beginner"),
        ("lets_start", "beginner"),
    ],
)
def test_difficulty_table(choice, level):
    assert infer_difficulty(choice) == level


def test_topic_selection_sets_topic_and_difficulty():
    assert infer_context("topic_selection", "experienced") == {
        "preferredTopic": "experienced",
        "difficultyLevel": "advanced",
    }


def test_knowledge_check_and_learning_style():
    assert infer_context("knowledge_check", "some_knowledge") == {"priorKnowledge": "some_knowledge"}
    assert infer_context("learning_style", "visual_learner") == {"learningStyle": "visual_learner"}


def test_other_steps_infer_nothing():
    assert infer_context("quiz_robotics_basic", "sensors_and_actuators") == {}
    assert infer_context("completed", "see_progress") == {}
