from robotutor.dialogue.progress import (
    BadgeRule,
    Progress,
    advance,
    award_badges,
    completion_rate,
    is_correct_answer,
    newly_awarded,
)


def test_advance_counts_step_and_leaves_input_untouched():
    start = Progress(total_steps=7)
    after = advance(start, "topic_selection", "lets_start")
    assert after.completed_steps == 1
    assert after.correct_answers == 0
    assert after.total_steps == 7
    assert start.completed_steps == 0


def test_correct_answer_only_at_its_quiz_step():
    assert is_correct_answer("quiz_robotics_basic", "sensors_and_actuators")
    assert not is_correct_answer("quiz_arduino_intro", "sensors_and_actuators")
    assert not is_correct_answer("parts_detail", "sensors_and_actuators")

    after = advance(Progress(), "quiz_arduino_intro", "programming_board")
    assert after.correct_answers == 1


def test_explorer_awarded_at_five_steps():
    progress = Progress()
    for _ in range(4):
        progress = advance(progress, "somewhere", "anything")
    assert progress.badges == ()
    progress = advance(progress, "somewhere", "anything")
    assert progress.badges == ("explorer",)


def test_scholar_awarded_after_three_correct_answers():
    progress = Progress()
    for step, answer in [
        ("quiz_computational_thinking", "decomposition"),
        ("quiz_robotics_basic", "sensors_and_actuators"),
        ("quiz_arduino_intro", "programming_board"),
    ]:
        progress = advance(progress, step, answer)
    assert progress.correct_answers == 3
    assert progress.badges == ("scholar",)


def test_rules_are_idempotent():
    progress = Progress(completed_steps=9, correct_answers=4, badges=("explorer", "scholar"))
    assert award_badges(progress) is progress
    assert advance(progress, "x", "y").badges == ("explorer", "scholar")


def test_custom_rules_extend_badges():
    rules = [BadgeRule("first_step", lambda p: p.completed_steps >= 1)]
    after = advance(Progress(), "x", "y", rules)
    assert after.badges == ("first_step",)
    assert newly_awarded(Progress(), after) == ["first_step"]


def test_completion_rate():
    assert completion_rate(Progress()) == 0.0
    assert completion_rate(Progress(completed_steps=3, correct_answers=1)) == 33.33
