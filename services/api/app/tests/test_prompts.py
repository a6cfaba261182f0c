from app.prompts import (
    SAFE_REFUSAL,
    build_lesson_prompt,
    build_tutor_messages,
    build_tutor_system_prompt,
    trim_history,
)


def test_lesson_prompt_interpolates_fields():
    prompt = build_lesson_prompt("Science", "Botany", "3rd")
    assert "student in 3rd who is studying Science (Course: Botany)" in prompt
    assert '"grade_level": "3rd"' in prompt
    assert '"subject": "Science"' in prompt
    assert '"type": "multiple-choice"' in prompt
    assert '"type": "reflection"' in prompt
    assert prompt.rstrip().endswith("Only return the JSON object. No other text.")


def test_lesson_prompt_does_not_escape():
    prompt = build_lesson_prompt('Math"}', "x", "5th")
    assert '"subject": "Math"}"' in prompt


def test_tutor_prompt_subject_optional():
    with_subject = build_tutor_system_prompt("Ada", "5th", "Fractions")
    without = build_tutor_system_prompt("Ada", "5th")
    assert "homework helper for Ada, a 5th student" in with_subject
    assert "currently working on Fractions" in with_subject
    assert "currently working on" not in without
    assert SAFE_REFUSAL in without


def test_trim_history_keeps_last_ten():
    history = [{"role": "user", "content": str(i)} for i in range(15)]
    assert [m["content"] for m in trim_history(history)] == [str(i) for i in range(5, 15)]
    assert trim_history(history[:3]) == history[:3]


def test_tutor_messages_start_with_system():
    messages = build_tutor_messages("be kind", [{"role": "user", "content": "hi"}])
    assert messages == [{"role": "system", "content": "be kind"}, {"role": "user", "content": "hi"}]


def test_missing_values_render_empty():
    lesson = build_lesson_prompt("Math", None, None)
    tutor = build_tutor_system_prompt(None, None)
    assert "None" not in lesson
    assert "student in  who is studying Math (Course: )" in lesson
    assert "None" not in tutor
