from app.models import GradeResult, Lesson

PASS_SCORE = 80


def grade_lesson(lesson: Lesson, answers: dict[str, str]) -> GradeResult:
    """Score multiple-choice answers by exact match; reflections count toward the total only."""
    questions = lesson.interactive_data.questions
    correct = sum(
        1
        for q in questions
        if q.type == "multiple-choice" and q.answer is not None and answers.get(q.id) == q.answer
    )
    total = len(questions)
    score = correct / total * 100 if total else 0.0
    feedback = "Excellent work!" if score >= PASS_SCORE else "Good effort! Let's review some concepts."
    return GradeResult(score=score, correct=correct, total=total, feedback=feedback)
