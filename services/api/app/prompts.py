"""Prompt templates for lesson generation and the homework tutor.

Caller-supplied values are interpolated as-is, without escaping; missing
values render as empty text.
"""

from typing import Sequence

HISTORY_LIMIT = 10

SAFE_REFUSAL = "That's a great question for a trusted adult like your parent or teacher!"


def build_lesson_prompt(subject: str, course_name: str | None, grade_level: str | None) -> str:
    """Build the instruction that asks the model for a lesson as a JSON object.

    The embedded shape is what the lesson player renders: a hook, an activity,
    resource links, and a question list mixing multiple-choice questions (whose
    ``answer`` must equal one option exactly) with open-ended reflections.

    Args:
        subject: Subject the student is studying, e.g. "Math".
        course_name: Course within the subject, e.g. "Algebra I".
        grade_level: Grade label such as "5th".

    Returns:
        Fully rendered prompt string.
    """
    grade_level = grade_level or ""
    course_name = course_name or ""
    return f"""You are an expert homeschool tutor. Generate an interactive lesson for a student in {grade_level} who is studying {subject} (Course: {course_name}).

Format the response as a valid JSON object with the following structure:
{{
  "title": "A creative title for the lesson",
  "grade_level": "{grade_level}",
  "subject": "{subject}",
  "type": "tailored",
  "content": {{
    "hook": "A 2-3 sentence engaging introduction or story-based 'did you know?' to spark interest.",
    "activity": "A hands-on or simple thought activity they can do right now.",
    "resources": [
      {{ "label": "Label for a helpful resource", "url": "A real URL to a helpful video or article (use https://youtube.com for placeholders if unsure)" }}
    ]
  }},
  "interactive_data": {{
    "questions": [
      {{
        "id": "q1",
        "text": "A multiple choice question about the lesson hook.",
        "type": "multiple-choice",
        "options": ["Option A", "Option B", "Option C", "Option D"],
        "answer": "The correct option text exactly"
      }},
      {{
        "id": "q2",
        "text": "An open-ended reflection question about the activity.",
        "type": "reflection"
      }}
    ]
  }}
}}

Only return the JSON object. No other text.
"""


def build_tutor_system_prompt(student_name: str | None, grade_level: str | None, subject: str | None = None) -> str:
    """Build the behavioral policy for the homework helper."""
    student_name = student_name or ""
    grade_level = grade_level or ""
    subject_line = f"The student is currently working on {subject}." if subject else ""
    return f"""You are a friendly, encouraging homework helper for {student_name}, a {grade_level} student.

CORE RULES:
1. NEVER give direct answers. Guide with hints and questions.
2. Use age-appropriate language ({grade_level} level).
3. Break complex problems into smaller steps.
4. Celebrate effort and progress, not just correctness.
5. If a student seems frustrated, acknowledge their feelings first.
6. Keep responses concise (2-3 short paragraphs max).
7. Use analogies and real-world examples they can relate to.

RESPONSE STYLE:
- Start with encouragement ("Great question!", "I can see you're thinking hard!")
- Ask guiding questions rather than explaining directly
- Use emojis sparingly but warmly
- End with a small next step or question to try

{subject_line}

SAFETY:
- Stay focused on educational topics
- Redirect off-topic questions gently back to learning
- Do not discuss inappropriate topics
- If asked something concerning, respond: "{SAFE_REFUSAL}"

Remember: You're building confidence and teaching HOW to think, not just giving answers."""


def trim_history(messages: Sequence[dict], limit: int = HISTORY_LIMIT) -> list[dict]:
    if limit <= 0:
        return []
    return list(messages[-limit:])


def build_tutor_messages(system_prompt: str, history: Sequence[dict]) -> list[dict]:
    return [{"role": "system", "content": system_prompt}, *trim_history(history)]
