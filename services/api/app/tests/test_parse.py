import pytest

from app.errors import ParseError
from app.parse import parse_lesson

BODY = '{"title": "T", "content": {"hook": "h"}, "interactive_data": {"questions": []}, "extra": 1}'


def test_plain_json():
    lesson = parse_lesson(BODY)
    assert lesson["title"] == "T"
    assert lesson["extra"] == 1


def test_fenced_json():
    assert parse_lesson(f"```json\n{BODY}\n```")["content"]["hook"] == "h"


@pytest.mark.parametrize("text", ["not json", "[1, 2]", '{"title": "only"}', ""])
def test_rejects_bad_payloads(text):
    with pytest.raises(ParseError) as exc:
        parse_lesson(text)
    assert exc.value.public_message == "Failed to generate spark"
    assert exc.value.status_code == 500
