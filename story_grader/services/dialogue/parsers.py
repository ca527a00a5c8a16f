# story_grader/services/dialogue/parsers.py
import re

from typing import List, Optional

from story_grader.schema.grading import GradingResult, Question, QuestionType

MIN_GRADE = 50
MAX_GRADE = 100
DEFAULT_GRADE = 85
DEFAULT_GRADING_FEEDBACK = "تم التقييم تلقائياً بواسطة الذكاء الاصطناعي"

_GRADE_PATTERN = re.compile(r"GRADE:\s*([0-9]+)", re.IGNORECASE)
# Rest of the labelled line plus any continuation lines up to a blank line
_FEEDBACK_PATTERN = re.compile(r"FEEDBACK:\s*([^\n]+(?:\n[^\n]+)*)", re.IGNORECASE)
_OPTION_SEPARATOR = re.compile(r"[،,]")


def clamp_grade(value: int) -> int:
    return min(MAX_GRADE, max(MIN_GRADE, value))


def _to_grade(digits: str) -> int:
    # int() refuses very long digit strings; anything past three
    # significant digits is above MAX_GRADE anyway
    digits = digits.lstrip("0") or "0"
    return MAX_GRADE + 1 if len(digits) > 3 else int(digits)


def parse_grading_response(response: Optional[str]) -> GradingResult:
    """
    Turn a free-text grading reply into a GradingResult.

    Never raises: a missing GRADE line yields DEFAULT_GRADE, a missing
    FEEDBACK line yields DEFAULT_GRADING_FEEDBACK, and the grade is always
    clamped into [MIN_GRADE, MAX_GRADE].
    """
    response = response or ""

    grade_match = _GRADE_PATTERN.search(response)
    feedback_match = _FEEDBACK_PATTERN.search(response)

    grade = _to_grade(grade_match.group(1)) if grade_match else DEFAULT_GRADE
    feedback = feedback_match.group(1).strip() if feedback_match else ""

    return GradingResult(
        grade=clamp_grade(grade),
        feedback=feedback or DEFAULT_GRADING_FEEDBACK,
    )


def _parse_question_type(value: str) -> QuestionType:
    try:
        return QuestionType(value.strip().lower())
    except ValueError:
        return QuestionType.SHORT_ANSWER


def parse_questions(response: Optional[str]) -> List[Question]:
    """
    Parse the ID/TEXT/TYPE/REQUIRED/OPTIONS blocks of a question
    generation reply. Lines before the first ID are ignored.
    """
    questions: List[Question] = []
    current: Optional[dict] = None

    for raw_line in (response or "").splitlines():
        line = raw_line.strip()
        if not line:
            continue

        label, _, value = line.partition(":")
        label = label.strip().upper()
        value = value.strip()

        if label == "ID":
            if current:
                questions.append(Question(**current))
            current = {
                "id": value,
                "text_arabic": "",
                "type": QuestionType.SHORT_ANSWER,
                "required": True,
                "options": [],
            }
        elif current is None:
            continue
        elif label == "TEXT":
            current["text_arabic"] = value
        elif label == "TYPE":
            current["type"] = _parse_question_type(value)
        elif label == "REQUIRED":
            current["required"] = value.lower() == "true"
        elif label == "OPTIONS":
            options = value.strip("[]")
            current["options"] = [
                option.strip()
                for option in _OPTION_SEPARATOR.split(options)
                if option.strip()
            ]

    if current:
        questions.append(Question(**current))

    return questions
