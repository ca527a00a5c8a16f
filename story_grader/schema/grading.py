# story_grader/schema/grading.py
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class QuestionType(str, Enum):
    SHORT_ANSWER = "short_answer"
    LONG_ANSWER = "long_answer"
    MULTIPLE_CHOICE = "multiple_choice"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def arabic(self) -> str:
        return {
            Difficulty.EASY: "سهل",
            Difficulty.MEDIUM: "متوسط",
            Difficulty.HARD: "صعب",
        }[self]


class Question(BaseModel):
    id: str
    text_arabic: str
    type: QuestionType = QuestionType.SHORT_ANSWER
    required: bool = True
    options: List[str] = Field(default_factory=list)


class GradingRequest(BaseModel):
    """Submitted answers plus the story they were written about"""
    questions: List[Question]
    answers: Dict[str, str] = Field(default_factory=dict)
    story_content: str = Field(alias="storyContent")
    story_title: str = Field(alias="storyTitle")
    difficulty: Difficulty
    grade_level: int = Field(alias="gradeLevel")

    class Config:
        populate_by_name = True


class GradingResult(BaseModel):
    grade: int = Field(ge=50, le=100)
    feedback: str


class GradingFailure(BaseModel):
    """Body returned by /auto-grade when the provider call fails"""
    error: str = "Failed to auto-grade submission"
    grade: int = 75
    feedback: str = "حدث خطأ في التقييم التلقائي"


class FeedbackRequest(BaseModel):
    questions: List[Question]
    answers: Dict[str, str] = Field(default_factory=dict)
    story_title: str = Field(alias="storyTitle")
    student_name: str = Field(alias="studentName")
    grade: Optional[int] = None

    class Config:
        populate_by_name = True


class FeedbackResult(BaseModel):
    feedback: str
