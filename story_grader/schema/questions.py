# story_grader/schema/questions.py
from typing import List, Optional

from pydantic import BaseModel, Field

from story_grader.schema.grading import Difficulty, Question


class QuestionGenerationRequest(BaseModel):
    """
    Story data used to draft a question form.
    Every field is optional here so the route can answer a missing field
    with a 400 instead of FastAPI's 422.
    """
    story_content: Optional[str] = Field(default=None, alias="storyContent")
    story_title: Optional[str] = Field(default=None, alias="storyTitle")
    difficulty: Optional[Difficulty] = None
    grade_level: Optional[int] = Field(default=None, alias="gradeLevel")

    class Config:
        populate_by_name = True

    def is_complete(self) -> bool:
        return bool(
            self.story_content
            and self.story_title
            and self.difficulty
            and self.grade_level
        )


class QuestionGenerationResponse(BaseModel):
    questions: List[Question]
