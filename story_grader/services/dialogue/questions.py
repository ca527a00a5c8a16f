# story_grader/services/dialogue/questions.py
from typing import List

from langchain_core.runnables import Runnable

from story_grader.logging_config import app_logger
from story_grader.schema.grading import Question
from story_grader.schema.questions import QuestionGenerationRequest
from story_grader.services.dialogue.completion import complete
from story_grader.services.dialogue.parsers import parse_questions
from story_grader.services.dialogue.prompts import build_questions_prompt


async def generate_questions(
        request: QuestionGenerationRequest,
        chain: Runnable
) -> List[Question]:
    """Draft a question form for a story"""
    response = await complete(chain, build_questions_prompt(request))
    app_logger.debug(f"Generated questions: {response}")

    questions = parse_questions(response)
    if not questions:
        app_logger.warning(
            f"No questions could be parsed for story '{request.story_title}'"
        )
    return questions
