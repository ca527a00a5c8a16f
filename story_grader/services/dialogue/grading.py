# story_grader/services/dialogue/grading.py
from langchain_core.runnables import Runnable

from story_grader.logging_config import app_logger
from story_grader.schema.grading import (
    FeedbackRequest,
    GradingRequest,
    GradingResult,
)
from story_grader.services.dialogue.completion import complete
from story_grader.services.dialogue.parsers import parse_grading_response
from story_grader.services.dialogue.prompts import (
    build_feedback_prompt,
    build_grading_prompt,
)

DEFAULT_FEEDBACK = "أحسنت يا بطل! استمر في القراءة والتعلم 🌟"


async def auto_grade_submission(
        request: GradingRequest,
        chain: Runnable
) -> GradingResult:
    """
    Grade a submission with the completion provider.

    Provider failures propagate as CompletionProviderError; an unusable
    reply is resolved to defaults by parse_grading_response.
    """
    prompt = build_grading_prompt(request)

    app_logger.info("Sending grading request to completion provider")
    response = await complete(chain, prompt)
    app_logger.debug(f"Grading response: {response}")

    return parse_grading_response(response)


async def generate_feedback(
        request: FeedbackRequest,
        chain: Runnable
) -> str:
    """Short encouraging message for a student, DEFAULT_FEEDBACK if empty"""
    prompt = build_feedback_prompt(request)

    response = await complete(chain, prompt)

    return response.strip() or DEFAULT_FEEDBACK
