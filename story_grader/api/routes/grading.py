# story_grader/api/routes/grading.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from langchain_core.runnables import Runnable

from story_grader.api.dependencies.chains import (
    get_feedback_chain,
    get_grading_chain,
)
from story_grader.logging_config import app_logger
from story_grader.schema.grading import (
    FeedbackRequest,
    FeedbackResult,
    GradingFailure,
    GradingRequest,
    GradingResult,
)
from story_grader.services.dialogue.grading import (
    DEFAULT_FEEDBACK,
    auto_grade_submission,
    generate_feedback,
)

router = APIRouter()


@router.post(
    "/auto-grade",
    response_model=GradingResult,
    responses={500: {"model": GradingFailure}},
)
async def auto_grade(
    request: GradingRequest,
    chain: Runnable = Depends(get_grading_chain)
):
    """
    Grade a student's answers to a story form.
    Answers with a 500 and a fixed fallback grade if the provider fails.
    """
    app_logger.info(
        f"Auto-grading request received: story={request.story_title!r} "
        f"difficulty={request.difficulty.value} grade_level={request.grade_level}"
    )
    try:
        result = await auto_grade_submission(request, chain)
    except Exception as e:
        app_logger.error(f"Error in auto-grading: {e}")
        return JSONResponse(
            status_code=500,
            content=GradingFailure().model_dump()
        )

    app_logger.info(f"Auto-grading completed: {result}")
    return result


@router.post("/generate-feedback", response_model=FeedbackResult)
async def create_feedback(
    request: FeedbackRequest,
    chain: Runnable = Depends(get_feedback_chain)
) -> FeedbackResult:
    """
    Write a short encouraging comment for a student.
    Provider failures are masked with DEFAULT_FEEDBACK and a 200 so the
    submission flow is never blocked.
    """
    app_logger.info(
        f"Generate feedback request received: story={request.story_title!r} "
        f"student={request.student_name!r} grade={request.grade}"
    )
    try:
        feedback = await generate_feedback(request, chain)
    except Exception as e:
        app_logger.error(f"Error generating feedback: {e}")
        return FeedbackResult(feedback=DEFAULT_FEEDBACK)

    app_logger.info(f"Generated feedback: {feedback}")
    return FeedbackResult(feedback=feedback)
