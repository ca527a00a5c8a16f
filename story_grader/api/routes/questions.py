# story_grader/api/routes/questions.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from langchain_core.runnables import Runnable

from story_grader.api.dependencies.chains import get_questions_chain
from story_grader.logging_config import app_logger
from story_grader.schema.questions import (
    QuestionGenerationRequest,
    QuestionGenerationResponse,
)
from story_grader.services.dialogue.questions import generate_questions

router = APIRouter()


@router.post("/generate-questions", response_model=QuestionGenerationResponse)
async def create_questions(
    request: QuestionGenerationRequest,
    chain: Runnable = Depends(get_questions_chain)
):
    """Draft a question form for a story with the completion provider"""
    app_logger.info(f"Generating questions for: {request.story_title!r}")

    if not request.is_complete():
        return JSONResponse(
            status_code=400,
            content={"error": "Missing required fields"}
        )

    try:
        questions = await generate_questions(request, chain)
    except Exception as e:
        app_logger.error(f"Error generating questions: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to generate questions"}
        )

    return QuestionGenerationResponse(questions=questions)
