# story_grader/api/exceptions/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from story_grader.logging_config import app_logger


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    app_logger.exception(
        f"Unhandled error on {request.method} {request.url.path}: {exc}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(Exception, unhandled_exception_handler)
