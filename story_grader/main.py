from fastapi import FastAPI

from story_grader.api.exceptions.handlers import register_exception_handlers
from story_grader.api.routes.grading import router as grading_router
from story_grader.api.routes.questions import router as questions_router
from story_grader.settings import settings


app = FastAPI(
    title="Story Grader",
    version=settings.API_VERSION,
    debug=settings.DEBUG,
)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}

app.include_router(grading_router)
app.include_router(questions_router)
register_exception_handlers(app)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("story_grader.main:app", host="0.0.0.0", port=8000)
