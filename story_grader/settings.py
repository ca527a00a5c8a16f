from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # FastAPI
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Groq
    GROQ_API_KEY: str
    LLM_TIMEOUT: Optional[float] = None

    # Models
    GRADING_MODEL: str = "moonshotai/kimi-k2-instruct"
    FEEDBACK_MODEL: str = "llama-3.1-8b-instant"
    QUESTIONS_MODEL: str = "moonshotai/kimi-k2-instruct"

    class Config:
        env_file = ".env"


settings = Settings()
