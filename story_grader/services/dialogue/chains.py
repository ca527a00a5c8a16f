# story_grader/services/dialogue/chains.py
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.runnables import Runnable
from langchain_groq import ChatGroq

from story_grader.settings import settings


def create_chat_model(
        model_name: str,
        temperature: float,
        max_tokens: int
) -> ChatGroq:
    """Initialize a Groq chat model. No retries: one attempt per request."""
    return ChatGroq(
        model=model_name,
        temperature=temperature,
        max_tokens=max_tokens,
        api_key=settings.GROQ_API_KEY,
        timeout=settings.LLM_TIMEOUT,
        max_retries=0,
        streaming=False,
    )


def create_completion_chain(llm) -> Runnable:
    """Single user message in, plain text of the first choice out"""
    prompt = ChatPromptTemplate.from_messages([("human", "{prompt}")])
    return prompt | llm | StrOutputParser()


def create_grading_chain() -> Runnable:
    # Low temperature keeps scores consistent between submissions
    return create_completion_chain(
        create_chat_model(settings.GRADING_MODEL, temperature=0.3, max_tokens=4096)
    )


def create_feedback_chain() -> Runnable:
    return create_completion_chain(
        create_chat_model(settings.FEEDBACK_MODEL, temperature=0.7, max_tokens=200)
    )


def create_questions_chain() -> Runnable:
    return create_completion_chain(
        create_chat_model(settings.QUESTIONS_MODEL, temperature=0.7, max_tokens=4096)
    )
