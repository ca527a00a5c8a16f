# story_grader/services/dialogue/completion.py
from langchain_core.runnables import Runnable

from story_grader.logging_config import app_logger


class CompletionProviderError(Exception):
    """The completion provider could not be reached or returned an error"""


async def complete(chain: Runnable, prompt: str) -> str:
    """
    Send one prompt through a completion chain and return the reply text.

    Exactly one attempt is made. Any failure is logged and re-raised as
    CompletionProviderError so callers handle a single exception type.
    """
    try:
        response = await chain.ainvoke({"prompt": prompt})
    except Exception as e:
        app_logger.exception(f"Completion provider call failed: {e}")
        raise CompletionProviderError(str(e)) from e

    return response or ""
