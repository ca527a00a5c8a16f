# story_grader/api/dependencies/chains.py
from functools import lru_cache

from langchain_core.runnables import Runnable

from story_grader.services.dialogue.chains import (
    create_feedback_chain,
    create_grading_chain,
    create_questions_chain,
)


# Chains are built once per process and shared; they hold no request state.

@lru_cache
def get_grading_chain() -> Runnable:
    return create_grading_chain()


@lru_cache
def get_feedback_chain() -> Runnable:
    return create_feedback_chain()


@lru_cache
def get_questions_chain() -> Runnable:
    return create_questions_chain()
