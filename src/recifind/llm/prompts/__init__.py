"""LLM prompt templates."""

from recifind.llm.prompts.base import BasePrompt
from recifind.llm.prompts.chat import RecipeChatPrompt
from recifind.llm.prompts.quiz import (
    QUIZ_QUESTION_COUNT,
    QUIZ_RESPONSE_SCHEMA,
    QuizQuestionResult,
    QuizResult,
    RecipeQuizPrompt,
)


__all__ = [
    "QUIZ_QUESTION_COUNT",
    "QUIZ_RESPONSE_SCHEMA",
    "BasePrompt",
    "QuizQuestionResult",
    "QuizResult",
    "RecipeChatPrompt",
    "RecipeQuizPrompt",
]
