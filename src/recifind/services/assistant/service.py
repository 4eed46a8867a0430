"""Assistant service for recipe chat and quiz generation.

Wraps a single LLM call per operation and folds every collaborator failure
into one assistant error type for the HTTP layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from recifind.llm.exceptions import LLMError
from recifind.llm.prompts.chat import RecipeChatPrompt
from recifind.llm.prompts.quiz import (
    QUIZ_QUESTION_COUNT,
    QuizResult,
    RecipeQuizPrompt,
)
from recifind.observability.logging import get_logger
from recifind.schemas.ai import QuizQuestion
from recifind.services.assistant.exceptions import (
    ChatGenerationError,
    QuizGenerationError,
)


if TYPE_CHECKING:
    from recifind.llm.client.protocol import LLMClientProtocol

logger = get_logger(__name__)


class AssistantService:
    """Service answering recipe questions and writing recipe quizzes.

    Each call issues exactly one request to the LLM. Nothing is cached or
    retried.
    """

    def __init__(self, llm_client: LLMClientProtocol) -> None:
        """Initialize the service.

        Args:
            llm_client: Client used for every generation request.
        """
        self._llm_client = llm_client
        self._chat_prompt = RecipeChatPrompt()
        self._quiz_prompt = RecipeQuizPrompt()

    async def chat(self, user_message: str, recipe_context: Any) -> str:
        """Answer a user's question about a recipe.

        Args:
            user_message: The user's question.
            recipe_context: Recipe details, forwarded verbatim.

        Returns:
            The generated answer text.

        Raises:
            ChatGenerationError: If the LLM call fails.
        """
        prompt = self._chat_prompt
        try:
            result = await self._llm_client.generate(
                prompt.format(user_message=user_message, recipe_context=recipe_context),
                system=prompt.system_prompt,
                options=prompt.get_options(),
            )
        except LLMError as e:
            logger.warning("Chat generation failed", prompt=prompt.name, error=str(e))
            msg = f"Chat generation failed: {e}"
            raise ChatGenerationError(msg, cause=e) from e

        logger.info(
            "Generated chat response",
            model=result.model,
            prompt_tokens=result.prompt_tokens,
            completion_tokens=result.completion_tokens,
        )
        return result.raw_response

    async def generate_quiz(self, recipe_context: Any) -> list[QuizQuestion]:
        """Generate a multiple-choice quiz about a recipe.

        Args:
            recipe_context: Recipe details, forwarded verbatim.

        Returns:
            The validated quiz questions.

        Raises:
            QuizGenerationError: If the LLM call fails or its reply does not
                validate as a quiz.
        """
        prompt = self._quiz_prompt
        try:
            result = await self._llm_client.generate_structured(
                prompt.format(recipe_context=recipe_context),
                QuizResult,
                system=prompt.system_prompt,
                response_schema=prompt.response_schema,
                options=prompt.get_options(),
            )
        except LLMError as e:
            logger.warning("Quiz generation failed", prompt=prompt.name, error=str(e))
            msg = f"Quiz generation failed: {e}"
            raise QuizGenerationError(msg, cause=e) from e

        questions = result.root
        if len(questions) != QUIZ_QUESTION_COUNT:
            logger.warning(
                "Quiz has unexpected question count",
                expected=QUIZ_QUESTION_COUNT,
                actual=len(questions),
            )

        logger.info("Generated quiz", count=len(questions))
        return [
            QuizQuestion(
                question=q.question,
                options=q.options,
                correct_answer=q.correct_answer,
                explanation=q.explanation,
            )
            for q in questions
        ]
