"""AI assistant endpoints.

Provides:
- POST /ai/chat to ask a question about a recipe
- POST /ai/quiz to generate a multiple-choice quiz from a recipe

Annotations are evaluated eagerly here: the rate limit decorator wraps each
handler, and FastAPI resolves string annotations against the wrapper's module.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from recifind.api.dependencies import get_assistant_service
from recifind.core.exceptions import InternalServerException
from recifind.core.rate_limit import rate_limit_ai
from recifind.observability.logging import get_logger
from recifind.schemas.ai import ChatRequest, ChatResponse, QuizRequest, QuizResponse
from recifind.services.assistant.exceptions import (
    ChatGenerationError,
    QuizGenerationError,
)
from recifind.services.assistant.service import AssistantService


logger = get_logger(__name__)

router = APIRouter(prefix="/ai", tags=["AI"])

CHAT_FAILED_MESSAGE = "Failed to get response from AI."
QUIZ_FAILED_MESSAGE = "Failed to generate quiz."


def _failure_example(message: str) -> dict[int | str, dict[str, object]]:
    return {
        500: {
            "description": "The AI call failed or returned unusable output",
            "content": {
                "application/json": {
                    "example": {
                        "error": "INTERNAL_SERVER_ERROR",
                        "message": message,
                    }
                }
            },
        },
        429: {"description": "Rate limit exceeded"},
    }


@router.post(
    "/chat",
    response_model=ChatResponse,
    summary="Ask the assistant about a recipe",
    responses=_failure_example(CHAT_FAILED_MESSAGE),
)
@rate_limit_ai()
async def chat(
    request: Request,  # noqa: ARG001 - required by the rate limiter
    body: ChatRequest,
    service: Annotated[AssistantService, Depends(get_assistant_service)],
) -> ChatResponse:
    """Answer ``userMessage`` using ``recipeContext`` as background."""
    try:
        text = await service.chat(body.user_message, body.recipe_context)
    except ChatGenerationError as e:
        logger.opt(exception=e.cause or e).error("Gemini chat request failed")
        raise InternalServerException(CHAT_FAILED_MESSAGE) from e

    return ChatResponse(response=text)


@router.post(
    "/quiz",
    response_model=QuizResponse,
    summary="Generate a quiz about a recipe",
    responses=_failure_example(QUIZ_FAILED_MESSAGE),
)
@rate_limit_ai()
async def quiz(
    request: Request,  # noqa: ARG001 - required by the rate limiter
    body: QuizRequest,
    service: Annotated[AssistantService, Depends(get_assistant_service)],
) -> QuizResponse:
    """Generate five multiple-choice questions from ``recipeContext``."""
    try:
        questions = await service.generate_quiz(body.recipe_context)
    except QuizGenerationError as e:
        logger.opt(exception=e.cause or e).error("Gemini quiz request failed")
        raise InternalServerException(QUIZ_FAILED_MESSAGE) from e

    return QuizResponse(quiz=questions)
