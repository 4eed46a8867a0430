"""Recipe quiz prompt for LLM-generated multiple-choice questions.

Defines the prompt, the Gemini response schema and the output models that
the returned JSON is validated into.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

from .base import BasePrompt
from .chat import serialize_recipe_context


QUIZ_QUESTION_COUNT = 5
QUIZ_OPTION_COUNT = 4


class QuizQuestionResult(BaseModel):
    """A single multiple-choice question as returned by the model."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    question: str = Field(..., min_length=1, description="The question text")
    options: list[str] = Field(
        ...,
        description="Exactly four answer options",
    )
    correct_answer: str = Field(
        ...,
        alias="correctAnswer",
        description="The correct option, copied verbatim from options",
    )
    explanation: str = Field(..., description="Why the answer is correct")

    @model_validator(mode="after")
    def _check_options(self) -> QuizQuestionResult:
        if len(self.options) != QUIZ_OPTION_COUNT:
            msg = f"expected {QUIZ_OPTION_COUNT} options, got {len(self.options)}"
            raise ValueError(msg)
        if len(set(self.options)) != QUIZ_OPTION_COUNT:
            msg = "options must be distinct"
            raise ValueError(msg)
        if self.correct_answer not in self.options:
            msg = "correctAnswer is not one of the options"
            raise ValueError(msg)
        return self


class QuizResult(RootModel[list[QuizQuestionResult]]):
    """Output schema: the bare JSON array of questions."""


# Gemini's OpenAPI-subset schema uses upper-case type names.
QUIZ_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "question": {"type": "STRING"},
            "options": {"type": "ARRAY", "items": {"type": "STRING"}},
            "correctAnswer": {"type": "STRING"},
            "explanation": {"type": "STRING"},
        },
        "required": ["question", "options", "correctAnswer", "explanation"],
        "propertyOrdering": ["question", "options", "correctAnswer", "explanation"],
    },
}


class RecipeQuizPrompt(BasePrompt[QuizResult]):
    """Prompt for generating a five-question quiz about a recipe.

    Example output:
        [
            {
                "question": "How long should the soup simmer?",
                "options": ["5 minutes", "20 minutes", "1 hour", "3 hours"],
                "correctAnswer": "20 minutes",
                "explanation": "The recipe simmers the soup for 20 minutes."
            }
        ]
    """

    output_schema: ClassVar[type[BaseModel] | None] = QuizResult
    response_schema: ClassVar[dict[str, Any] | None] = QUIZ_RESPONSE_SCHEMA

    system_prompt: ClassVar[
        str | None
    ] = """You are Recifind AI, a cooking quiz writer.
You write short multiple-choice quizzes that test how well someone knows a recipe.

Rules:
1. Base every question only on the recipe details provided
2. Give each question exactly 4 distinct options
3. Exactly one option is correct; copy it verbatim into correctAnswer
4. Keep the explanation to one or two sentences"""

    def format(self, **kwargs: Any) -> str:
        """Format the prompt with the recipe data.

        Raises:
            ValueError: If 'recipe_context' is missing.
        """
        if "recipe_context" not in kwargs:
            msg = "Missing required 'recipe_context' argument"
            raise ValueError(msg)
        recipe_json = serialize_recipe_context(kwargs["recipe_context"])
        return f"""Create a quiz of exactly {QUIZ_QUESTION_COUNT} multiple-choice questions about this recipe.
Each question must have exactly {QUIZ_OPTION_COUNT} distinct options, one correct answer taken verbatim from the options, and a short explanation.
Return a JSON array of objects with the fields "question", "options", "correctAnswer" and "explanation".

Recipe details:
{recipe_json}"""
