"""Recipe chat prompt.

Free-text question answering about a single recipe supplied by the client.
"""

from __future__ import annotations

from typing import Any, ClassVar

import orjson
from pydantic import BaseModel

from .base import BasePrompt


def serialize_recipe_context(recipe_context: Any) -> str:
    """Serialize caller-supplied recipe data to compact JSON.

    The payload is passed through verbatim; non-JSON values fall back to str().
    """
    return orjson.dumps(recipe_context, default=str).decode()


class RecipeChatPrompt(BasePrompt[BaseModel]):
    """Prompt for answering a user's question about a recipe.

    Example input:
        recipe_context={"title": "Soup", "ingredients": ["water", "salt"]}
        user_message="Can I make this vegan?"
    """

    system_prompt: ClassVar[str | None] = (
        "You are a helpful cooking assistant named Recifind AI."
    )

    def format(self, **kwargs: Any) -> str:
        """Format the prompt with the recipe and the user's question.

        Args:
            **kwargs: Must contain 'user_message'; 'recipe_context' may be any
                JSON-serializable value.

        Raises:
            ValueError: If 'user_message' is missing.
        """
        user_message = kwargs.get("user_message")
        if user_message is None:
            msg = "Missing required 'user_message' argument"
            raise ValueError(msg)
        recipe_json = serialize_recipe_context(kwargs.get("recipe_context", {}))
        return (
            "You are helping a user with the following recipe details: "
            f"{recipe_json}. "
            f'Respond to the user\'s question: "{user_message}"'
        )
