"""LLM client implementations."""

from recifind.llm.client.gemini import GeminiClient
from recifind.llm.client.protocol import LLMClientProtocol


__all__ = [
    "GeminiClient",
    "LLMClientProtocol",
]
