"""Application lifecycle events."""

from recifind.core.events.lifespan import lifespan


__all__ = ["lifespan"]
