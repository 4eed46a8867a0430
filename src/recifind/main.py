"""Application entry point.

Usage:
    # Development with auto-reload
    uvicorn recifind.main:app --reload --port 5001

    # Production
    python -m recifind.main
"""

from recifind.factory import create_app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    from recifind.core.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "recifind.main:app",
        host=settings.server.host,
        port=settings.server_port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )
