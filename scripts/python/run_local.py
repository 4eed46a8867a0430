"""Script to run the application in the local configuration."""

import uvicorn

from recifind.core.config import get_settings


def main() -> None:
    """Run the server with auto-reload on the configured port."""
    settings = get_settings()
    uvicorn.run(
        "recifind.main:app",
        host="127.0.0.1",
        port=settings.server_port,
        reload=True,
    )


if __name__ == "__main__":
    main()
