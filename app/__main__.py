"""Run the API server: ``python -m app``."""
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from .core.config import get_settings


def main() -> None:
    load_dotenv(Path(__file__).resolve().parent.parent / ".env")
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
    )


if __name__ == "__main__":
    main()
