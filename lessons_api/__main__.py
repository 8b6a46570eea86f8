"""Run the API with uvicorn: ``python -m lessons_api``."""
import uvicorn

from lessons_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("lessons_api.app:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
