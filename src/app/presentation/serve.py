import uvicorn

from src.setup.api_config import get_api_settings
from src.setup.logging_config import configure_logging


def main() -> None:
    settings = get_api_settings()
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "src.app.presentation.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
