"""Run the users service with uvicorn: ``python -m users_service``."""

import uvicorn

from users_service.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "users_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
