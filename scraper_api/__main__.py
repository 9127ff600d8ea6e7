"""`python -m scraper_api` 진입점"""
import uvicorn

from scraper_api.core.config import settings


def main() -> None:
    uvicorn.run(
        "scraper_api.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
