"""Run the API with uvicorn: ``python -m hrms``."""

import uvicorn

from hrms.config import settings


def main() -> None:
    uvicorn.run(
        "hrms.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
