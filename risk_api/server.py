"""
Entry point that serves the API with uvicorn.
"""

import uvicorn

from risk_api.core.config import settings


def main():
    # log_config=None leaves uvicorn's loggers to the loguru intercept handler
    uvicorn.run(
        "risk_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
