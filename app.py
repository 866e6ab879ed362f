# app.py
"""
Thin entrypoint for the directory site.

Usage example:
    python app.py
    uvicorn app:app --reload
"""

import logging

from consultants import config
from consultants.main import app  # re-export FastAPI instance

logger = logging.getLogger(__name__)


def main():
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    logger.info("Server is running at http://localhost:%s", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
