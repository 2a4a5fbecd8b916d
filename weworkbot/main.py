"""FastAPI application entry point.

Assembles the REST routers and configures logging on startup.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from weworkbot import __version__
from weworkbot.api.notice import router as notice_router
from weworkbot.config import get_settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Application lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle handler."""
    cfg = get_settings()
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")
    logger.info("weworkbot v%s starting up", __version__)

    yield

    logger.info("weworkbot shut down")


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------

app = FastAPI(
    title="weworkbot",
    version=__version__,
    description="Deliver monitoring alerts to WeWork group robots.",
    lifespan=lifespan,
)

app.include_router(notice_router)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Run the application via Uvicorn when invoked as ``python -m weworkbot.main``."""
    import uvicorn

    cfg = get_settings()
    uvicorn.run(
        "weworkbot.main:app",
        host=cfg.host,
        port=cfg.port,
        log_level=cfg.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
