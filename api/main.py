"""FastAPI application for the golf trip scoring engine.

Stateless: every request carries the full score snapshot and gets freshly
recomputed results back.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.config import cors_origins, log_level
from scoring.exceptions import ScoringError

logger = logging.getLogger(__name__)


async def scoring_error_handler(request: Request, exc: ScoringError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc), "code": exc.code})


def create_app() -> FastAPI:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Golf Trip Scoring API",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ScoringError, scoring_error_handler)

    from api.routers import handicaps, matches, skins, tilt
    app.include_router(handicaps.router, prefix="/api/handicaps", tags=["handicaps"])
    app.include_router(matches.router, prefix="/api/matches", tags=["matches"])
    app.include_router(skins.router, prefix="/api/skins", tags=["skins"])
    app.include_router(tilt.router, prefix="/api/tilt", tags=["tilt"])

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
