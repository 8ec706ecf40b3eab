import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from outage_feed.config import settings
from outage_feed.schemas.outage import ServerStatus
from outage_feed.services.ausgrid_client import UpstreamError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Ausgrid Outage Feed",
    description="Normalized, time-windowed view of Ausgrid planned outages",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    return JSONResponse(status_code=502, content=exc.to_body())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "reason": str(exc) or type(exc).__name__},
    )


from outage_feed.routers import outage  # noqa: E402

app.include_router(outage.router)


@app.get("/", response_model=ServerStatus)
async def root():
    return ServerStatus()


@app.get("/health")
async def health():
    return {"status": "ok"}
