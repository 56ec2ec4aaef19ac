"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from bitbucket_relay.config import get_settings
from bitbucket_relay.logging_config import configure_logging
from bitbucket_relay.router import router as bitbucket_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load config on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield


app = FastAPI(
    title="Bitbucket Relay",
    lifespan=lifespan,
)
app.include_router(bitbucket_router)


@app.get("/health")
async def health():
    """Health check endpoint for container platforms and local development."""
    return {
        "status": "ok",
        "service": "bitbucket-relay",
        "version": "0.1.0",
    }


def main() -> None:
    """Run the app with uvicorn on the configured port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)
