"""FastAPI application factory"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from creditsea_viewer.api.middleware import RequestIDMiddleware, MetricsMiddleware
from creditsea_viewer.api.v1 import viewer, view
from creditsea_viewer.domain.state import ViewerState, create_viewer_state
from creditsea_viewer.infrastructure.observability.logging import setup_logging
from creditsea_viewer.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(state: ViewerState | None = None) -> FastAPI:
    """Create and configure the viewer application around one state container"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Initial population, once per start-up
        await app.state.viewer.store.load()
        yield

    app = FastAPI(
        title="CreditSea Report Viewer",
        description="Upload, search and inspect parsed credit reports",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.viewer = state or create_viewer_state()

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register routers
    app.include_router(viewer.router, tags=["viewer"])
    app.include_router(view.router, prefix="/api", tags=["view"])

    return app


app = create_app()
