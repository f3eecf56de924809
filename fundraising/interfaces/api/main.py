# fundraising/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from fundraising.infrastructure.config import get_settings
from fundraising.infrastructure.log import log
from fundraising.interfaces.api.middleware.access_log import AccessLogMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()  # invalid env fails here, before the first request
    log(f"API started (default currency {settings.default_currency})")
    yield
    log("API stopped")


app = FastAPI(
    title="Fundraising Campaign API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(AccessLogMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

from fundraising.interfaces.api.routes.campaign_routes import router as campaign_router  # noqa: E402
from fundraising.interfaces.api.routes.status_routes import router as status_router  # noqa: E402
from fundraising.interfaces.api.routes.target_routes import router as target_router  # noqa: E402
from fundraising.interfaces.api.routes.user_routes import router as user_router  # noqa: E402

app.include_router(status_router, prefix="/api")
app.include_router(target_router, prefix="/api")
app.include_router(campaign_router, prefix="/api")
app.include_router(user_router, prefix="/api")
