from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from playerkit.api.endpoints import health, players, preferences, providers
from playerkit.api.endpoints import metrics as metrics_ep
from playerkit.api.middleware.error_shaping import SafeErrorMiddleware
from playerkit.api.middleware.request_context import (
    RequestContextMiddleware,
    SecurityHeadersMiddleware,
)
from playerkit.core import settings

app = FastAPI(
    title="Player Embedding API",
    version="1.0.0",
)

# ------------------------------------------------------------
# Middleware stack (ORDER MATTERS)
# Starlette reverses add_middleware order: the LAST call is the OUTERMOST wrapper.
# Runtime order (outermost first):
#   SafeErrorMiddleware, CORSMiddleware, SecurityHeaders, RequestContext, handler
# ------------------------------------------------------------

app.add_middleware(RequestContextMiddleware)
app.add_middleware(SecurityHeadersMiddleware, enabled=settings.security_headers_enabled())
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SafeErrorMiddleware)


app.include_router(health.router)
app.include_router(metrics_ep.router)
app.include_router(providers.router)
app.include_router(players.router)
app.include_router(preferences.router)


@app.get("/health")
def health_check():
    return {"status": "healthy"}
