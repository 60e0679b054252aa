from __future__ import annotations

from fastapi import APIRouter
from starlette.responses import JSONResponse

from playerkit.core.observability.metrics import inc_named
from playerkit.core.services import get_services

router = APIRouter()


@router.get("/health/live")
def live():
    inc_named("health_live")
    return {"status": "ok"}


@router.get("/health/ready")
def ready():
    """Ready once at least one provider is loaded."""
    inc_named("health_ready")

    problems: list[str] = []
    try:
        if not get_services().registry.names():
            problems.append("no_providers")
    except Exception as e:
        problems.append(f"providers_failed:{type(e).__name__}")

    if problems:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "problems": problems},
        )

    return {"status": "ready"}
