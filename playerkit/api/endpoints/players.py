from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from playerkit.api.observability.metrics import PLAYER_RENDERS_TOTAL
from playerkit.core.observability.metrics import inc_named
from playerkit.core.providers import PlayerProvider
from playerkit.core.services import get_services

router = APIRouter(prefix="/api/v1/players", tags=["players"])


class RenderRequest(BaseModel):
    provider: Optional[str] = None
    config: Dict[str, Any] = Field(default_factory=dict)
    wraptag: Optional[str] = None
    class_: Optional[str] = Field(default=None, alias="class")

    model_config = {"populate_by_name": True}


class MatchRequest(BaseModel):
    provider: Optional[str] = None
    play: str = ""


def normalize_config(raw: Dict[str, Any]) -> Dict[str, str]:
    """Instance attributes are strings; JSON booleans become "1"/"0"."""
    out: Dict[str, str] = {}
    for key, value in (raw or {}).items():
        if value is None:
            out[str(key)] = ""
        elif isinstance(value, bool):
            out[str(key)] = "1" if value else "0"
        else:
            out[str(key)] = str(value)
    return out


def _provider(name: Optional[str], play: Optional[str]) -> PlayerProvider:
    reg = get_services().registry
    if name:
        # unknown names raise ProviderNotFoundError, mapped to 404 by SafeErrorMiddleware
        return reg.get(name)

    provider = reg.detect(play)
    if provider is None:
        raise HTTPException(status_code=422, detail="No provider recognizes the given play value")
    return provider


@router.post("/render", response_class=HTMLResponse)
def render(req: RenderRequest, request: Request):
    config = normalize_config(req.config)
    provider = _provider(req.provider, config.get("play"))
    request.state.player_provider = provider.name
    services = get_services()

    html = provider.get_player(config, services.context(), req.wraptag, req.class_)

    outcome = "rendered" if html else "empty"
    PLAYER_RENDERS_TOTAL.labels(provider=provider.name, outcome=outcome).inc()
    inc_named(f"player_render_{outcome}")

    return HTMLResponse(content=html)


@router.post("/match")
def match(req: MatchRequest):
    if req.provider:
        provider = _provider(req.provider, req.play)
        return {"matches": bool(provider.matches(req.play)), "provider": provider.name}

    provider = get_services().registry.detect(req.play)
    return {"matches": provider is not None, "provider": provider.name if provider else None}
